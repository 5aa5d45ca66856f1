from __future__ import annotations

import pytest

from jobmatch.core import check_eligibility, meets_requirements
from jobmatch.schemas import CandidateProfile, JobPosting


def test_insufficient_experience_cites_both_values():
    result = meets_requirements(2, None, 5, None)

    assert result.meets is False
    assert "5" in result.reason
    assert "2" in result.reason


def test_education_below_required_rank_fails():
    result = meets_requirements(5, "Diploma", 5, "Laurea")

    assert result.meets is False
    assert "Laurea" in result.reason


def test_no_requirements_always_eligible():
    assert meets_requirements(0, None, None, None).meets is True
    assert meets_requirements(None, "Other", None, None).meets is True
    assert meets_requirements(0, None, None, None).reason is None


@pytest.mark.parametrize(
    ("candidate_education", "required_education"),
    [
        ("Laurea Magistrale", "Laurea"),
        ("laurea", "Laurea Triennale"),
        ("PhD", "master"),
        ("Diploma", "Diploma"),
        (None, "Other"),
        ("Diploma", "Some unknown certificate"),
    ],
)
def test_education_at_or_above_required_passes(candidate_education, required_education):
    result = meets_requirements(3, candidate_education, 1, required_education)

    assert result.meets is True
    assert result.reason is None


def test_unknown_candidate_education_ranks_lowest():
    result = meets_requirements(10, "Self taught", None, "Diploma")

    assert result.meets is False
    assert "Diploma" in result.reason


def test_negative_or_missing_experience_counts_as_zero():
    assert meets_requirements(-3, None, 0, None).meets is True
    failed = meets_requirements(None, None, 1, None)
    assert failed.meets is False
    assert "0.0" in failed.reason


def test_experience_checked_before_education():
    result = meets_requirements(1, "Diploma", 3, "Laurea Magistrale")

    assert result.meets is False
    assert "experience" in result.reason.lower()


def test_check_eligibility_reads_profile_and_job():
    candidate = CandidateProfile(
        candidate_id="C-1",
        years_of_experience=4,
        education_level="Laurea Triennale",
    )
    job = JobPosting(
        job_id="J-1",
        requirements={"min_experience": 3, "education": "Laurea"},
    )

    assert check_eligibility(candidate, job).meets is True
