from __future__ import annotations

import pytest

from jobmatch.core.evaluators import (
    BonusEvaluator,
    EducationEvaluator,
    ExperienceEvaluator,
    SkillsEvaluator,
)
from jobmatch.core.evaluators.bonus import BonusConfig
from jobmatch.core.evaluators.experience import ExperienceConfig
from jobmatch.core.evaluators.skills import SkillsConfig
from jobmatch.schemas import CandidateProfile, JobPosting


def build_candidate(**kwargs) -> dict:
    profile = CandidateProfile(candidate_id="C-100", **kwargs)
    return profile.model_dump(mode="python")


def build_context(**requirements) -> dict:
    description = requirements.pop("description", "")
    job = JobPosting(job_id="J-100", description=description, requirements=requirements)
    return {"job": job.model_dump(mode="python")}


def test_experience_penalty_scales_with_missing_years():
    evaluator = ExperienceEvaluator()

    result = evaluator.evaluate(
        build_candidate(years_of_experience=1.5),
        build_context(min_experience=4),
    )

    assert result["method"] == "experience"
    assert result["scores"]["experience"] == pytest.approx(-25.0)
    assert result["reasons"] == {}
    assert result["metadata"]["shortfall_years"] == pytest.approx(2.5)


def test_experience_config_override():
    evaluator = ExperienceEvaluator(
        config=ExperienceConfig(match_points=40, shortfall_penalty_per_year=5)
    )

    met = evaluator.evaluate(build_candidate(years_of_experience=2), build_context(min_experience=2))
    missed = evaluator.evaluate(build_candidate(years_of_experience=0), build_context(min_experience=2))

    assert met["scores"]["experience"] == pytest.approx(40.0)
    assert met["reasons"]["experience"] == "Experience: 2 years (required: 2)"
    assert missed["scores"]["experience"] == pytest.approx(-10.0)


def test_experience_reason_keeps_fractional_years():
    result = ExperienceEvaluator().evaluate(
        build_candidate(years_of_experience=2.75),
        build_context(min_experience=1.5),
    )

    assert result["reasons"]["experience"] == "Experience: 2.75 years (required: 1.5)"


def test_education_not_required_scores_nothing():
    result = EducationEvaluator().evaluate(
        build_candidate(education_level="PhD"),
        build_context(),
    )

    assert result["scores"] == {}
    assert result["metadata"]["status"] == "not_required"


def test_education_below_required_has_no_reason():
    result = EducationEvaluator().evaluate(
        build_candidate(education_level="Diploma"),
        build_context(education="Master"),
    )

    assert result["scores"]["education"] == 0.0
    assert result["reasons"] == {}
    assert result["metadata"]["candidate_rank"] == 2
    assert result["metadata"]["required_rank"] == 4


def test_skills_ignore_blank_entries():
    result = SkillsEvaluator().evaluate(
        build_candidate(skills=["", "  ", "Docker"]),
        build_context(skills=["docker", " "]),
    )

    assert result["scores"]["skills"] == pytest.approx(50.0)
    assert result["metadata"]["required"] == ["docker"]


def test_skills_config_override_changes_weight_and_preview():
    evaluator = SkillsEvaluator(config=SkillsConfig(max_points=100, reason_preview=1))

    result = evaluator.evaluate(
        build_candidate(skills=["aws", "gcp"]),
        build_context(skills=["AWS", "GCP", "Azure", "Kubernetes"]),
    )

    assert result["scores"]["skills"] == pytest.approx(50.0)
    assert result["reasons"]["skills"] == "Matching skills: AWS..."


def test_bonus_signals_are_independent():
    result = BonusEvaluator().evaluate(
        build_candidate(has_extracted_profile=True, certifications=["PMP"]),
        build_context(description="international"),
    )

    assert result["scores"] == {"extracted_profile": 5.0, "certification": 5.0}
    assert result["reasons"] == {}


def test_bonus_custom_language_keywords():
    evaluator = BonusEvaluator(config=BonusConfig(language_keywords=("global",)))

    result = evaluator.evaluate(
        build_candidate(spoken_languages=["Italian", "German"]),
        build_context(description="A Global company"),
    )

    assert result["scores"]["language"] == pytest.approx(10.0)
    assert result["metadata"]["language_keyword"] == "global"
    assert result["reasons"]["language"] == "Languages: Italian, German"
