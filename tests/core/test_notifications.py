from __future__ import annotations

from jobmatch.core import select_notification_recipients
from jobmatch.schemas import CandidateProfile, JobPosting


def candidate(candidate_id: str, **kwargs) -> CandidateProfile:
    defaults = {"is_verified": True, "years_of_experience": 5, "education_level": "Laurea"}
    defaults.update(kwargs)
    return CandidateProfile(candidate_id=candidate_id, **defaults)


def test_only_verified_eligible_candidates_selected():
    job = JobPosting(job_id="J-1", requirements={"min_experience": 3, "education": "Laurea"})
    pool = [
        candidate("ok-1"),
        candidate("unverified", is_verified=False),
        candidate("junior", years_of_experience=1),
        candidate("diploma", education_level="Diploma"),
        candidate("company", user_type="company"),
        candidate("ok-2"),
    ]

    recipients = select_notification_recipients(job, pool)

    assert [item.candidate_id for item in recipients] == ["ok-1", "ok-2"]


def test_recipient_limit_is_respected():
    job = JobPosting(job_id="J-2")
    pool = [candidate(f"C-{idx}") for idx in range(60)]

    assert len(select_notification_recipients(job, pool)) == 50
    assert len(select_notification_recipients(job, pool, limit=3)) == 3
    assert select_notification_recipients(job, pool, limit=0) == []
