"""Application eligibility gate."""

from __future__ import annotations

from dataclasses import dataclass

from ..schemas import CandidateProfile, JobPosting
from .education import education_rank


@dataclass(frozen=True, slots=True)
class EligibilityResult:
    """Outcome of the requirement check; ``reason`` is set on failure."""

    meets: bool
    reason: str | None = None


def meets_requirements(
    candidate_experience: float | None,
    candidate_education: str | None,
    required_min_experience: float | None,
    required_education: str | None,
) -> EligibilityResult:
    """Check minimum experience first, then minimum education."""
    experience = candidate_experience if candidate_experience and candidate_experience > 0 else 0.0

    if required_min_experience is not None and experience < required_min_experience:
        return EligibilityResult(
            meets=False,
            reason=(
                f"Insufficient experience: required {required_min_experience:g} years, "
                f"you have {experience:.1f} years"
            ),
        )

    if required_education:
        candidate_rank = education_rank(candidate_education)
        required_rank = education_rank(required_education)
        if candidate_rank < required_rank:
            return EligibilityResult(
                meets=False,
                reason=(
                    f"Required education not met: required {required_education}, "
                    f"you have {candidate_education or 'none'}"
                ),
            )

    return EligibilityResult(meets=True)


def check_eligibility(candidate: CandidateProfile, job: JobPosting) -> EligibilityResult:
    return meets_requirements(
        candidate.years_of_experience,
        candidate.education_level,
        job.requirements.min_experience,
        job.requirements.education,
    )


__all__ = ["EligibilityResult", "check_eligibility", "meets_requirements"]
