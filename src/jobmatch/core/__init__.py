"""Core matching engine components."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

# NOTE: keep imports explicit for export clarity.
from .education import EDUCATION_LEVELS, education_rank, highest_education
from .eligibility import EligibilityResult, check_eligibility, meets_requirements
from .evaluators import (
    BonusEvaluator,
    EducationEvaluator,
    ExperienceEvaluator,
    SkillsEvaluator,
)
from .experience import calculate_experience
from .matching import (
    EvaluationResult,
    MatchResult,
    MatchScorer,
    default_scorer,
    rank_jobs_for_candidate,
)
from .notifications import select_notification_recipients
from .profile import merge_extracted_cv


@runtime_checkable
class Evaluator(Protocol):
    """Evaluator contract for computing additive match points."""

    def evaluate(self, candidate: dict, context: dict) -> dict:
        """Return points, reasons and metadata for a candidate against ``context["job"]``."""


__all__ = [
    "BonusEvaluator",
    "EDUCATION_LEVELS",
    "EducationEvaluator",
    "EligibilityResult",
    "EvaluationResult",
    "Evaluator",
    "ExperienceEvaluator",
    "MatchResult",
    "MatchScorer",
    "SkillsEvaluator",
    "calculate_experience",
    "check_eligibility",
    "default_scorer",
    "education_rank",
    "highest_education",
    "meets_requirements",
    "merge_extracted_cv",
    "rank_jobs_for_candidate",
    "select_notification_recipients",
]
