"""Evaluator implementations for the match scorer."""

from .experience import ExperienceEvaluator
from .education import EducationEvaluator
from .skills import SkillsEvaluator
from .bonus import BonusEvaluator

__all__ = [
    "ExperienceEvaluator",
    "EducationEvaluator",
    "SkillsEvaluator",
    "BonusEvaluator",
]
