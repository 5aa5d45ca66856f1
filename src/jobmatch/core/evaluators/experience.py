"""Experience requirement evaluator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ...schemas import CandidateProfile, JobPosting


@dataclass
class ExperienceConfig:
    """Point values for the experience term."""

    match_points: float = 30.0
    shortfall_penalty_per_year: float = 10.0


class ExperienceEvaluator:
    """Reward meeting the minimum experience, penalize each missing year."""

    method = "experience"

    def __init__(self, *, config: ExperienceConfig | None = None) -> None:
        self._config = config or ExperienceConfig()

    def evaluate(self, candidate: dict[str, Any], context: dict[str, Any]) -> dict[str, Any]:
        profile = CandidateProfile.model_validate(candidate)
        job = JobPosting.model_validate(context["job"])

        years = profile.years_of_experience
        required = job.requirements.min_experience or 0.0
        reasons: dict[str, str] = {}

        if years >= required:
            points = self._config.match_points
            reasons[self.method] = (
                f"Experience: {years:g} years (required: {required:g})"
            )
        else:
            points = -(required - years) * self._config.shortfall_penalty_per_year

        return {
            "method": self.method,
            "scores": {"experience": points},
            "reasons": reasons,
            "metadata": {
                "candidate_years": years,
                "required_years": required,
                "shortfall_years": max(required - years, 0.0),
            },
        }
