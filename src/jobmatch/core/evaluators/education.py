"""Education requirement evaluator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ...schemas import CandidateProfile, JobPosting
from ..education import education_rank, highest_education


@dataclass
class EducationConfig:
    """Point values for the education term."""

    match_points: float = 20.0


class EducationEvaluator:
    """Compare the candidate's best education rank with the job's minimum."""

    method = "education"

    def __init__(self, *, config: EducationConfig | None = None) -> None:
        self._config = config or EducationConfig()

    def evaluate(self, candidate: dict[str, Any], context: dict[str, Any]) -> dict[str, Any]:
        profile = CandidateProfile.model_validate(candidate)
        job = JobPosting.model_validate(context["job"])
        required = job.requirements.education

        if not required:
            return {
                "method": self.method,
                "scores": {},
                "reasons": {},
                "metadata": {"status": "not_required"},
            }

        required_rank = education_rank(required)
        candidate_rank, matched_label = highest_education(
            profile.education_level,
            profile.extracted_education,
        )
        passes = candidate_rank >= required_rank

        reasons: dict[str, str] = {}
        if passes:
            reasons[self.method] = (
                f"Education: {matched_label or 'not specified'} (required: {required})"
            )

        return {
            "method": self.method,
            "scores": {"education": self._config.match_points if passes else 0.0},
            "reasons": reasons,
            "metadata": {
                "status": "ok" if passes else "below_required",
                "required": required,
                "required_rank": required_rank,
                "candidate_rank": candidate_rank,
                "matched_label": matched_label,
            },
        }
