"""Skill overlap evaluator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from ...schemas import CandidateProfile, JobPosting


@dataclass
class SkillsConfig:
    """Configuration for skill overlap scoring."""

    max_points: float = 50.0
    reason_preview: int = 3


class SkillsEvaluator:
    """Score the share of required skills covered by the candidate."""

    method = "skills"

    def __init__(self, *, config: SkillsConfig | None = None) -> None:
        self._config = config or SkillsConfig()

    def evaluate(self, candidate: dict[str, Any], context: dict[str, Any]) -> dict[str, Any]:
        profile = CandidateProfile.model_validate(candidate)
        job = JobPosting.model_validate(context["job"])

        required = [skill.strip() for skill in job.requirements.skills if skill and skill.strip()]
        owned = [skill.strip().lower() for skill in profile.skills if skill and skill.strip()]

        if not required or not owned:
            return {
                "method": self.method,
                "scores": {},
                "reasons": {},
                "metadata": {"status": "not_evaluated", "required": required, "matched": []},
            }

        matched = self._match_skills(required, owned)
        ratio = len(matched) / len(required)

        reasons: dict[str, str] = {}
        if matched:
            reasons[self.method] = self._describe(matched)

        return {
            "method": self.method,
            "scores": {"skills": ratio * self._config.max_points},
            "reasons": reasons,
            "metadata": {
                "status": "ok",
                "required": required,
                "matched": matched,
                "match_ratio": ratio,
            },
        }

    @staticmethod
    def _match_skills(required: Sequence[str], owned: Sequence[str]) -> list[str]:
        matches: list[str] = []
        for skill in required:
            skill_lower = skill.lower()
            if any(skill_lower in own or own in skill_lower for own in owned):
                matches.append(skill)
        return matches

    def _describe(self, matched: Sequence[str]) -> str:
        preview = ", ".join(matched[: self._config.reason_preview])
        suffix = "..." if len(matched) > self._config.reason_preview else ""
        return f"Matching skills: {preview}{suffix}"
