"""Flat bonus signals: CV profile, languages, certifications."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ...schemas import CandidateProfile, JobPosting


@dataclass
class BonusConfig:
    """Point values for the bonus signals."""

    extracted_profile_points: float = 5.0
    language_points: float = 10.0
    certification_points: float = 5.0
    language_keywords: tuple[str, ...] = ("international", "multilingual")


class BonusEvaluator:
    """Add small bonuses that do not depend on hard requirements."""

    method = "bonus"

    def __init__(self, *, config: BonusConfig | None = None) -> None:
        self._config = config or BonusConfig()

    def evaluate(self, candidate: dict[str, Any], context: dict[str, Any]) -> dict[str, Any]:
        profile = CandidateProfile.model_validate(candidate)
        job = JobPosting.model_validate(context["job"])

        scores: dict[str, float] = {}
        reasons: dict[str, str] = {}

        if profile.has_extracted_profile:
            scores["extracted_profile"] = self._config.extracted_profile_points

        languages = [lang for lang in profile.spoken_languages if lang and lang.strip()]
        keyword = self._language_keyword(job.description)
        if len(languages) > 1 and keyword:
            scores["language"] = self._config.language_points
            reasons["language"] = f"Languages: {', '.join(languages)}"

        if any(cert and cert.strip() for cert in profile.certifications):
            scores["certification"] = self._config.certification_points

        return {
            "method": self.method,
            "scores": scores,
            "reasons": reasons,
            "metadata": {
                "language_count": len(languages),
                "language_keyword": keyword,
                "certification_count": len(profile.certifications),
            },
        }

    def _language_keyword(self, description: str) -> str | None:
        text = (description or "").lower()
        for keyword in self._config.language_keywords:
            if keyword.lower() in text:
                return keyword
        return None
