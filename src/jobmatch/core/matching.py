"""Candidate-to-job match scoring and ranking."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Sequence

from ..schemas import CandidateProfile, JobPosting, RankedJob
from .evaluators import (
    BonusEvaluator,
    EducationEvaluator,
    ExperienceEvaluator,
    SkillsEvaluator,
)

REASON_PRIORITY: tuple[str, ...] = ("experience", "education", "skills", "language")


@dataclass(slots=True)
class EvaluationResult:
    """Normalized evaluator output."""

    method: str
    scores: dict[str, float]
    reasons: dict[str, str] = field(default_factory=dict)
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def points(self) -> float:
        return sum(self.scores.values())


@dataclass(slots=True)
class MatchResult:
    """Score and reasons for one (candidate, job) pair."""

    job_id: str
    score: float
    reasons: list[str]
    raw_score: float
    evaluations: list[EvaluationResult]


class MatchScorer:
    """Sums evaluator points into a clamped score with prioritized reasons."""

    DEFAULT_MAX_REASONS = 3

    def __init__(
        self,
        evaluators: Iterable[Any],
        *,
        max_reasons: int | None = None,
    ) -> None:
        self._evaluators = list(evaluators)
        self._max_reasons = (
            self.DEFAULT_MAX_REASONS if max_reasons is None else max_reasons
        )

    def score(self, *, candidate: CandidateProfile, job: JobPosting) -> MatchResult:
        return self._score(candidate.model_dump(mode="python"), job)

    def rank(
        self,
        jobs: Sequence[JobPosting],
        candidate: CandidateProfile,
    ) -> list[RankedJob]:
        """Annotate every job with its score and sort best-first.

        ``sorted`` is stable, so equal scores keep their input order.
        """
        serialized_candidate = candidate.model_dump(mode="python")
        ranked: list[RankedJob] = []
        for job in jobs:
            result = self._score(serialized_candidate, job)
            ranked.append(
                RankedJob(
                    **job.model_dump(
                        mode="python", exclude={"match_score", "match_reasons"}
                    ),
                    match_score=result.score,
                    match_reasons=result.reasons,
                )
            )
        return sorted(ranked, key=lambda item: item.match_score, reverse=True)

    def _score(self, serialized_candidate: dict[str, Any], job: JobPosting) -> MatchResult:
        context = {"job": job.model_dump(mode="python")}

        evaluations: list[EvaluationResult] = []
        collected: dict[str, str] = {}
        for evaluator in self._evaluators:
            raw_result = evaluator.evaluate(serialized_candidate, context)
            normalized = self._normalize_evaluation_result(raw_result)
            evaluations.append(normalized)
            for kind, text in normalized.reasons.items():
                if text:
                    collected.setdefault(kind, text)

        raw_score = sum(evaluation.points for evaluation in evaluations)
        return MatchResult(
            job_id=job.job_id,
            score=max(0.0, raw_score),
            reasons=self._order_reasons(collected),
            raw_score=raw_score,
            evaluations=evaluations,
        )

    def _order_reasons(self, reasons: dict[str, str]) -> list[str]:
        priority = {kind: index for index, kind in enumerate(REASON_PRIORITY)}
        ordered = sorted(reasons, key=lambda kind: priority.get(kind, len(priority)))
        return [reasons[kind] for kind in ordered][: self._max_reasons]

    @staticmethod
    def _normalize_evaluation_result(payload: dict[str, Any]) -> EvaluationResult:
        method = payload.get("method")
        scores = payload.get("scores") or {}
        reasons = payload.get("reasons") or {}
        metadata = payload.get("metadata") or {}
        if method is None:
            raise ValueError("Evaluator result must include 'method'.")
        if not isinstance(scores, dict):
            raise ValueError("Evaluator result 'scores' must be a mapping.")
        return EvaluationResult(
            method=str(method),
            scores={k: float(v) for k, v in scores.items()},
            reasons={str(k): str(v) for k, v in reasons.items()},
            metadata=dict(metadata),
        )


def default_scorer() -> MatchScorer:
    """Return a scorer wired with the default evaluators."""
    return MatchScorer(
        evaluators=[
            ExperienceEvaluator(),
            EducationEvaluator(),
            SkillsEvaluator(),
            BonusEvaluator(),
        ]
    )


def rank_jobs_for_candidate(
    jobs: Sequence[JobPosting],
    candidate: CandidateProfile,
    *,
    scorer: MatchScorer | None = None,
) -> list[RankedJob]:
    return (scorer or default_scorer()).rank(jobs, candidate)
