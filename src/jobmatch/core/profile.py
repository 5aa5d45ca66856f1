"""Merge CV-extracted data into a candidate profile before scoring."""

from __future__ import annotations

from typing import Iterable

from ..schemas import CandidateProfile, ExtractedCVData
from .education import fuzzy_education_rank


def merge_extracted_cv(profile: CandidateProfile, cv: ExtractedCVData) -> CandidateProfile:
    """Return a new profile enriched with ``cv``; ``profile`` is left untouched."""
    education_level = profile.education_level
    if not education_level:
        education_level = _highest_label(cv.education)

    return profile.model_copy(
        update={
            "skills": _union(profile.skills, cv.skills),
            "education_level": education_level,
            "extracted_education": list(cv.education),
            "spoken_languages": _union(profile.spoken_languages, cv.languages),
            "certifications": _union(profile.certifications, cv.certifications),
            "has_extracted_profile": True,
        },
        deep=True,
    )


def _union(existing: Iterable[str], extra: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    merged: list[str] = []
    for item in [*existing, *extra]:
        if not item or item in seen:
            continue
        seen.add(item)
        merged.append(item)
    return merged


def _highest_label(labels: Iterable[str]) -> str | None:
    best_label: str | None = None
    best_rank = 0
    for label in labels:
        if not label or not label.strip():
            continue
        rank = fuzzy_education_rank(label)
        if rank > best_rank:
            best_rank = rank
            best_label = label
    return best_label


__all__ = ["merge_extracted_cv"]
