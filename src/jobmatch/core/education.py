"""Education level vocabulary and rank lookups."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

DEFAULT_RANK = 1

# NOTE: phd/doctorate rank above laurea magistrale while master equals it.
EDUCATION_LEVELS: Mapping[str, int] = MappingProxyType(
    {
        "phd": 5,
        "doctorate": 5,
        "laurea magistrale": 4,
        "master": 4,
        "laurea triennale": 3,
        "laurea": 3,
        "bachelor": 3,
        "degree": 3,
        "diploma": 2,
        "other": 1,
    }
)


def _normalize(label: str | None) -> str:
    return (label or "").strip().lower()


def education_rank(label: str | None) -> int:
    """Return the table rank for an exact (case-insensitive) label."""
    return EDUCATION_LEVELS.get(_normalize(label), DEFAULT_RANK)


def fuzzy_education_rank(label: str | None) -> int:
    """Rank a free-text label, falling back to substring containment.

    An exact table hit wins. Otherwise the highest-ranked table label that
    appears inside ``label`` is used, so "Laurea Magistrale in Fisica"
    resolves to 4.
    """
    normalized = _normalize(label)
    if not normalized:
        return DEFAULT_RANK
    if normalized in EDUCATION_LEVELS:
        return EDUCATION_LEVELS[normalized]
    contained = [
        rank for known, rank in EDUCATION_LEVELS.items() if known in normalized
    ]
    return max(contained, default=DEFAULT_RANK)


def highest_education(
    primary: str | None,
    extracted: Iterable[str] = (),
) -> tuple[int, str | None]:
    """Return the effective rank and the label that produced it.

    ``primary`` is ranked by exact lookup; ``extracted`` entries also use the
    substring fallback. Ties keep the earliest label, primary first.
    """
    best_rank = education_rank(primary) if primary else DEFAULT_RANK
    best_label = primary or None
    for entry in extracted:
        if not entry or not entry.strip():
            continue
        rank = fuzzy_education_rank(entry)
        if rank > best_rank:
            best_rank = rank
            best_label = entry
    return best_rank, best_label


__all__ = [
    "DEFAULT_RANK",
    "EDUCATION_LEVELS",
    "education_rank",
    "fuzzy_education_rank",
    "highest_education",
]
