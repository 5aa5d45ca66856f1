"""Years-of-experience calculation from work history."""

from __future__ import annotations

import math
from typing import Any, Callable, Iterable

import pendulum
from pendulum.parsing.exceptions import ParserError

from ..schemas import WorkExperienceEntry

_DAYS_PER_YEAR = 365
_MERGE_GAP = pendulum.duration(days=1)

DateRange = tuple[pendulum.DateTime, pendulum.DateTime]


def calculate_experience(
    experiences: Iterable[WorkExperienceEntry],
    *,
    as_of: pendulum.DateTime | str | None = None,
    now_provider: Callable[[], pendulum.DateTime] | None = None,
) -> float:
    """Return non-overlapping years worked, rounded to two decimals.

    Overlapping periods, and periods starting within a day of the previous
    one ending, count once. Current or open-ended entries run until
    ``as_of``.
    """
    reference = _resolve_as_of(as_of, now_provider or pendulum.now)
    ranges = [
        date_range
        for date_range in (_to_range(entry, reference) for entry in experiences)
        if date_range is not None
    ]
    if not ranges:
        return 0.0

    total_days = 0
    for start, end in merge_ranges(ranges):
        total_days += math.ceil((end - start).total_seconds() / 86400)

    return round(total_days / _DAYS_PER_YEAR, 2)


def merge_ranges(ranges: Iterable[DateRange]) -> list[DateRange]:
    ordered = sorted(ranges, key=lambda item: item[0])
    if not ordered:
        return []

    merged: list[DateRange] = []
    current_start, current_end = ordered[0]
    for start, end in ordered[1:]:
        if start <= current_end + _MERGE_GAP:
            current_end = max(current_end, end)
        else:
            merged.append((current_start, current_end))
            current_start, current_end = start, end
    merged.append((current_start, current_end))
    return merged


def _to_range(entry: WorkExperienceEntry, reference: pendulum.DateTime) -> DateRange | None:
    start = parse_date(entry.start)
    if start is None:
        return None
    end = reference if entry.is_current else parse_date(entry.end, default=reference)
    if end is None or end < start:
        return None
    return start, end


def parse_date(
    value: Any,
    *,
    default: pendulum.DateTime | None = None,
) -> pendulum.DateTime | None:
    if value is None or value == "":
        return default
    if isinstance(value, pendulum.DateTime):
        return value
    text = str(value).strip()
    try:
        if len(text) == 7 and text[4] == "-":
            return pendulum.datetime(int(text[:4]), int(text[5:7]), 1)
        parsed = pendulum.parse(text)
    except (ValueError, ParserError):
        return default
    if not isinstance(parsed, pendulum.DateTime):
        return default
    return parsed


def _resolve_as_of(
    as_of: pendulum.DateTime | str | None,
    now_provider: Callable[[], pendulum.DateTime],
) -> pendulum.DateTime:
    default_now = now_provider()
    if as_of is None:
        return default_now
    return parse_date(as_of, default=default_now) or default_now


__all__ = ["calculate_experience", "merge_ranges", "parse_date"]
