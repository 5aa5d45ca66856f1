"""Select candidates to notify about a newly posted job."""

from __future__ import annotations

from typing import Iterable

from ..schemas import CandidateProfile, JobPosting
from .eligibility import check_eligibility

DEFAULT_RECIPIENT_LIMIT = 50


def select_notification_recipients(
    job: JobPosting,
    candidates: Iterable[CandidateProfile],
    *,
    limit: int = DEFAULT_RECIPIENT_LIMIT,
) -> list[CandidateProfile]:
    """Verified candidates that pass the eligibility gate, in input order."""
    if limit <= 0:
        return []
    recipients: list[CandidateProfile] = []
    for candidate in candidates:
        if candidate.user_type != "candidate" or not candidate.is_verified:
            continue
        if not check_eligibility(candidate, job).meets:
            continue
        recipients.append(candidate)
        if len(recipients) >= limit:
            break
    return recipients


__all__ = ["DEFAULT_RECIPIENT_LIMIT", "select_notification_recipients"]
