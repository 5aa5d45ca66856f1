"""Application submission with duplicate and eligibility checks."""

from __future__ import annotations

from typing import Iterable

import pendulum
import structlog

from .core import check_eligibility
from .schemas import CandidateProfile, JobApplication, JobPosting


class ApplicationError(Exception):
    """Base error for refused submissions; ``status_code`` mirrors HTTP."""

    status_code = 400

    def __init__(self, reason: str, *, status_code: int | None = None):
        super().__init__(reason)
        self.reason = reason
        if status_code is not None:
            self.status_code = status_code


class ApplicationRejected(ApplicationError):
    """The candidate may not apply to this job."""


class DuplicateApplication(ApplicationError):
    """The candidate already applied to this job."""


class ApplicationDesk:
    """Validate and record candidate applications."""

    def __init__(self) -> None:
        self._logger = structlog.get_logger(__name__)

    def submit(
        self,
        job: JobPosting,
        candidate: CandidateProfile,
        *,
        existing: Iterable[JobApplication] = (),
        cover_letter: str | None = None,
        cv_url: str | None = None,
        video_cv_url: str | None = None,
    ) -> JobApplication:
        try:
            self._validate(job, candidate, existing)
        except ApplicationError as exc:
            self._logger.info(
                "application.rejected",
                job_id=job.job_id,
                candidate_id=candidate.candidate_id,
                status_code=exc.status_code,
                reason=exc.reason,
            )
            raise

        application = JobApplication(
            job_id=job.job_id,
            candidate_id=candidate.candidate_id,
            cover_letter=cover_letter,
            cv_url=cv_url,
            video_cv_url=video_cv_url,
            status="pending",
            submitted_at=pendulum.now().to_iso8601_string(),
        )
        self._logger.info(
            "application.accepted",
            job_id=job.job_id,
            candidate_id=candidate.candidate_id,
        )
        return application

    @staticmethod
    def _validate(
        job: JobPosting,
        candidate: CandidateProfile,
        existing: Iterable[JobApplication],
    ) -> None:
        if candidate.user_type != "candidate":
            raise ApplicationRejected(
                "Only candidates can apply to jobs", status_code=403
            )

        if any(
            item.job_id == job.job_id and item.candidate_id == candidate.candidate_id
            for item in existing
        ):
            raise DuplicateApplication("You have already applied to this job")

        if job.status != "active":
            raise ApplicationRejected("This job is no longer accepting applications")

        check = check_eligibility(candidate, job)
        if not check.meets:
            raise ApplicationRejected(
                check.reason or "You do not meet the requirements for this position"
            )


__all__ = [
    "ApplicationDesk",
    "ApplicationError",
    "ApplicationRejected",
    "DuplicateApplication",
]
