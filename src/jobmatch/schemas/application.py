"""Job application record schema."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

ApplicationStatus = Literal["pending", "reviewed", "shortlisted", "rejected", "accepted"]


class JobApplication(BaseModel):
    """Application submitted by a candidate to a job posting."""

    job_id: str
    candidate_id: str
    cover_letter: str | None = None
    cv_url: str | None = None
    video_cv_url: str | None = None
    status: ApplicationStatus = "pending"
    submitted_at: str | None = None

    model_config = ConfigDict(extra="forbid")
