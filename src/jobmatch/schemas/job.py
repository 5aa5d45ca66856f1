"""Job posting schema definitions."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

JobType = Literal["full-time", "part-time", "contract", "internship"]
JobStatus = Literal["active", "closed", "draft"]


class SalaryRange(BaseModel):
    """Salary range for a job posting."""

    min: float | None = None
    max: float | None = None
    currency: str = "EUR"

    model_config = ConfigDict(extra="forbid")


class JobRequirements(BaseModel):
    """Minimum requirements attached to a job posting."""

    min_experience: float | None = None
    education: str | None = None
    skills: list[str] = Field(default_factory=list)
    other: str | None = None

    model_config = ConfigDict(extra="forbid")

    @field_validator("skills", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("education", mode="before")
    @classmethod
    def _blank_education(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class JobPosting(BaseModel):
    """Job posting document as returned by the listing query."""

    job_id: str
    company_id: str | None = None
    title: str = ""
    description: str = ""
    location: str | None = None
    job_type: JobType = "full-time"
    status: JobStatus = "active"
    salary: SalaryRange | None = None
    requirements: JobRequirements = Field(default_factory=JobRequirements)
    views: int = 0
    created_at: str | None = None

    model_config = ConfigDict(extra="allow")

    @field_validator("requirements", mode="before")
    @classmethod
    def _none_requirements(cls, value: Any) -> Any:
        return {} if value is None else value


class RankedJob(JobPosting):
    """Job posting annotated with its match score for one candidate."""

    match_score: float = 0.0
    match_reasons: list[str] = Field(default_factory=list)
