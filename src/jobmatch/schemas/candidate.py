"""Candidate-side schema definitions."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class WorkExperienceEntry(BaseModel):
    """Single employment record used for experience calculation."""

    company: str = ""
    position: str = ""
    start: str | None = None
    end: str | None = None
    is_current: bool = False
    description: str | None = None

    model_config = ConfigDict(extra="forbid")


class ExtractedCVData(BaseModel):
    """Structured fields extracted from an uploaded CV."""

    skills: list[str] = Field(default_factory=list)
    education: list[str] = Field(default_factory=list)
    languages: list[str] = Field(default_factory=list)
    certifications: list[str] = Field(default_factory=list)
    summary: str | None = None
    extracted_at: str | None = None

    model_config = ConfigDict(extra="ignore")

    @field_validator("skills", "education", "languages", "certifications", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class CandidateProfile(BaseModel):
    """Candidate document consumed by the scorer and the eligibility gate."""

    candidate_id: str
    name: str | None = None
    email: str | None = None
    user_type: str = "candidate"
    is_verified: bool = False
    years_of_experience: float = 0.0
    education_level: str | None = None
    skills: list[str] = Field(default_factory=list)
    spoken_languages: list[str] = Field(default_factory=list)
    certifications: list[str] = Field(default_factory=list)
    extracted_education: list[str] = Field(default_factory=list)
    has_extracted_profile: bool = False
    experiences: list[WorkExperienceEntry] = Field(default_factory=list)

    model_config = ConfigDict(extra="allow")

    @field_validator("years_of_experience", mode="before")
    @classmethod
    def _clamp_experience(cls, value: Any) -> Any:
        if value is None:
            return 0.0
        if isinstance(value, (int, float)) and value < 0:
            return 0.0
        return value

    @field_validator(
        "skills",
        "spoken_languages",
        "certifications",
        "extracted_education",
        "experiences",
        mode="before",
    )
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("education_level", mode="before")
    @classmethod
    def _blank_education(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value
