"""Pydantic schema definitions for candidate and job documents."""

from __future__ import annotations

from .application import JobApplication
from .candidate import CandidateProfile, ExtractedCVData, WorkExperienceEntry
from .job import JobPosting, JobRequirements, RankedJob, SalaryRange

__all__ = [
    "CandidateProfile",
    "ExtractedCVData",
    "JobApplication",
    "JobPosting",
    "JobRequirements",
    "RankedJob",
    "SalaryRange",
    "WorkExperienceEntry",
]
