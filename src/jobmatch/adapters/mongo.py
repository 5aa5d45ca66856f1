"""Adapter for MongoDB export documents from the job board store."""

from __future__ import annotations

from typing import Any, Callable

import pendulum

from ..core.experience import calculate_experience
from ..core.profile import merge_extracted_cv
from ..schemas import (
    CandidateProfile,
    ExtractedCVData,
    JobPosting,
    JobRequirements,
    SalaryRange,
    WorkExperienceEntry,
)


class MongoExportAdapter:
    """Convert camelCase Mongo documents (plain or extended JSON) into native dicts."""

    source = "mongo"

    def __init__(
        self,
        *,
        as_of: pendulum.DateTime | str | None = None,
        now_provider: Callable[[], pendulum.DateTime] | None = None,
    ) -> None:
        self._as_of = as_of
        self._now_provider = now_provider

    def parse_candidate(self, record: dict[str, Any]) -> dict[str, Any]:
        experiences = [
            WorkExperienceEntry(
                company=item.get("companyName", ""),
                position=item.get("position", ""),
                start=_date(item.get("startDate")),
                end=_date(item.get("endDate")),
                is_current=bool(item.get("isCurrent", False)),
                description=item.get("description"),
            )
            for item in record.get("workExperiences") or []
        ]

        years = record.get("calculatedExperience")
        if years is None:
            years = calculate_experience(
                experiences,
                as_of=self._as_of,
                now_provider=self._now_provider,
            )

        profile = CandidateProfile(
            candidate_id=_object_id(record.get("_id")) or "",
            name=record.get("name"),
            email=record.get("email"),
            user_type=record.get("userType") or "candidate",
            is_verified=bool(record.get("isVerified", False)),
            years_of_experience=years,
            education_level=record.get("education"),
            skills=record.get("skills") or [],
            spoken_languages=record.get("languages") or [],
            certifications=record.get("certifications") or [],
            experiences=experiences,
        )

        extracted = record.get("cvExtractedData")
        if extracted:
            cv = ExtractedCVData(
                skills=extracted.get("skills"),
                education=extracted.get("education"),
                languages=extracted.get("languages"),
                certifications=extracted.get("certifications"),
                summary=extracted.get("summary"),
                extracted_at=_date(extracted.get("extractedAt")),
            )
            profile = merge_extracted_cv(profile, cv)

        return profile.model_dump(mode="python")

    def parse_job(self, record: dict[str, Any]) -> dict[str, Any]:
        requirements = record.get("requirements") or {}
        salary = record.get("salary")
        company = record.get("companyId")
        if isinstance(company, dict) and "$oid" not in company:
            company = company.get("_id")

        job = JobPosting(
            job_id=_object_id(record.get("_id")) or "",
            company_id=_object_id(company),
            title=record.get("title", ""),
            description=record.get("description", ""),
            location=record.get("location"),
            job_type=record.get("jobType") or "full-time",
            status=record.get("status") or "active",
            salary=SalaryRange(
                min=salary.get("min"),
                max=salary.get("max"),
                currency=salary.get("currency") or "EUR",
            )
            if salary
            else None,
            requirements=JobRequirements(
                min_experience=requirements.get("minExperience"),
                education=requirements.get("education"),
                skills=requirements.get("skills"),
                other=requirements.get("other"),
            ),
            views=record.get("views") or 0,
            created_at=_date(record.get("createdAt")),
        )
        return job.model_dump(mode="python")


def _object_id(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, dict):
        value = value.get("$oid")
        if value is None:
            return None
    return str(value)


def _date(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, dict):
        value = value.get("$date")
        if isinstance(value, dict):
            value = value.get("$numberLong")
            if value is not None:
                return pendulum.from_timestamp(int(value) / 1000).to_iso8601_string()
        if value is None:
            return None
    return str(value)
