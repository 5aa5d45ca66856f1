"""Adapter for records already in the native schema."""

from __future__ import annotations

from typing import Any

from ..schemas import CandidateProfile, JobPosting


class NativeAdapter:
    """Validate snake_case records without remapping."""

    source = "native"

    def parse_candidate(self, record: dict[str, Any]) -> dict[str, Any]:
        return CandidateProfile.model_validate(record).model_dump(mode="python")

    def parse_job(self, record: dict[str, Any]) -> dict[str, Any]:
        return JobPosting.model_validate(record).model_dump(mode="python")
