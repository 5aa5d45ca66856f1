"""Record adapters for candidate and job documents."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .mongo import MongoExportAdapter
from .native import NativeAdapter


@runtime_checkable
class RecordAdapter(Protocol):
    """Source-specific record adapter contract.

    Implementations transform source-native documents into dictionaries that
    validate against ``CandidateProfile`` and ``JobPosting``.
    """

    source: str

    def parse_candidate(self, record: dict) -> dict:
        """Return a candidate dictionary in the native schema."""

    def parse_job(self, record: dict) -> dict:
        """Return a job dictionary in the native schema."""


__all__ = ["MongoExportAdapter", "NativeAdapter", "RecordAdapter"]
