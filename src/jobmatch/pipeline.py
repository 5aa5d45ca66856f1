"""Job listing pipeline assembly and execution."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, List, Sequence

import pendulum
import structlog

from .adapters import MongoExportAdapter, NativeAdapter, RecordAdapter
from .core import MatchScorer
from .core.experience import parse_date
from .schemas import CandidateProfile, JobPosting, RankedJob
from . import __version__

DEFAULT_SOURCE = "native"


class AdapterRegistry:
    """Registry mapping record sources to adapters."""

    def __init__(self, adapters: Iterable[RecordAdapter]):
        self._adapters = {adapter.source: adapter for adapter in adapters}

    def get(self, source: str) -> RecordAdapter:
        try:
            return self._adapters[source]
        except KeyError as exc:
            raise KeyError(f"Unsupported source: {source!r}") from exc

    def sources(self) -> List[str]:
        return list(self._adapters.keys())


def _unwrap(registry: AdapterRegistry, record: Any) -> tuple[RecordAdapter, dict[str, Any]]:
    if not isinstance(record, dict):
        raise ValueError("record must be a JSON object")
    source = record.get("source") or DEFAULT_SOURCE
    adapter = registry.get(source)
    payload = record.get("payload", record) if "source" in record else record
    if not isinstance(payload, dict):
        raise ValueError("payload must be a JSON object")
    return adapter, payload


class RecordLoadError(ValueError):
    """Raised when a JSONL scan encounters invalid records."""

    def __init__(self, errors: list[str], partial: list[Any]):
        super().__init__("Record loading failed")
        self.errors = errors
        self.partial = partial

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"Record loading failed: {self.errors}"


class JobLoadError(RecordLoadError):
    """Raised when job loading encounters invalid records."""


class CandidateLoadError(RecordLoadError):
    """Raised when candidate loading encounters invalid records."""


def _scan_jsonl(path: Path, parse) -> tuple[list[Any], list[str]]:
    items: list[Any] = []
    errors: list[str] = []
    with path.open("r", encoding="utf-8") as handle:
        for idx, line in enumerate(handle, start=1):
            raw = line.strip()
            if not raw:
                continue
            try:
                record = json.loads(raw)
            except json.JSONDecodeError as exc:
                errors.append(f"line {idx}: invalid JSON ({exc})")
                continue
            try:
                items.append(parse(record))
            except KeyError as exc:
                errors.append(f"line {idx}: {exc.args[0]}")
            except Exception as exc:  # noqa: BLE001
                errors.append(f"line {idx}: {exc}")
    return items, errors


def _read_json(path: Path, label: str) -> Any:
    with path.open("r", encoding="utf-8") as handle:
        try:
            return json.load(handle)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid {label} JSON: {exc}") from exc


class CandidateLoader:
    """Load candidate profiles through adapters."""

    def __init__(self, registry: AdapterRegistry):
        self._registry = registry

    def parse(self, record: Any) -> CandidateProfile:
        adapter, payload = _unwrap(self._registry, record)
        return CandidateProfile.model_validate(adapter.parse_candidate(payload))

    def load(self, path: Path) -> CandidateProfile:
        return self.parse(_read_json(path, "candidate"))

    def load_many(self, path: Path) -> list[CandidateProfile]:
        candidates, errors = _scan_jsonl(path, self.parse)
        if errors:
            raise CandidateLoadError(errors, candidates)
        return candidates


class JobLoader:
    """Load job posting documents through adapters."""

    def __init__(self, registry: AdapterRegistry):
        self._registry = registry

    def parse(self, record: Any) -> JobPosting:
        adapter, payload = _unwrap(self._registry, record)
        return JobPosting.model_validate(adapter.parse_job(payload))

    def load(self, path: Path) -> JobPosting:
        return self.parse(_read_json(path, "job"))

    def load_many(self, path: Path) -> list[JobPosting]:
        jobs, errors = _scan_jsonl(path, self.parse)
        if errors:
            raise JobLoadError(errors, jobs)
        return jobs


@dataclass(slots=True)
class JobQuery:
    """Filters and pagination for the job listing."""

    search: str | None = None
    location: str | None = None
    job_type: str | None = None
    page: int = 1
    page_size: int = 20


@dataclass(slots=True)
class ListingPage:
    """One page of the job listing."""

    jobs: list[JobPosting]
    total: int
    page: int
    page_size: int
    ranked: bool


class JobListing:
    """Filter, order and paginate active jobs; rank the page for candidates."""

    DEFAULT_MAX_PAGE_SIZE = 50

    def __init__(self, *, scorer: MatchScorer, max_page_size: int | None = None) -> None:
        self._scorer = scorer
        self._max_page_size = max_page_size or self.DEFAULT_MAX_PAGE_SIZE

    def list_jobs(
        self,
        jobs: Sequence[JobPosting],
        *,
        query: JobQuery | None = None,
        candidate: CandidateProfile | None = None,
    ) -> ListingPage:
        query = query or JobQuery()
        matched = [job for job in jobs if self._matches(job, query)]
        ordered = sorted(matched, key=self._recency_key)

        page = max(query.page, 1)
        page_size = min(max(query.page_size, 1), self._max_page_size)
        start = (page - 1) * page_size
        window: list[JobPosting] = ordered[start : start + page_size]

        ranked = candidate is not None and candidate.user_type == "candidate"
        if ranked:
            window = list(self._scorer.rank(window, candidate))

        return ListingPage(
            jobs=window,
            total=len(matched),
            page=page,
            page_size=page_size,
            ranked=ranked,
        )

    @staticmethod
    def _matches(job: JobPosting, query: JobQuery) -> bool:
        if job.status != "active":
            return False
        if query.search:
            needle = query.search.lower()
            if needle not in job.title.lower() and needle not in job.description.lower():
                return False
        if query.location:
            if query.location.lower() not in (job.location or "").lower():
                return False
        if query.job_type and job.job_type != query.job_type:
            return False
        return True

    @staticmethod
    def _recency_key(job: JobPosting) -> tuple[int, float]:
        created = parse_date(job.created_at)
        timestamp = created.timestamp() if created is not None else float("-inf")
        return (-job.views, -timestamp)


class OutputWriter:
    """Persist listing results."""

    def write(self, path: Path, payload: dict | list[dict]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2),
            encoding="utf-8",
        )


class RankingPipeline:
    """End-to-end listing orchestrator: load, list, rank, write."""

    def __init__(
        self,
        *,
        listing: JobListing,
        registry: AdapterRegistry,
        candidate_loader: CandidateLoader | None = None,
        job_loader: JobLoader | None = None,
        writer: OutputWriter | None = None,
    ) -> None:
        self._listing = listing
        self._registry = registry
        self._candidates = candidate_loader or CandidateLoader(registry)
        self._jobs = job_loader or JobLoader(registry)
        self._writer = writer or OutputWriter()
        self._logger = structlog.get_logger(__name__)

    def run(
        self,
        *,
        jobs_path: Path,
        output_path: Path,
        candidate_path: Path | None = None,
        query: JobQuery | None = None,
        audit_logger: "AuditLogger | None" = None,
    ) -> list[dict]:
        load_errors: list[str] = []
        try:
            jobs = self._jobs.load_many(jobs_path)
        except JobLoadError as exc:
            jobs = exc.partial
            load_errors.extend(exc.errors)
            self._logger.warning("jobs.partial_load", errors=exc.errors)

        candidate = self._candidates.load(candidate_path) if candidate_path else None
        page = self._listing.list_jobs(jobs, query=query, candidate=candidate)

        results = [job.model_dump(mode="json") for job in page.jobs]

        if audit_logger and candidate is not None:
            for job in page.jobs:
                if not isinstance(job, RankedJob):
                    continue
                audit_logger.append(
                    {
                        "candidate_id": candidate.candidate_id,
                        "job_id": job.job_id,
                        "match_score": job.match_score,
                        "match_reasons": job.match_reasons,
                    }
                )

        self._logger.info(
            "ranking.completed",
            candidate_id=candidate.candidate_id if candidate else None,
            ranked=page.ranked,
            total=page.total,
            returned=len(results),
            page=page.page,
        )

        metadata = {
            "candidate_id": candidate.candidate_id if candidate else None,
            "ranked": page.ranked,
            "total": page.total,
            "page": page.page,
            "page_size": page.page_size,
            "errors": load_errors,
            "timestamp": pendulum.now().to_iso8601_string(),
            "app_version": __version__,
        }
        self._writer.write(output_path, {"metadata": metadata, "results": results})
        return results


def default_registry() -> AdapterRegistry:
    """Return the default adapter registry."""
    return AdapterRegistry(adapters=[NativeAdapter(), MongoExportAdapter()])


class AuditLogger:
    """Append-only audit logger writing JSON lines."""

    def __init__(self, path: Path):
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)

    def append(self, record: dict) -> None:
        with self._path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(record, ensure_ascii=False))
            handle.write("\n")
