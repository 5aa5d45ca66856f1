"""Typer CLI entrypoint for job ranking and eligibility checks."""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any, Optional

import structlog
import typer
import yaml
from pydantic import ValidationError

from .container import create_container
from .core import check_eligibility, select_notification_recipients
from .logging import configure_logging
from .pipeline import AuditLogger, CandidateLoadError, JobQuery
from .schemas.config import load_config

app = typer.Typer(help="Candidate-to-job matching CLI.")


def _load_settings(config: Path | None) -> dict[str, Any]:
    if not config:
        return {}
    with config.open("r", encoding="utf-8") as handle:
        loaded = yaml.safe_load(handle) or {}
    if not isinstance(loaded, dict):
        raise typer.BadParameter("Config file must be a YAML object", param_name="config")
    try:
        return load_config(loaded).to_settings()
    except ValidationError as exc:
        raise typer.BadParameter(str(exc), param_name="config") from exc


@app.command()
def rank(
    jobs: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Jobs JSONL path."),
    output: Path = typer.Option(
        ...,
        exists=False,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
        help="Output JSON path.",
    ),
    candidate: Optional[Path] = typer.Option(
        None, exists=True, readable=True, dir_okay=False, help="Candidate JSON path; enables ranking."
    ),
    search: Optional[str] = typer.Option(None, help="Substring filter on title or description."),
    location: Optional[str] = typer.Option(None, help="Substring filter on location."),
    job_type: Optional[str] = typer.Option(None, help="Exact job type filter."),
    page: int = typer.Option(1, min=1, help="Page number (1-based)."),
    page_size: int = typer.Option(20, min=1, help="Jobs per page."),
    as_of: Optional[str] = typer.Option(None, help="Reference date for experience calculation."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
    log_json: bool = typer.Option(True, "--log-json/--log-console", help="Render logs as JSON lines or console text."),
    audit_log: Optional[Path] = typer.Option(None, dir_okay=False, help="Audit log output (JSONL)."),
) -> None:
    """List active jobs, ranked for the candidate when one is given."""
    settings = _load_settings(config)
    configure_logging(log_level, json_output=log_json)

    container = create_container(settings=settings, as_of=as_of)
    pipeline = container.pipeline()
    audit_logger = AuditLogger(audit_log) if audit_log else None

    results = pipeline.run(
        jobs_path=jobs,
        output_path=output,
        candidate_path=candidate,
        query=JobQuery(
            search=search,
            location=location,
            job_type=job_type,
            page=page,
            page_size=page_size,
        ),
        audit_logger=audit_logger,
    )
    typer.echo(f"Listed {len(results)} jobs. Results saved to {output}.")


@app.command()
def check(
    candidate: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Candidate JSON path."),
    job: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Job JSON path."),
    as_of: Optional[str] = typer.Option(None, help="Reference date for experience calculation."),
    log_level: str = typer.Option("WARNING", help="Log level for structured logging."),
) -> None:
    """Check whether the candidate may apply; exit code 1 when not."""
    configure_logging(log_level)

    container = create_container(as_of=as_of)
    profile = container.candidate_loader().load(candidate)
    posting = container.job_loader().load(job)

    result = check_eligibility(profile, posting)
    typer.echo(json.dumps(asdict(result), ensure_ascii=False))
    if not result.meets:
        raise typer.Exit(code=1)


@app.command()
def notify(
    job: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Job JSON path."),
    candidates: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, help="Candidates JSONL path."
    ),
    limit: int = typer.Option(50, min=0, help="Maximum number of recipients."),
    as_of: Optional[str] = typer.Option(None, help="Reference date for experience calculation."),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
) -> None:
    """Print candidates who should hear about a new job posting."""
    configure_logging(log_level)
    logger = structlog.get_logger(__name__)

    container = create_container(as_of=as_of)
    posting = container.job_loader().load(job)
    try:
        profiles = container.candidate_loader().load_many(candidates)
    except CandidateLoadError as exc:
        profiles = exc.partial
        logger.warning("candidates.partial_load", errors=exc.errors)

    recipients = select_notification_recipients(posting, profiles, limit=limit)
    logger.info(
        "notifications.selected",
        job_id=posting.job_id,
        considered=len(profiles),
        selected=len(recipients),
    )
    typer.echo(
        json.dumps(
            [
                {"candidate_id": item.candidate_id, "email": item.email}
                for item in recipients
            ],
            ensure_ascii=False,
        )
    )


def main() -> None:
    app()


if __name__ == "__main__":
    main()
