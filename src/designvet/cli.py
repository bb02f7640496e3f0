"""Typer CLI entrypoint for the vetting engine."""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any, NoReturn, Optional

import typer
import yaml
from pydantic import ValidationError as SchemaError

from .config import default_catalog
from .container import create_container
from .core import VettingError
from .logging import configure_logging
from .repository import JsonFileStore, SnapshotLoadError
from .schemas import DesignerProfile, QualificationStatus
from .schemas.config import load_config
from .service import VettingService

app = typer.Typer(help="Designer vetting: matching, grading and ranking.")


@app.callback()
def main_options(
    ctx: typer.Context,
    store: Path = typer.Option(
        Path("designvet.json"),
        dir_okay=False,
        help="JSON snapshot store; created with the default catalog when missing.",
    ),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: str = typer.Option("WARNING", help="Log level for structured logging."),
    audit_log: Optional[Path] = typer.Option(None, dir_okay=False, help="Audit log output (JSONL)."),
) -> None:
    """Shared options for every command."""
    configure_logging(log_level)
    settings: dict[str, Any] = {}
    if config:
        with config.open("r", encoding="utf-8") as handle:
            loaded = yaml.safe_load(handle) or {}
            if not isinstance(loaded, dict):
                raise typer.BadParameter("Config file must be a YAML object", param_name="config")
            try:
                settings = load_config(loaded).to_settings()
            except SchemaError as exc:
                raise typer.BadParameter(str(exc), param_name="config") from exc
    ctx.obj = {"store": store, "settings": settings, "audit_log": audit_log}


def _service(ctx: typer.Context) -> VettingService:
    options = ctx.obj
    try:
        store = JsonFileStore(options["store"], default_assessments=default_catalog())
    except SnapshotLoadError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc
    container = create_container(
        settings=options["settings"],
        store=store,
        audit_log=options["audit_log"],
    )
    return container.service()


def _emit(payload: Any) -> None:
    typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))


def _fail(exc: VettingError) -> NoReturn:
    typer.echo(f"error: {exc}", err=True)
    raise typer.Exit(code=1) from exc


@app.command("add-profile")
def add_profile(
    ctx: typer.Context,
    profile: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Profile JSON path."),
) -> None:
    """Create or update a designer profile."""
    service = _service(ctx)
    with profile.open("r", encoding="utf-8") as handle:
        try:
            data = json.load(handle)
        except json.JSONDecodeError as exc:
            raise typer.BadParameter(f"Invalid profile JSON: {exc}", param_name="profile") from exc
    if not isinstance(data, dict):
        raise typer.BadParameter("Profile must be a JSON object", param_name="profile")
    data.pop("status", None)
    try:
        incoming = DesignerProfile.model_validate(data)
    except SchemaError as exc:
        raise typer.BadParameter(str(exc), param_name="profile") from exc
    try:
        saved = service.complete_profile(incoming)
    except VettingError as exc:
        _fail(exc)
    _emit(saved.model_dump(mode="json"))


@app.command()
def recommend(
    ctx: typer.Context,
    designer: str = typer.Option(..., help="Designer id."),
) -> None:
    """Show the assessments recommended for a designer."""
    service = _service(ctx)
    try:
        top = service.top_for(designer)
    except VettingError as exc:
        _fail(exc)
    _emit(
        [
            {
                "assessment_id": item.assessment.assessment_id,
                "title": item.assessment.title,
                "category": item.assessment.category,
                "score": item.total,
            }
            for item in top
        ]
    )


@app.command()
def submit(
    ctx: typer.Context,
    designer: str = typer.Option(..., help="Designer id."),
    assessment: str = typer.Option(..., help="Assessment id."),
    link: Optional[str] = typer.Option(None, help="External deliverable link."),
    file: Optional[str] = typer.Option(None, help="Uploaded file reference."),
) -> None:
    """Submit a deliverable for an assessment."""
    service = _service(ctx)
    try:
        submission = service.submit(designer, assessment, {"external_link": link, "file_ref": file})
    except VettingError as exc:
        _fail(exc)
    _emit(submission.model_dump(mode="json"))


@app.command()
def review(
    ctx: typer.Context,
    submission: str = typer.Option(..., help="Submission id."),
    score: int = typer.Option(..., help="Score between 0 and 100."),
    note: str = typer.Option("", help="Administrator note."),
) -> None:
    """Grade a pending submission."""
    service = _service(ctx)
    try:
        reviewed = service.review(submission, score, note)
    except VettingError as exc:
        _fail(exc)
    _emit(reviewed.model_dump(mode="json"))


@app.command()
def pending(ctx: typer.Context) -> None:
    """List submissions awaiting review, oldest first."""
    service = _service(ctx)
    _emit([s.model_dump(mode="json") for s in service.pending_queue()])


@app.command("set-status")
def set_status(
    ctx: typer.Context,
    designer: str = typer.Option(..., help="Designer id."),
    status: QualificationStatus = typer.Option(..., help="New qualification status."),
    actor: str = typer.Option("admin", help="Who made the decision."),
) -> None:
    """Change a designer's qualification status."""
    service = _service(ctx)
    try:
        service.set_qualification_status(designer, status, actor=actor)
    except VettingError as exc:
        _fail(exc)
    _emit([c.model_dump(mode="json") for c in service.status_history(designer)])


@app.command()
def metrics(
    ctx: typer.Context,
    designer: str = typer.Option(..., help="Designer id."),
) -> None:
    """Show a designer's average score, percentile and submission count."""
    service = _service(ctx)
    _emit(asdict(service.designer_metrics(designer)))


@app.command("system-metrics")
def system_metrics(ctx: typer.Context) -> None:
    """Show population-wide vetting metrics."""
    service = _service(ctx)
    _emit(asdict(service.system_metrics()))


@app.command()
def leaderboard(ctx: typer.Context) -> None:
    """Rank every designer by average graded score."""
    service = _service(ctx)
    _emit([asdict(entry) for entry in service.leaderboard()])


def main() -> None:
    app()


if __name__ == "__main__":
    main()
