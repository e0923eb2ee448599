"""Typer CLI entrypoint for the mobility assistant."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import typer
from pydantic import ValidationError

from .catalog import (
    ACHIEVEMENT_TEMPLATES,
    DEPARTMENTS,
    EMAIL_TEMPLATES,
    SAMPLE_POSTING_TEXT,
    suggest_skills,
)
from .config import ConfigManager
from .container import MobilityContainer, create_container
from .errors import InvalidInput
from .logging import configure_logging
from .outreach import analyze_email
from .schemas.config import load_config
from .service import OutputWriter, PostingLoader, ProfileLoader, serialize

app = typer.Typer(help="Internal mobility assistant CLI.", no_args_is_help=True)


@app.callback()
def main_options(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: str = typer.Option("WARNING", help="Log level for structured logging."),
) -> None:
    """Parse postings, score matches and draft outreach emails."""
    settings: dict[str, Any] = {}
    if config:
        loaded = ConfigManager.load_path(config)
        try:
            settings = load_config(loaded).to_settings()
        except ValidationError as exc:
            raise typer.BadParameter(f"Invalid config: {exc}", param_hint="config") from exc

    configure_logging(log_level)
    ctx.obj = settings


def _container(ctx: typer.Context, **overrides: dict[str, Any]) -> MobilityContainer:
    settings = dict(ctx.obj or {})
    for section, values in overrides.items():
        settings[section] = {**settings.get(section, {}), **values}
    return create_container(settings=settings)


def _emit(payload: Any, output: Optional[Path]) -> None:
    if output:
        OutputWriter().write(output, payload)
        typer.echo(f"Results saved to {output}.")
    else:
        typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))


@app.command()
def analyze(
    ctx: typer.Context,
    text: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Job posting text file."),
    output: Optional[Path] = typer.Option(None, dir_okay=False, help="Output JSON path."),
) -> None:
    """Extract a structured job record from posting text."""
    service = _container(ctx).service()
    result = service.analyze_posting(text.read_text(encoding="utf-8"))
    _emit(result, output)


@app.command()
def match(
    ctx: typer.Context,
    profile: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Candidate profile JSON."),
    job: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Job JSON, or posting text with --raw-job."),
    raw_job: bool = typer.Option(False, "--raw-job", help="Treat the job file as raw posting text."),
    output: Optional[Path] = typer.Option(None, dir_okay=False, help="Output JSON path."),
) -> None:
    """Score a candidate profile against a job."""
    container = _container(ctx)
    service = container.service()
    try:
        candidate = ProfileLoader().load(profile)
        posting = PostingLoader(container.parser()).load(job, raw=raw_job)
        result = service.match(candidate, posting)
    except InvalidInput as exc:
        raise typer.BadParameter(str(exc)) from exc
    _emit(serialize(result), output)


@app.command("profile-check")
def profile_check(
    ctx: typer.Context,
    profile: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Candidate profile JSON."),
) -> None:
    """Report how complete a candidate profile is."""
    service = _container(ctx).service()
    try:
        report = service.analyze_profile(ProfileLoader().load(profile))
    except InvalidInput as exc:
        raise typer.BadParameter(str(exc)) from exc
    _emit(serialize(report), None)


@app.command("draft-email")
def draft_email(
    ctx: typer.Context,
    profile: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Candidate profile JSON."),
    job: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Job JSON, or posting text with --raw-job."),
    raw_job: bool = typer.Option(False, "--raw-job", help="Treat the job file as raw posting text."),
    email_type: str = typer.Option("hiring_manager", "--type", help="hiring_manager, recruiter or team_member."),
    tone: str = typer.Option("professional", help="professional, friendly, formal or casual."),
    llm_endpoint: Optional[str] = typer.Option(None, help="Email writer API endpoint."),
    llm_api_key: Optional[str] = typer.Option(None, help="Email writer API key."),
) -> None:
    """Draft an outreach email for a job."""
    overrides: dict[str, Any] = {}
    if llm_endpoint:
        overrides["outreach"] = {"llm_endpoint": llm_endpoint, "llm_api_key": llm_api_key}
    container = _container(ctx, **overrides)
    service = container.service()
    try:
        candidate = ProfileLoader().load(profile)
        posting = PostingLoader(container.parser()).load(job, raw=raw_job)
        email = service.draft_email(candidate, posting, email_type=email_type, tone=tone)
    except InvalidInput as exc:
        raise typer.BadParameter(str(exc)) from exc
    payload = serialize(email)
    payload["analysis"] = analyze_email(email.body)
    _emit(payload, None)


_CATALOG_SECTIONS = ("departments", "skills", "achievements", "email-templates", "sample-posting")


@app.command()
def catalog(
    section: str = typer.Argument(..., help="departments, skills, achievements, email-templates or sample-posting."),
    query: Optional[str] = typer.Option(None, help="Filter skills by substring."),
) -> None:
    """Print reference data used when building profiles and emails."""
    if section not in _CATALOG_SECTIONS:
        raise typer.BadParameter(f"Unknown section {section!r}", param_hint="section")
    if section == "departments":
        payload: Any = list(DEPARTMENTS)
    elif section == "skills":
        payload = suggest_skills(query)
    elif section == "achievements":
        payload = list(ACHIEVEMENT_TEMPLATES)
    elif section == "email-templates":
        payload = list(EMAIL_TEMPLATES)
    else:
        payload = SAMPLE_POSTING_TEXT
    _emit(payload, None)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
