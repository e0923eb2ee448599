"""Service layer composing the parser, scorer, drafter and profile storage."""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any

import pendulum
import structlog
from pydantic import ValidationError

from . import __version__
from .core import (
    CompletenessReport,
    MatchResult,
    MatchScorer,
    PostingParser,
    ProfileCompletenessAnalyzer,
)
from .errors import InvalidInput
from .outreach import EMAIL_TONES, EMAIL_TYPES, DraftedEmail, EmailDrafter
from .repository import InMemoryProfileRepository, ProfileRepository
from .schemas import CandidateProfile, JobPosting

REQUIRED_PROFILE_FIELDS: tuple[str, ...] = ("name", "current_role", "department")


def _validate(model: type[CandidateProfile] | type[JobPosting], payload: Any, label: str) -> Any:
    if isinstance(payload, model):
        return payload
    if not isinstance(payload, dict):
        raise InvalidInput(f"{label} must be a JSON object")
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise InvalidInput(f"Invalid {label}: {exc.error_count()} validation error(s)") from exc


class ProfileLoader:
    """Load a candidate profile document."""

    def load(self, path: Path) -> CandidateProfile:
        with path.open("r", encoding="utf-8") as handle:
            try:
                data = json.load(handle)
            except json.JSONDecodeError as exc:
                raise InvalidInput(f"Invalid profile JSON: {exc}") from exc
        return _validate(CandidateProfile, data, "profile")


class PostingLoader:
    """Load a job posting either as structured JSON or as raw posting text."""

    def __init__(self, parser: PostingParser | None = None):
        self._parser = parser or PostingParser()

    def load(self, path: Path, *, raw: bool = False) -> JobPosting:
        text = path.read_text(encoding="utf-8")
        if raw:
            return self._parser.parse(text)
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise InvalidInput(f"Invalid job JSON: {exc}") from exc
        return _validate(JobPosting, data, "job")


class OutputWriter:
    """Persist command results as JSON."""

    def write(self, path: Path, payload: dict | list[dict]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2),
            encoding="utf-8",
        )


class MobilityService:
    """Entry point used by the CLI and any transport layer."""

    def __init__(
        self,
        *,
        parser: PostingParser,
        scorer: MatchScorer,
        drafter: EmailDrafter,
        repository: ProfileRepository | None = None,
        completeness: ProfileCompletenessAnalyzer | None = None,
    ) -> None:
        self._parser = parser
        self._scorer = scorer
        self._drafter = drafter
        self._repository = (
            repository if repository is not None else InMemoryProfileRepository.with_demo_profile()
        )
        self._completeness = (
            completeness if completeness is not None else ProfileCompletenessAnalyzer()
        )
        self._logger = structlog.get_logger(__name__)

    def analyze_posting(self, text: str) -> dict[str, Any]:
        job = self._parser.parse(text)
        self._logger.info(
            "posting.parsed",
            title=job.title,
            seniority=job.seniority,
            key_skills=len(job.key_skills),
            remote=job.remote_option,
        )
        return {
            "job": job.model_dump(mode="json"),
            "extracted_at": pendulum.now("UTC").to_iso8601_string(),
            "app_version": __version__,
        }

    def match(self, profile: Any, job: Any) -> MatchResult:
        candidate = _validate(CandidateProfile, profile, "profile")
        posting = _validate(JobPosting, job, "job")
        result = self._scorer.score(candidate, posting)
        self._logger.info(
            "match.scored",
            profile_id=candidate.id,
            job_title=posting.title,
            overall_score=result.overall_score,
            rating=result.rating_label,
            factors={item.name: round(item.earned_score, 2) for item in result.factors},
        )
        return result

    def draft_email(
        self,
        profile: Any,
        job: Any,
        *,
        email_type: str = "hiring_manager",
        tone: str = "professional",
    ) -> DraftedEmail:
        if email_type not in EMAIL_TYPES:
            raise InvalidInput(f"Unsupported email type: {email_type!r}")
        if tone not in EMAIL_TONES:
            raise InvalidInput(f"Unsupported tone: {tone!r}")
        candidate = _validate(CandidateProfile, profile, "profile")
        posting = _validate(JobPosting, job, "job")
        return self._drafter.draft(candidate, posting, email_type=email_type, tone=tone)

    def save_profile(self, profile: Any) -> tuple[CandidateProfile, bool]:
        candidate = _validate(CandidateProfile, profile, "profile")
        missing = [name for name in REQUIRED_PROFILE_FIELDS if not getattr(candidate, name)]
        if missing:
            raise InvalidInput("Missing required fields", missing_fields=missing)
        stored, created = self._repository.put(candidate)
        self._logger.info("profile.saved", profile_id=stored.id, created=created)
        return stored, created

    def get_profile(self, profile_id: str | None = None) -> CandidateProfile | None:
        if profile_id is None:
            return self._repository.default()
        return self._repository.get(profile_id)

    def analyze_profile(self, profile: Any) -> CompletenessReport:
        candidate = _validate(CandidateProfile, profile, "profile")
        report = self._completeness.analyze(candidate)
        self._logger.info(
            "profile.analyzed",
            completeness=report.completeness_percentage,
            status=report.status,
            missing=report.missing,
        )
        return report


def serialize(value: Any) -> Any:
    """Turn service results into JSON-ready structures."""
    if isinstance(value, MatchResult):
        return value.to_dict()
    if isinstance(value, (CandidateProfile, JobPosting)):
        return value.model_dump(mode="json")
    if hasattr(value, "__dataclass_fields__"):
        return asdict(value)
    return value
