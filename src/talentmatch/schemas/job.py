"""Structured job posting schema."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

Seniority = Literal["junior", "mid", "senior", "principal"]

SENIORITY_LEVELS: tuple[str, ...] = ("junior", "mid", "senior", "principal")


class JobPosting(BaseModel):
    """Best-effort structured view of a job posting.

    Every field has a default so partially parsed postings are still valid.
    ``seniority`` stays a plain string so records from other sources with an
    unrecognised tier are accepted; the scorer treats those as ``mid``.
    """

    id: str | None = None
    title: str = ""
    department: str = ""
    hiring_manager: str = Field(default="", alias="hiringManager")
    recruiter: str = ""
    location: str = ""
    description: str = ""
    requirements: str = ""
    key_skills: list[str] = Field(default_factory=list, alias="keySkills")
    benefits: list[str] = Field(default_factory=list)
    seniority: str = "mid"
    remote_option: bool = Field(default=False, alias="remoteOption")

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    @field_validator(
        "title",
        "department",
        "hiring_manager",
        "recruiter",
        "location",
        "description",
        "requirements",
        mode="before",
    )
    @classmethod
    def _none_to_empty_text(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("key_skills", "benefits", mode="before")
    @classmethod
    def _none_to_empty_list(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return value
        return [item for item in value if item]

    @field_validator("seniority", mode="before")
    @classmethod
    def _normalize_seniority(cls, value: Any) -> Any:
        if not value:
            return "mid"
        return str(value).strip().lower()

    @field_validator("remote_option", mode="before")
    @classmethod
    def _none_to_false(cls, value: Any) -> Any:
        return False if value is None else value
