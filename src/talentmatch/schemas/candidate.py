"""Candidate profile schema."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CandidateProfile(BaseModel):
    """Employee profile used for scoring, completeness checks and outreach."""

    id: str | None = None
    name: str = ""
    current_role: str = Field(default="", alias="currentRole")
    department: str = ""
    experience: int = Field(default=0, ge=0)
    skills: list[str] = Field(default_factory=list)
    key_achievements: list[str] = Field(default_factory=list, alias="keyAchievements")
    interests: str = ""
    career_goals: str = Field(default="", alias="careerGoals")
    email: str | None = None
    phone: str | None = None
    linkedin: str | None = Field(default=None, alias="linkedIn")
    created_at: str | None = Field(default=None, alias="createdAt")
    updated_at: str | None = Field(default=None, alias="updatedAt")

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    @field_validator("name", "current_role", "department", "interests", "career_goals", mode="before")
    @classmethod
    def _none_to_empty_text(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("skills", "key_achievements", mode="before")
    @classmethod
    def _none_to_empty_list(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return value
        return [item for item in value if item]

    @field_validator("experience", mode="before")
    @classmethod
    def _none_to_zero(cls, value: Any) -> Any:
        return 0 if value is None else value
