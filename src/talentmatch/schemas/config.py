"""Pydantic configuration schema for CLI YAML input."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, ValidationError


class ParserSettings(BaseModel):
    skill_vocabulary: list[str] | None = None
    description_fallback_chars: int | None = None


class ScoringSettings(BaseModel):
    weights: dict[str, int] | None = None
    rating_thresholds: dict[str, float] | None = None


class OutreachSettings(BaseModel):
    llm_endpoint: str | None = None
    llm_api_key: str | None = None
    timeout: float | None = None


class AppConfig(BaseModel):
    parser: ParserSettings = Field(default_factory=ParserSettings)
    scoring: ScoringSettings = Field(default_factory=ScoringSettings)
    outreach: OutreachSettings = Field(default_factory=OutreachSettings)

    def to_settings(self) -> dict[str, Any]:
        settings: dict[str, Any] = {}
        for section in ("parser", "scoring", "outreach"):
            values = getattr(self, section).model_dump(exclude_none=True)
            if values:
                settings[section] = values
        return settings


def load_config(raw: Any) -> AppConfig:
    if not isinstance(raw, dict):
        raise ValidationError.from_exception_data(
            "AppConfig",
            [{"type": "dict_type", "loc": ("config",), "input": raw}],
        )
    return AppConfig.model_validate(raw)
