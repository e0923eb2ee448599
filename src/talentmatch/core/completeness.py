"""Profile completeness analysis."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Mapping

from ..schemas import CandidateProfile
from .match import round_half_up

CompletenessStatus = Literal["excellent", "good", "fair", "needs_improvement"]


@dataclass(frozen=True)
class CompletenessCheck:
    field: str
    weight: float
    required: bool = False
    min_items: int | None = None


DEFAULT_CHECKS: tuple[CompletenessCheck, ...] = (
    CompletenessCheck("name", 10, required=True),
    CompletenessCheck("current_role", 10, required=True),
    CompletenessCheck("department", 10, required=True),
    CompletenessCheck("experience", 8),
    CompletenessCheck("skills", 15, min_items=3),
    CompletenessCheck("key_achievements", 20, min_items=2),
    CompletenessCheck("interests", 10),
    CompletenessCheck("career_goals", 12),
    CompletenessCheck("email", 5),
)


@dataclass(slots=True)
class CompletenessReport:
    completeness_percentage: int
    score: int
    max_score: float
    status: CompletenessStatus
    missing: list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)


class ProfileCompletenessAnalyzer:
    """Weighted checklist over the fields of a candidate profile."""

    STATUS_THRESHOLDS: tuple[tuple[float, CompletenessStatus], ...] = (
        (80, "excellent"),
        (60, "good"),
        (40, "fair"),
    )

    def __init__(self, checks: tuple[CompletenessCheck, ...] = DEFAULT_CHECKS) -> None:
        self._checks = checks

    def analyze(self, profile: CandidateProfile | Mapping[str, Any]) -> CompletenessReport:
        if not isinstance(profile, CandidateProfile):
            profile = CandidateProfile.model_validate(dict(profile))

        score = 0.0
        max_score = 0.0
        missing: list[str] = []
        suggestions: list[str] = []

        for check in self._checks:
            max_score += check.weight
            value = getattr(profile, check.field, None)

            if not value:
                if check.required:
                    missing.append(check.field)
                else:
                    suggestions.append(f"Add {check.field} to improve your profile")
            elif isinstance(value, list) and check.min_items and len(value) < check.min_items:
                suggestions.append(
                    f"Add more {check.field} (at least {check.min_items} recommended)"
                )
                score += len(value) / check.min_items * check.weight
            else:
                score += check.weight

        percentage = round_half_up(score / max_score * 100) if max_score else 0
        return CompletenessReport(
            completeness_percentage=percentage,
            score=round_half_up(score),
            max_score=max_score,
            status=self._status_for(percentage),
            missing=missing,
            suggestions=suggestions,
        )

    def _status_for(self, percentage: int) -> CompletenessStatus:
        for threshold, status in self.STATUS_THRESHOLDS:
            if percentage >= threshold:
                return status
        return "needs_improvement"


def analyze_profile(profile: CandidateProfile | Mapping[str, Any]) -> CompletenessReport:
    return ProfileCompletenessAnalyzer().analyze(profile)
