"""Weighted match scoring between a candidate profile and a job posting."""

from __future__ import annotations

from dataclasses import dataclass, replace
from functools import reduce
from typing import Any, Iterable, Mapping, Protocol, runtime_checkable

from pydantic import BaseModel, ValidationError

from ..errors import InvalidInput
from ..schemas import CandidateProfile, JobPosting
from .factors import CareerGoalsFactor, DepartmentFactor, ExperienceFactor, SkillsFactor
from .match import MatchFactor, MatchResult, Recommendation, round_half_up


@runtime_checkable
class Factor(Protocol):
    """Contract shared by every weighted factor."""

    name: str

    @property
    def weight(self) -> int:
        """Maximum score this factor can contribute."""

    def evaluate(self, profile: CandidateProfile, job: JobPosting) -> MatchFactor:
        """Return the weighted sub-score for the given pair."""


@dataclass(frozen=True)
class RecommendationRule:
    """Emit ``recommendation`` when a factor earns less than ``ratio`` of its weight.

    Rules without a factor name always fire.
    """

    recommendation: Recommendation
    factor_name: str | None = None
    ratio: float = 0.0

    def applies(self, result: MatchResult) -> bool:
        if self.factor_name is None:
            return True
        factor = result.factor(self.factor_name)
        if factor is None:
            return False
        return factor.earned_score < factor.weight * self.ratio


DEFAULT_RECOMMENDATION_RULES: tuple[RecommendationRule, ...] = (
    RecommendationRule(
        factor_name="Skills",
        ratio=0.7,
        recommendation=Recommendation(
            type="skill_development",
            priority="high",
            message=(
                "Consider highlighting transferable skills or pursuing training "
                "in the required technologies"
            ),
            action="Review job requirements and identify skill gaps to address",
        ),
    ),
    RecommendationRule(
        factor_name="Experience",
        ratio=0.6,
        recommendation=Recommendation(
            type="experience_positioning",
            priority="medium",
            message=(
                "Emphasize relevant project experience and achievements to "
                "demonstrate readiness"
            ),
            action="Highlight complex projects and leadership experiences",
        ),
    ),
    RecommendationRule(
        recommendation=Recommendation(
            type="networking",
            priority="medium",
            message=(
                "Connect with current team members to learn more about team "
                "culture and expectations"
            ),
            action="Reach out to 1-2 people on the team for informational interviews",
        ),
    ),
)


class MatchScorer:
    """Fold a fixed, ordered list of factors into a :class:`MatchResult`."""

    DEFAULT_RATING_THRESHOLDS: dict[str, float] = {
        "Excellent Match": 80,
        "Good Match": 60,
        "Fair Match": 40,
    }
    FALLBACK_RATING = "Weak Match"

    def __init__(
        self,
        factors: Iterable[Factor] | None = None,
        *,
        rating_thresholds: Mapping[str, float] | None = None,
        recommendation_rules: Iterable[RecommendationRule] | None = None,
    ) -> None:
        self._factors = list(factors) if factors is not None else default_factors()
        if not self._factors:
            raise ValueError("MatchScorer requires at least one factor.")
        thresholds = rating_thresholds or self.DEFAULT_RATING_THRESHOLDS
        self._thresholds = sorted(thresholds.items(), key=lambda item: item[1], reverse=True)
        self._rules = tuple(
            recommendation_rules
            if recommendation_rules is not None
            else DEFAULT_RECOMMENDATION_RULES
        )

    @property
    def factors(self) -> list[Factor]:
        return list(self._factors)

    def score(self, profile: Any, job: Any) -> MatchResult:
        candidate = _coerce(profile, CandidateProfile, "profile")
        posting = _coerce(job, JobPosting, "job")

        factors: list[MatchFactor] = reduce(
            lambda acc, factor: acc + [_clamp(factor.evaluate(candidate, posting))],
            self._factors,
            [],
        )

        total_weight = sum(item.weight for item in factors)
        earned = sum(item.earned_score for item in factors)
        overall = round_half_up(earned / total_weight * 100) if total_weight else 0
        overall = min(max(overall, 0), 100)

        result = MatchResult(
            overall_score=overall,
            rating_label=self.rating_for(overall),
            factors=factors,
        )
        result.recommendations = [
            replace(rule.recommendation) for rule in self._rules if rule.applies(result)
        ]
        return result

    def rating_for(self, overall_score: int) -> str:
        for label, threshold in self._thresholds:
            if overall_score >= threshold:
                return label
        return self.FALLBACK_RATING


def default_factors() -> list[Factor]:
    """Skills, Experience, Department, Career Goals with default weights."""
    return [SkillsFactor(), ExperienceFactor(), DepartmentFactor(), CareerGoalsFactor()]


def score_match(profile: Any, job: Any) -> MatchResult:
    """Score ``profile`` against ``job`` with the default factor set."""
    return MatchScorer().score(profile, job)


def _coerce(value: Any, model: type[BaseModel], label: str) -> Any:
    if isinstance(value, model):
        return value
    if isinstance(value, BaseModel):
        value = value.model_dump(by_alias=False)
    if not isinstance(value, Mapping):
        raise InvalidInput(f"{label} must be a mapping or {model.__name__}, got {type(value).__name__}")
    try:
        return model.model_validate(dict(value))
    except ValidationError as exc:
        raise InvalidInput(f"Invalid {label}: {exc.error_count()} validation error(s)") from exc


def _clamp(factor: MatchFactor) -> MatchFactor:
    factor.earned_score = min(max(factor.earned_score, 0.0), float(factor.weight))
    return factor
