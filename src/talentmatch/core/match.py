"""Match result value objects."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, field
from typing import Any, Literal

Priority = Literal["high", "medium", "low"]


def round_half_up(value: float) -> int:
    """Round .5 upward for non-negative scores (10.5 -> 11).

    The value is snapped to 9 decimals first so float noise such as
    ``3 / 5 * 0.7 * 25 == 10.499999999999998`` still rounds up.
    """
    return int(math.floor(round(value, 9) + 0.5))


@dataclass(slots=True)
class MatchFactor:
    """One weighted sub-score of a match."""

    name: str
    earned_score: float
    weight: int
    detail: str
    matching_items: list[str] | None = None

    @property
    def display_score(self) -> int:
        return round_half_up(self.earned_score)

    @property
    def ratio(self) -> float:
        return self.earned_score / self.weight if self.weight else 0.0


@dataclass(slots=True)
class Recommendation:
    """Actionable follow-up attached to a match."""

    type: str
    priority: Priority
    message: str
    action: str


@dataclass(slots=True)
class MatchResult:
    """Complete score breakdown for a profile/job pair."""

    overall_score: int
    rating_label: str
    factors: list[MatchFactor]
    recommendations: list[Recommendation] = field(default_factory=list)

    def factor(self, name: str) -> MatchFactor | None:
        for item in self.factors:
            if item.name == name:
                return item
        return None

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        for rendered, item in zip(payload["factors"], self.factors):
            rendered["display_score"] = item.display_score
        return payload


__all__ = ["MatchFactor", "MatchResult", "Priority", "Recommendation", "round_half_up"]
