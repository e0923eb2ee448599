"""Experience level factor."""

from __future__ import annotations

from dataclasses import dataclass, field

from ...schemas import CandidateProfile, JobPosting
from ..match import MatchFactor


def _default_ranges() -> dict[str, tuple[int, int]]:
    return {
        "junior": (0, 2),
        "mid": (2, 5),
        "senior": (5, 10),
        "principal": (8, 15),
    }


@dataclass
class ExperienceFactorConfig:
    """Expected years per seniority tier and the shape of the penalties."""

    weight: int = 25
    ranges: dict[str, tuple[int, int]] = field(default_factory=_default_ranges)
    fallback_level: str = "mid"
    under_qualified_ceiling: float = 0.7
    over_qualified_floor: float = 0.8
    over_qualified_decay_years: float = 10.0


class ExperienceFactor:
    """Compare years of experience with the range expected for the tier."""

    name = "Experience"

    def __init__(self, *, config: ExperienceFactorConfig | None = None) -> None:
        self._config = config or ExperienceFactorConfig()

    @property
    def weight(self) -> int:
        return self._config.weight

    def evaluate(self, profile: CandidateProfile, job: JobPosting) -> MatchFactor:
        years = profile.experience or 0
        seniority = job.seniority or self._config.fallback_level
        multiplier = self.multiplier(years, seniority)
        return MatchFactor(
            name=self.name,
            earned_score=multiplier * self.weight,
            weight=self.weight,
            detail=f"{years} years experience for {seniority} level role",
        )

    def expected_range(self, seniority: str) -> tuple[int, int]:
        ranges = self._config.ranges
        return ranges.get(seniority) or ranges[self._config.fallback_level]

    def multiplier(self, years: int, seniority: str) -> float:
        low, high = self.expected_range(seniority)
        if low <= years <= high:
            return 1.0
        if years < low:
            # years >= 0, so low > 0 here
            return max(0.0, years / low * self._config.under_qualified_ceiling)
        overshoot = (years - high) / self._config.over_qualified_decay_years
        return max(self._config.over_qualified_floor, 1 - overshoot)
