"""Career goals alignment factor."""

from __future__ import annotations

from dataclasses import dataclass

from ...schemas import CandidateProfile, JobPosting
from ..match import MatchFactor


@dataclass
class CareerGoalsFactorConfig:
    weight: int = 15
    partial_credit: float = 0.5


class CareerGoalsFactor:
    """Weak heuristic: do the stated goals mention the first word of the title?"""

    name = "Career Goals"

    def __init__(self, *, config: CareerGoalsFactorConfig | None = None) -> None:
        self._config = config or CareerGoalsFactorConfig()

    @property
    def weight(self) -> int:
        return self._config.weight

    def evaluate(self, profile: CandidateProfile, job: JobPosting) -> MatchFactor:
        keyword = self.title_keyword(job.title)
        aligned = bool(
            profile.career_goals and keyword and keyword in profile.career_goals.lower()
        )
        multiplier = 1.0 if aligned else self._config.partial_credit
        return MatchFactor(
            name=self.name,
            earned_score=multiplier * self.weight,
            weight=self.weight,
            detail="Alignment with stated career objectives",
            matching_items=[keyword] if aligned else None,
        )

    @staticmethod
    def title_keyword(title: str) -> str:
        tokens = title.lower().split()
        return tokens[0] if tokens else ""
