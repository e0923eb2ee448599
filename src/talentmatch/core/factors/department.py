"""Department alignment factor."""

from __future__ import annotations

from dataclasses import dataclass

from ...schemas import CandidateProfile, JobPosting
from ..match import MatchFactor


@dataclass
class DepartmentFactorConfig:
    weight: int = 20


class DepartmentFactor:
    """Full credit when the candidate's department contains the job's.

    The check is one-directional: "Platform Engineering" matches a job in
    "Engineering", but not the other way around.
    """

    name = "Department"

    def __init__(self, *, config: DepartmentFactorConfig | None = None) -> None:
        self._config = config or DepartmentFactorConfig()

    @property
    def weight(self) -> int:
        return self._config.weight

    def evaluate(self, profile: CandidateProfile, job: JobPosting) -> MatchFactor:
        aligned = bool(
            profile.department
            and job.department
            and job.department.lower() in profile.department.lower()
        )
        return MatchFactor(
            name=self.name,
            earned_score=float(self.weight) if aligned else 0.0,
            weight=self.weight,
            detail="Same department" if aligned else "Different department",
        )
