"""Skill overlap factor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ...schemas import CandidateProfile, JobPosting
from ..match import MatchFactor


@dataclass
class SkillsFactorConfig:
    weight: int = 40


class SkillsFactor:
    """Share of the job's key skills covered by the candidate."""

    name = "Skills"

    def __init__(self, *, config: SkillsFactorConfig | None = None) -> None:
        self._config = config or SkillsFactorConfig()

    @property
    def weight(self) -> int:
        return self._config.weight

    def evaluate(self, profile: CandidateProfile, job: JobPosting) -> MatchFactor:
        candidate_skills = profile.skills
        job_skills = job.key_skills

        matched_job_skills = [
            job_skill
            for job_skill in job_skills
            if any(self.skills_overlap(skill, job_skill) for skill in candidate_skills)
        ]
        matching_items = [
            skill
            for skill in candidate_skills
            if any(self.skills_overlap(skill, job_skill) for job_skill in job_skills)
        ]

        earned = self._coverage(job_skills, matched_job_skills) * self.weight
        return MatchFactor(
            name=self.name,
            earned_score=earned,
            weight=self.weight,
            detail=f"{len(matched_job_skills)}/{len(job_skills)} skills match",
            matching_items=matching_items,
        )

    @staticmethod
    def skills_overlap(candidate_skill: str, job_skill: str) -> bool:
        """Either lowercased skill contains the other."""
        left = candidate_skill.lower()
        right = job_skill.lower()
        return right in left or left in right

    @staticmethod
    def _coverage(job_skills: Sequence[str], matched: Sequence[str]) -> float:
        if not job_skills:
            return 0.0
        return len(matched) / len(job_skills)
