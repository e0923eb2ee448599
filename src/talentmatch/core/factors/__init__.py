"""Weighted factors combined by the match scorer."""

from .skills import SkillsFactor, SkillsFactorConfig
from .experience import ExperienceFactor, ExperienceFactorConfig
from .department import DepartmentFactor, DepartmentFactorConfig
from .career_goals import CareerGoalsFactor, CareerGoalsFactorConfig

__all__ = [
    "SkillsFactor",
    "SkillsFactorConfig",
    "ExperienceFactor",
    "ExperienceFactorConfig",
    "DepartmentFactor",
    "DepartmentFactorConfig",
    "CareerGoalsFactor",
    "CareerGoalsFactorConfig",
]
