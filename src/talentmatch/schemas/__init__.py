"""Pydantic schema definitions shared by the parser, scorer and outreach helpers."""

from __future__ import annotations

from .candidate import CandidateProfile
from .job import SENIORITY_LEVELS, JobPosting, Seniority

__all__ = [
    "CandidateProfile",
    "JobPosting",
    "Seniority",
    "SENIORITY_LEVELS",
]
