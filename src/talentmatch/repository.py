"""In-process profile storage."""

from __future__ import annotations

import uuid
from typing import Iterable, Protocol, runtime_checkable

import pendulum

from .schemas import CandidateProfile


@runtime_checkable
class ProfileRepository(Protocol):
    """Storage contract for candidate profiles."""

    def get(self, profile_id: str) -> CandidateProfile | None:
        """Return the stored profile or ``None``."""

    def default(self) -> CandidateProfile | None:
        """Return the profile used when no id is given, or ``None``."""

    def put(self, profile: CandidateProfile) -> tuple[CandidateProfile, bool]:
        """Store ``profile`` and return it together with a ``created`` flag."""


def demo_profile() -> CandidateProfile:
    return CandidateProfile(
        id="demo-candidate",
        name="Alex Johnson",
        current_role="Software Engineer II",
        department="Engineering",
        experience=4,
        skills=["JavaScript", "React", "Node.js", "Python", "AWS", "Docker"],
        key_achievements=[
            "Led migration to microservices architecture, reducing system downtime by 40%",
            "Mentored 3 junior developers and improved team productivity",
            "Implemented automated testing pipeline, increasing code coverage to 90%",
        ],
        interests="machine learning and scalable system design",
        email="alex.johnson@company.com",
        career_goals="Transition into a senior engineering role with focus on AI/ML applications",
    )


class InMemoryProfileRepository:
    """Dictionary-backed repository; contents live as long as the instance."""

    def __init__(self, profiles: Iterable[CandidateProfile] | None = None):
        self._profiles: dict[str, CandidateProfile] = {}
        for profile in profiles or []:
            self.put(profile)

    @classmethod
    def with_demo_profile(cls) -> "InMemoryProfileRepository":
        return cls([demo_profile()])

    def get(self, profile_id: str) -> CandidateProfile | None:
        return self._profiles.get(profile_id)

    def default(self) -> CandidateProfile | None:
        return next(iter(self._profiles.values()), None)

    def put(self, profile: CandidateProfile) -> tuple[CandidateProfile, bool]:
        profile_id = profile.id or f"candidate-{uuid.uuid4().hex[:12]}"
        now = pendulum.now("UTC").to_iso8601_string()
        existing = self._profiles.get(profile_id)
        created_at = profile.created_at or (existing.created_at if existing else None) or now
        stored = profile.model_copy(
            update={"id": profile_id, "created_at": created_at, "updated_at": now}
        )
        self._profiles[profile_id] = stored
        return stored, existing is None

    def __len__(self) -> int:
        return len(self._profiles)


__all__ = ["InMemoryProfileRepository", "ProfileRepository", "demo_profile"]
