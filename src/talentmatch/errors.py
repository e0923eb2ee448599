"""Exception types raised by the mobility core."""

from __future__ import annotations

from typing import Iterable


class TalentMatchError(Exception):
    """Base error for the package."""


class InvalidInput(TalentMatchError, ValueError):
    """Raised when a caller passes a value outside the documented input shape."""

    def __init__(self, message: str, *, missing_fields: Iterable[str] | None = None):
        super().__init__(message)
        self.missing_fields = list(missing_fields or [])

    def __str__(self) -> str:  # pragma: no cover - trivial
        base = super().__str__()
        if self.missing_fields:
            return f"{base}: {', '.join(self.missing_fields)}"
        return base


__all__ = ["TalentMatchError", "InvalidInput"]
