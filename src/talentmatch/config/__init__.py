"""Configuration management utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


class ConfigManager:
    """YAML-backed loader for named settings files."""

    def __init__(self, base_path: str | Path):
        self._base_path = Path(base_path)

    def available(self) -> list[str]:
        """Return the names of YAML files under the base path."""
        if not self._base_path.is_dir():
            return []
        return sorted(path.stem for path in self._base_path.glob("*.yaml"))

    def load(self, name: str) -> dict[str, Any]:
        """Load a YAML configuration by name without file extension."""
        return self.load_path(self._base_path / f"{name}.yaml")

    @staticmethod
    def load_path(path: Path) -> Any:
        """Load a YAML document; empty files load as an empty mapping."""
        with path.open("r", encoding="utf-8") as handle:
            return yaml.safe_load(handle) or {}


__all__ = ["ConfigManager"]
