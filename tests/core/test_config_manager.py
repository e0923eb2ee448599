from __future__ import annotations

from pathlib import Path

from talentmatch.config import ConfigManager


def test_config_manager_loads_named_yaml(tmp_path: Path):
    (tmp_path / "scoring.yaml").write_text(
        "scoring:\n  weights:\n    skills: 45\n", encoding="utf-8"
    )
    (tmp_path / "empty.yaml").write_text("", encoding="utf-8")
    manager = ConfigManager(tmp_path)

    assert manager.available() == ["empty", "scoring"]
    assert manager.load("scoring") == {"scoring": {"weights": {"skills": 45}}}
    assert manager.load("empty") == {}


def test_config_manager_missing_directory(tmp_path: Path):
    assert ConfigManager(tmp_path / "nope").available() == []
