from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from talentmatch.catalog import SAMPLE_POSTING_TEXT
from talentmatch.cli import app


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def write_json(path: Path, payload: object) -> None:
    path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")


@pytest.fixture
def profile_path(tmp_path: Path) -> Path:
    path = tmp_path / "profile.json"
    write_json(
        path,
        {
            "name": "Alex Johnson",
            "currentRole": "Software Engineer II",
            "department": "Engineering",
            "experience": 5,
            "skills": ["React", "AWS"],
            "careerGoals": "grow into senior engineering",
        },
    )
    return path


def test_cli_analyze_prints_structured_job(tmp_path: Path, runner: CliRunner) -> None:
    text_path = tmp_path / "posting.txt"
    text_path.write_text(SAMPLE_POSTING_TEXT, encoding="utf-8")

    result = runner.invoke(app, ["analyze", "--text", str(text_path)])

    assert result.exit_code == 0, result.output
    rendered = json.loads(result.stdout)
    assert rendered["job"]["title"] == "Senior Software Engineer"
    assert rendered["job"]["hiring_manager"] == "Sarah Chen"


def test_cli_match_writes_output(tmp_path: Path, runner: CliRunner, profile_path: Path) -> None:
    job_path = tmp_path / "job.json"
    output_path = tmp_path / "out" / "match.json"
    write_json(
        job_path,
        {
            "title": "Senior Engineer",
            "department": "Engineering",
            "keySkills": ["React", "AWS", "Docker"],
            "seniority": "senior",
        },
    )

    result = runner.invoke(
        app,
        [
            "match",
            "--profile",
            str(profile_path),
            "--job",
            str(job_path),
            "--output",
            str(output_path),
        ],
    )

    assert result.exit_code == 0, result.output
    rendered = json.loads(output_path.read_text(encoding="utf-8"))
    assert rendered["overall_score"] == 87
    assert rendered["rating_label"] == "Excellent Match"
    assert [factor["display_score"] for factor in rendered["factors"]] == [27, 25, 20, 15]


def test_cli_match_with_raw_posting_and_config(
    tmp_path: Path, runner: CliRunner, profile_path: Path
) -> None:
    posting_path = tmp_path / "posting.txt"
    posting_path.write_text(SAMPLE_POSTING_TEXT, encoding="utf-8")
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        "scoring:\n  rating_thresholds:\n    Strong: 50\n",
        encoding="utf-8",
    )

    result = runner.invoke(
        app,
        [
            "--config",
            str(config_path),
            "match",
            "--profile",
            str(profile_path),
            "--job",
            str(posting_path),
            "--raw-job",
        ],
    )

    assert result.exit_code == 0, result.output
    rendered = json.loads(result.stdout)
    assert rendered["factors"][2]["earned_score"] == 20.0
    assert rendered["rating_label"] == "Strong"


def test_cli_match_rejects_invalid_profile(tmp_path: Path, runner: CliRunner) -> None:
    profile_path = tmp_path / "profile.json"
    job_path = tmp_path / "job.json"
    profile_path.write_text("[1, 2, 3]", encoding="utf-8")
    write_json(job_path, {"title": "Engineer"})

    result = runner.invoke(
        app, ["match", "--profile", str(profile_path), "--job", str(job_path)]
    )

    assert result.exit_code == 2


def test_cli_profile_check(runner: CliRunner, profile_path: Path) -> None:
    result = runner.invoke(app, ["profile-check", "--profile", str(profile_path)])

    assert result.exit_code == 0, result.output
    rendered = json.loads(result.stdout)
    assert rendered["missing"] == []
    assert "Add email to improve your profile" in rendered["suggestions"]


def test_cli_draft_email(tmp_path: Path, runner: CliRunner, profile_path: Path) -> None:
    job_path = tmp_path / "job.json"
    write_json(job_path, {"title": "Senior Engineer", "recruiter": "Priya Singh"})

    result = runner.invoke(
        app,
        [
            "draft-email",
            "--profile",
            str(profile_path),
            "--job",
            str(job_path),
            "--type",
            "recruiter",
        ],
    )

    assert result.exit_code == 0, result.output
    rendered = json.loads(result.stdout)
    assert rendered["subject"] == "Internal Application for Senior Engineer - Alex Johnson"
    assert rendered["body"].startswith("Hello Priya Singh,")
    assert rendered["source"] == "template"
    assert rendered["analysis"]["professionalism"] == "high"


def test_cli_catalog_sections(runner: CliRunner) -> None:
    departments = runner.invoke(app, ["catalog", "departments"])
    skills = runner.invoke(app, ["catalog", "skills", "--query", "sql"])
    unknown = runner.invoke(app, ["catalog", "benefits"])

    assert departments.exit_code == 0, departments.output
    assert "Engineering" in json.loads(departments.stdout)
    assert json.loads(skills.stdout) == ["PostgreSQL", "MySQL"]
    assert unknown.exit_code == 2


def test_cli_catalog_prints_sample_posting(runner: CliRunner) -> None:
    result = runner.invoke(app, ["catalog", "sample-posting"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == SAMPLE_POSTING_TEXT


def test_cli_rejects_invalid_config(tmp_path: Path, runner: CliRunner) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text("scoring:\n  weights: not-a-mapping\n", encoding="utf-8")

    result = runner.invoke(app, ["--config", str(config_path), "catalog", "departments"])

    assert result.exit_code == 2
