"""Heuristic job posting parser.

Extraction is keyword and regex based. Each field is resolved on its own so a
posting that only mentions a title still yields a usable record.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field as dataclass_field
from typing import Any

from ..errors import InvalidInput
from ..schemas import JobPosting, Seniority

DEFAULT_SKILL_VOCABULARY: tuple[str, ...] = (
    "JavaScript",
    "Python",
    "Java",
    "React",
    "Node.js",
    "AWS",
    "Docker",
    "Kubernetes",
    "MongoDB",
    "PostgreSQL",
    "TypeScript",
    "Angular",
    "Vue",
    "Spring",
    "Django",
    "Flask",
    "Git",
    "CI/CD",
    "Agile",
    "Scrum",
    "Machine Learning",
    "AI",
    "DevOps",
    "Microservices",
    "REST",
    "GraphQL",
)


@dataclass(frozen=True)
class FieldRule:
    """A labelled line pattern feeding one posting field."""

    field: str
    label: str
    pattern: re.Pattern[str] = dataclass_field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        compiled = re.compile(rf"{self.label}:\s*([^,\n]+)", re.IGNORECASE)
        object.__setattr__(self, "pattern", compiled)


# Evaluated top to bottom; the first rule that matches a field wins.
FIELD_RULES: tuple[FieldRule, ...] = (
    FieldRule("title", "title"),
    FieldRule("title", "position"),
    FieldRule("title", "role"),
    FieldRule("title", "job title"),
    FieldRule("hiring_manager", "hiring manager"),
    FieldRule("hiring_manager", "reports to"),
    FieldRule("hiring_manager", "manager"),
    FieldRule("department", "department"),
    FieldRule("department", "team"),
    FieldRule("department", "division"),
    FieldRule("location", "location"),
    FieldRule("location", "based in"),
    FieldRule("location", "office"),
)

REMOTE_PATTERN = re.compile(r"remote|work from home|wfh|hybrid", re.IGNORECASE)

# Senior is checked before principal, so "Senior Staff Engineer" is senior.
SENIORITY_RULES: tuple[tuple[Seniority, re.Pattern[str]], ...] = (
    ("senior", re.compile(r"senior|sr\.|lead", re.IGNORECASE)),
    ("junior", re.compile(r"junior|jr\.|entry|graduate", re.IGNORECASE)),
    ("principal", re.compile(r"principal|staff|architect", re.IGNORECASE)),
)
DEFAULT_SENIORITY: Seniority = "mid"

REQUIREMENTS_PATTERN = re.compile(
    r"requirements?:?\s*(.*?)(?=benefits?:|\Z)", re.IGNORECASE | re.DOTALL
)
DESCRIPTION_PATTERN = re.compile(
    r"description:?\s*(.*?)(?=requirements?:|qualifications?:|\Z)",
    re.IGNORECASE | re.DOTALL,
)
BENEFITS_PATTERN = re.compile(r"benefits?:\s*(.*)\Z", re.IGNORECASE | re.DOTALL)
_BULLET_PREFIX = re.compile(r"^[\-\*•]\s*")


@dataclass
class PostingParserConfig:
    """Tunables for posting extraction."""

    skill_vocabulary: tuple[str, ...] = DEFAULT_SKILL_VOCABULARY
    description_fallback_chars: int = 500
    truncation_marker: str = "..."


class PostingParser:
    """Turn free-form posting text into a :class:`JobPosting`."""

    def __init__(
        self,
        *,
        config: PostingParserConfig | None = None,
        rules: tuple[FieldRule, ...] = FIELD_RULES,
    ) -> None:
        self._config = config or PostingParserConfig()
        self._rules = rules

    def parse(self, text: Any) -> JobPosting:
        if text is None:
            text = ""
        if not isinstance(text, str):
            raise InvalidInput(
                f"Posting text must be a string, got {type(text).__name__}"
            )

        fields = self.extract_fields(text)
        return JobPosting(
            title=fields.get("title", ""),
            department=fields.get("department", ""),
            hiring_manager=fields.get("hiring_manager", ""),
            location=fields.get("location", ""),
            description=self.extract_description(text),
            requirements=self.extract_requirements(text),
            key_skills=self.extract_skills(text),
            benefits=self.extract_benefits(text),
            seniority=self.classify_seniority(text),
            remote_option=self.detect_remote(text),
        )

    def extract_fields(self, text: str) -> dict[str, str]:
        resolved: dict[str, str] = {}
        for rule in self._rules:
            if rule.field in resolved:
                continue
            match = rule.pattern.search(text)
            if match:
                resolved[rule.field] = match.group(1).strip()
        return resolved

    @staticmethod
    def detect_remote(text: str) -> bool:
        return REMOTE_PATTERN.search(text) is not None

    @staticmethod
    def classify_seniority(text: str) -> Seniority:
        for level, pattern in SENIORITY_RULES:
            if pattern.search(text):
                return level
        return DEFAULT_SENIORITY

    def extract_skills(self, text: str) -> list[str]:
        """Return vocabulary terms present in ``text``, in vocabulary order.

        Matching is a plain case-insensitive substring test, so ``Java`` is
        also reported for a posting that only mentions JavaScript.
        """
        lowered = text.lower()
        return [skill for skill in self._config.skill_vocabulary if skill.lower() in lowered]

    @staticmethod
    def extract_requirements(text: str) -> str:
        match = REQUIREMENTS_PATTERN.search(text)
        return match.group(1).strip() if match else ""

    def extract_description(self, text: str) -> str:
        match = DESCRIPTION_PATTERN.search(text)
        if match:
            return match.group(1).strip()
        head = text[: self._config.description_fallback_chars]
        return f"{head}{self._config.truncation_marker}"

    @staticmethod
    def extract_benefits(text: str) -> list[str]:
        match = BENEFITS_PATTERN.search(text)
        if not match:
            return []
        benefits: list[str] = []
        for line in match.group(1).splitlines():
            item = _BULLET_PREFIX.sub("", line.strip()).strip()
            if item:
                benefits.append(item)
        return benefits


def parse_job_posting(text: str, *, config: PostingParserConfig | None = None) -> JobPosting:
    """Parse ``text`` with a default-configured :class:`PostingParser`."""
    return PostingParser(config=config).parse(text)
