from __future__ import annotations

import pytest

from talentmatch.outreach import (
    EmailDrafter,
    HTTPEmailWriter,
    analyze_email,
    build_email_prompt,
    render_template_email,
    split_email,
)
from talentmatch.repository import demo_profile
from talentmatch.schemas import CandidateProfile, JobPosting


@pytest.fixture
def job() -> JobPosting:
    return JobPosting(
        title="Senior Software Engineer",
        department="Engineering",
        hiring_manager="Sarah Chen",
        recruiter="Mike Rodriguez",
    )


class StubWriter:
    def __init__(self, content: str | None):
        self._content = content
        self.calls: list[list[dict[str, str]]] = []

    def write(self, messages: list[dict[str, str]]) -> str | None:
        self.calls.append(messages)
        return self._content


def test_hiring_manager_template(job: JobPosting):
    content = render_template_email(demo_profile(), job, "hiring_manager")

    assert content.splitlines()[0] == (
        "Subject: Interest in Senior Software Engineer Position - Internal Application"
    )
    assert "Dear Sarah Chen," in content
    assert "My background in JavaScript, React, Node.js aligns" in content
    assert content.endswith("Best regards,\nAlex Johnson")


def test_template_placeholders_fall_back():
    profile = CandidateProfile(name="Sam", department="Sales")
    content = render_template_email(profile, JobPosting(title="Analyst"), "hiring_manager")

    assert "Dear Hiring Manager," in content
    assert "relevant technologies" in content
    assert "passion for innovation" in content


def test_recruiter_template_lists_achievements(job: JobPosting):
    content = render_template_email(demo_profile(), job, "recruiter")

    assert content.startswith("Subject: Internal Application for Senior Software Engineer - Alex Johnson")
    assert "Hello Mike Rodriguez," in content
    assert "• Mentored 3 junior developers and improved team productivity" in content


def test_team_member_uses_hiring_manager_template(job: JobPosting):
    assert render_template_email(demo_profile(), job, "team_member") == render_template_email(
        demo_profile(), job, "hiring_manager"
    )


def test_split_email_without_subject_uses_fallback(job: JobPosting):
    subject, body = split_email("Hi there\nThanks", job)

    assert subject == "Interest in Senior Software Engineer Position"
    assert body == "Hi there\nThanks"


def test_split_email_extracts_subject_case_insensitively(job: JobPosting):
    subject, body = split_email("SUBJECT:   Quick question\n\nHello team", job)

    assert subject == "Quick question"
    assert body == "Hello team"


def test_prompt_mentions_profile_and_job(job: JobPosting):
    messages = build_email_prompt(demo_profile(), job, "recruiter", "friendly")

    assert [message["role"] for message in messages] == ["system", "user"]
    assert "- Name: Alex Johnson" in messages[1]["content"]
    assert "- Title: Senior Software Engineer" in messages[1]["content"]
    assert "Email Type: recruiter" in messages[1]["content"]
    assert "Create a friendly email" in messages[1]["content"]


def test_drafter_uses_template_without_writer(job: JobPosting):
    email = EmailDrafter().draft(demo_profile(), job)

    assert email.source == "template"
    assert email.subject == "Interest in Senior Software Engineer Position - Internal Application"
    assert email.body.startswith("Dear Sarah Chen,")
    assert email.email_type == "hiring_manager"
    assert email.tone == "professional"
    assert email.generated_at


def test_drafter_prefers_writer_output(job: JobPosting):
    writer = StubWriter("Subject: Coffee chat?\n\nHi Sarah,\nCould we talk?")

    email = EmailDrafter(writer=writer).draft(demo_profile(), job, tone="casual")

    assert writer.calls
    assert email.source == "llm"
    assert email.subject == "Coffee chat?"
    assert email.body == "Hi Sarah,\nCould we talk?"
    assert email.tone == "casual"


def test_drafter_falls_back_when_writer_returns_nothing(job: JobPosting):
    email = EmailDrafter(writer=StubWriter(None)).draft(demo_profile(), job, email_type="recruiter")

    assert email.source == "template"
    assert email.body.startswith("Hello Mike Rodriguez,")


def test_http_writer_without_endpoint_returns_none():
    assert HTTPEmailWriter(None).write([{"role": "user", "content": "hi"}]) is None


def test_analyze_email():
    concise = analyze_email("Dear team, thanks")
    detailed = analyze_email("x" * 501)

    assert concise["tone"] == "concise"
    assert concise["professionalism"] == "high"
    assert detailed["tone"] == "detailed"
    assert detailed["professionalism"] == "medium"
    assert len(concise["suggestions"]) == 3


class FakeResponse:
    def __init__(self, body: str):
        self._body = body

    def read(self) -> bytes:
        return self._body.encode("utf-8")

    def __enter__(self) -> "FakeResponse":
        return self

    def __exit__(self, *exc_info) -> None:
        return None


@pytest.mark.parametrize(
    "body",
    [
        '{"content": "Subject: Hi\\n\\nBody"}',
        '{"choices": [{"message": {"content": "Subject: Hi\\n\\nBody"}}]}',
    ],
)
def test_http_writer_reads_content(monkeypatch: pytest.MonkeyPatch, body: str):
    captured = {}

    def fake_urlopen(req, timeout):
        captured["auth"] = req.get_header("Authorization")
        captured["timeout"] = timeout
        return FakeResponse(body)

    monkeypatch.setattr("talentmatch.outreach.request.urlopen", fake_urlopen)
    writer = HTTPEmailWriter("http://writer.local/v1", "secret", timeout=3.0)

    assert writer.write([{"role": "user", "content": "hi"}]) == "Subject: Hi\n\nBody"
    assert captured == {"auth": "Bearer secret", "timeout": 3.0}


def test_http_writer_ignores_unusable_response(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(
        "talentmatch.outreach.request.urlopen",
        lambda req, timeout: FakeResponse('{"unexpected": true}'),
    )

    assert HTTPEmailWriter("http://writer.local/v1").write([]) is None
