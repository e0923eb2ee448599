"""Outreach email drafting: templates, writer prompts and an HTTP writer client."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Literal, Protocol
from urllib import error, request

import pendulum
import structlog

from .schemas import CandidateProfile, JobPosting

EmailType = Literal["hiring_manager", "recruiter", "team_member"]
EmailTone = Literal["professional", "friendly", "formal", "casual"]

EMAIL_TYPES: tuple[str, ...] = ("hiring_manager", "recruiter", "team_member")
EMAIL_TONES: tuple[str, ...] = ("professional", "friendly", "formal", "casual")

SYSTEM_PROMPT = (
    "You are an expert career coach specializing in internal job applications "
    "and professional networking. Generate thoughtful, personalized outreach "
    "emails that help candidates stand out positively."
)

_DEFAULT_ACHIEVEMENTS = (
    "Strong performance in current role",
    "Collaborative team player",
    "Commitment to continuous learning",
)


@dataclass(slots=True)
class DraftedEmail:
    subject: str
    body: str
    generated_at: str
    email_type: str
    tone: str
    source: Literal["llm", "template"]


class EmailWriter(Protocol):
    def write(self, messages: list[dict[str, str]]) -> str | None:
        """Return generated email text, or ``None`` when unavailable."""


def render_template_email(
    profile: CandidateProfile,
    job: JobPosting,
    email_type: str = "hiring_manager",
) -> str:
    """Render a deterministic email; ``Subject:`` is always the first line.

    Only hiring manager and recruiter templates exist; other types use the
    hiring manager template.
    """
    if email_type == "recruiter":
        return _recruiter_template(profile, job)
    return _hiring_manager_template(profile, job)


def _hiring_manager_template(profile: CandidateProfile, job: JobPosting) -> str:
    skills = ", ".join(profile.skills[:3]) or "relevant technologies"
    return f"""Subject: Interest in {job.title} Position - Internal Application

Dear {job.hiring_manager or 'Hiring Manager'},

I hope this message finds you well. I am writing to express my strong interest in the {job.title} position that was recently posted on our internal Talent Marketplace.

With my {profile.experience} years of experience in {profile.department}, I believe I would be a valuable addition to your team. My background in {skills} aligns well with the requirements outlined in the job posting.

I would welcome the opportunity to discuss how my experience and passion for {profile.interests or 'innovation'} could contribute to your team's success. Would you be available for a brief conversation about this role?

Thank you for your time and consideration.

Best regards,
{profile.name}"""


def _recruiter_template(profile: CandidateProfile, job: JobPosting) -> str:
    achievements = profile.key_achievements or list(_DEFAULT_ACHIEVEMENTS)
    bullet_list = "\n".join(f"• {item}" for item in achievements)
    return f"""Subject: Internal Application for {job.title} - {profile.name}

Hello {job.recruiter or 'Recruiter'},

I am reaching out regarding the {job.title} position posted internally. As a current {profile.current_role or 'employee'} in {profile.department}, I am excited about the opportunity to grow within our organization.

My experience includes:
{bullet_list}

I have attached my updated resume and would appreciate any guidance on the application process. Please let me know if you need any additional information.

Looking forward to hearing from you.

Best regards,
{profile.name}"""


def build_email_prompt(
    profile: CandidateProfile,
    job: JobPosting,
    email_type: str = "hiring_manager",
    tone: str = "professional",
) -> list[dict[str, str]]:
    """Chat messages describing the email an external writer should produce."""
    user_prompt = f"""Generate a personalized outreach email for an internal job application with the following details:

Candidate Profile:
- Name: {profile.name}
- Current Role: {profile.current_role}
- Department: {profile.department}
- Experience: {profile.experience} years
- Key Skills: {', '.join(profile.skills) or 'Various skills'}
- Key Achievements: {', '.join(profile.key_achievements) or 'Strong performance'}
- Interests: {profile.interests}

Job Details:
- Title: {job.title}
- Department: {job.department}
- Hiring Manager: {job.hiring_manager}
- Job Description: {job.description}
- Requirements: {job.requirements}

Email Type: {email_type}
Tone: {tone}

Create a {tone} email that:
1. Shows genuine interest in the role
2. Highlights relevant experience and skills
3. Demonstrates knowledge of the company/team
4. Includes a clear call to action
5. Is concise but personalized
6. Maintains internal networking etiquette

Format the response with a subject line and body."""
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": user_prompt},
    ]


def split_email(content: str, job: JobPosting) -> tuple[str, str]:
    """Split generated text into ``(subject, body)``.

    The body is everything after the first ``Subject:`` line, or the whole
    text when no subject line is present.
    """
    lines = content.split("\n")
    subject_index = next(
        (idx for idx, line in enumerate(lines) if line.lower().startswith("subject:")),
        None,
    )
    if subject_index is None:
        return f"Interest in {job.title} Position", content.strip()
    subject = lines[subject_index][len("subject:"):].strip()
    body = "\n".join(lines[subject_index + 1:]).strip()
    return subject, body


def analyze_email(content: str) -> dict[str, Any]:
    return {
        "tone": "detailed" if len(content) > 500 else "concise",
        "readability": "good",
        "professionalism": "high" if "Dear" in content or "Hello" in content else "medium",
        "suggestions": [
            "Consider adding specific examples of your achievements",
            "Include a clear call to action",
            "Personalize the greeting if possible",
        ],
    }


class HTTPEmailWriter:
    """Minimal HTTP client for a chat-completion style email writer."""

    def __init__(self, endpoint: str | None, api_key: str | None = None, *, timeout: float = 10.0):
        self._endpoint = endpoint
        self._api_key = api_key
        self._timeout = timeout
        self._logger = structlog.get_logger(__name__)

    def write(self, messages: list[dict[str, str]]) -> str | None:
        if not self._endpoint:
            return None
        payload = {"messages": messages, "max_tokens": 800, "temperature": 0.7}
        data = json.dumps(payload, ensure_ascii=False).encode("utf-8")
        headers = {"Content-Type": "application/json"}
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"

        req = request.Request(self._endpoint, data=data, headers=headers, method="POST")
        try:
            with request.urlopen(req, timeout=self._timeout) as resp:
                body = resp.read().decode("utf-8")
        except error.URLError as exc:  # pragma: no cover - error path
            self._logger.warning("email.writer_failed", error=str(exc))
            return None
        if not body:
            return None
        try:
            return _extract_content(json.loads(body))
        except ValueError as exc:
            self._logger.warning("email.writer_bad_response", error=str(exc))
            return None


def _extract_content(response: Any) -> str | None:
    if not isinstance(response, dict):
        raise ValueError("Writer response must be a JSON object")
    if isinstance(response.get("content"), str):
        return response["content"]
    choices = response.get("choices") or []
    if choices:
        message = choices[0].get("message") or {}
        content = message.get("content")
        if isinstance(content, str):
            return content
    raise ValueError("Writer response has no content")


class EmailDrafter:
    """Draft outreach emails, preferring the external writer when configured."""

    def __init__(self, writer: EmailWriter | None = None) -> None:
        self._writer = writer
        self._logger = structlog.get_logger(__name__)

    def draft(
        self,
        profile: CandidateProfile,
        job: JobPosting,
        *,
        email_type: str = "hiring_manager",
        tone: str = "professional",
    ) -> DraftedEmail:
        content: str | None = None
        source: Literal["llm", "template"] = "template"
        if self._writer is not None:
            content = self._writer.write(build_email_prompt(profile, job, email_type, tone))
            if content:
                source = "llm"
        if not content:
            content = render_template_email(profile, job, email_type)

        subject, body = split_email(content, job)
        self._logger.info("email.drafted", email_type=email_type, tone=tone, source=source)
        return DraftedEmail(
            subject=subject,
            body=body,
            generated_at=pendulum.now("UTC").to_iso8601_string(),
            email_type=email_type,
            tone=tone,
            source=source,
        )


__all__ = [
    "DraftedEmail",
    "EMAIL_TONES",
    "EMAIL_TYPES",
    "EmailDrafter",
    "EmailTone",
    "EmailType",
    "EmailWriter",
    "HTTPEmailWriter",
    "analyze_email",
    "build_email_prompt",
    "render_template_email",
    "split_email",
]
