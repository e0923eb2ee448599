"""Static reference data: departments, skill suggestions and templates."""

from __future__ import annotations

from typing import Any

DEPARTMENTS: tuple[str, ...] = (
    "Engineering",
    "Product",
    "Design",
    "Data Science",
    "DevOps",
    "Marketing",
    "Sales",
    "Customer Success",
    "Operations",
    "Finance",
    "Human Resources",
    "Legal",
    "Security",
    "QA",
    "Research",
)

SKILL_CATEGORIES: dict[str, tuple[str, ...]] = {
    "programming": (
        "JavaScript", "Python", "Java", "TypeScript", "C++", "Go", "Rust",
        "PHP", "C#", "Swift", "Kotlin", "Ruby", "Scala",
    ),
    "frontend": (
        "React", "Vue.js", "Angular", "HTML/CSS", "Sass/SCSS", "Webpack",
        "Next.js", "Nuxt.js", "Tailwind CSS", "Bootstrap",
    ),
    "backend": (
        "Node.js", "Express.js", "Django", "Flask", "Spring Boot",
        "Laravel", "Ruby on Rails", "FastAPI", "ASP.NET",
    ),
    "cloud": (
        "AWS", "Azure", "Google Cloud", "Docker", "Kubernetes",
        "Terraform", "CloudFormation", "Serverless",
    ),
    "database": (
        "PostgreSQL", "MySQL", "MongoDB", "Redis", "Elasticsearch",
        "DynamoDB", "Cassandra", "Neo4j",
    ),
    "tools": (
        "Git", "Jenkins", "GitLab CI", "Jira", "Confluence",
        "Slack", "Figma", "Postman", "Datadog",
    ),
}

ACHIEVEMENT_TEMPLATES: tuple[dict[str, Any], ...] = (
    {
        "category": "Leadership",
        "examples": [
            "Led a team of X developers to deliver Y project on time",
            "Mentored X junior team members, improving their performance by Y%",
            "Coordinated cross-functional initiatives involving X teams",
        ],
    },
    {
        "category": "Technical Impact",
        "examples": [
            "Improved system performance by X% through optimization",
            "Reduced deployment time from X to Y minutes",
            "Implemented solution that saved X hours per week",
        ],
    },
    {
        "category": "Process Improvement",
        "examples": [
            "Introduced new workflow that increased team productivity by X%",
            "Automated manual process, reducing errors by X%",
            "Established best practices adopted across X teams",
        ],
    },
    {
        "category": "Innovation",
        "examples": [
            "Developed new feature that increased user engagement by X%",
            "Created internal tool used by X% of the organization",
            "Pioneered use of X technology, becoming team expert",
        ],
    },
)

EMAIL_TEMPLATES: tuple[dict[str, str], ...] = (
    {
        "id": "hiring_manager",
        "name": "Hiring Manager Outreach",
        "description": "Direct outreach to the hiring manager",
        "use_case": "When you want to connect directly with the person who will make hiring decisions",
    },
    {
        "id": "recruiter",
        "name": "Recruiter Introduction",
        "description": "Professional introduction to the recruiter",
        "use_case": "When you want guidance on the application process and requirements",
    },
    {
        "id": "team_member",
        "name": "Team Member Network",
        "description": "Networking with current team members",
        "use_case": "When you want insights about team culture and role expectations",
    },
)

SAMPLE_POSTING_TEXT = """Job Title: Senior Software Engineer
Department: Engineering
Hiring Manager: Sarah Chen
Location: San Francisco, CA / Remote

Description:
We are looking for a Senior Software Engineer to join our platform team. You will
design and implement scalable microservices, mentor developers and contribute to
architecture decisions.

Requirements:
- 5+ years of software development experience
- Strong proficiency in JavaScript, Python, or Java
- Experience with cloud platforms such as AWS
- Experience with containerization (Docker, Kubernetes)
- Experience with React and Node.js

Benefits:
- Competitive salary and equity
- Flexible PTO
- Professional development budget
"""


def suggest_skills(query: str | None = None) -> list[str] | dict[str, list[str]]:
    """Return skills containing ``query``; all categories when no query is given."""
    if not query:
        return {name: list(skills) for name, skills in SKILL_CATEGORIES.items()}
    needle = query.lower()
    return [
        skill
        for skills in SKILL_CATEGORIES.values()
        for skill in skills
        if needle in skill.lower()
    ]


__all__ = [
    "ACHIEVEMENT_TEMPLATES",
    "DEPARTMENTS",
    "EMAIL_TEMPLATES",
    "SAMPLE_POSTING_TEXT",
    "SKILL_CATEGORIES",
    "suggest_skills",
]
