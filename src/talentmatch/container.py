"""Dependency injection container for the mobility assistant."""

from __future__ import annotations

from dependency_injector import containers, providers

from .core import MatchScorer, PostingParser, ProfileCompletenessAnalyzer
from .core.factors import (
    CareerGoalsFactor,
    CareerGoalsFactorConfig,
    DepartmentFactor,
    DepartmentFactorConfig,
    ExperienceFactor,
    ExperienceFactorConfig,
    SkillsFactor,
    SkillsFactorConfig,
)
from .core.parser import PostingParserConfig
from .outreach import EmailDrafter, HTTPEmailWriter
from .repository import InMemoryProfileRepository
from .service import MobilityService


class MobilityContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    parser = providers.Singleton(PostingParser)

    skills_factor = providers.Singleton(SkillsFactor)
    experience_factor = providers.Singleton(ExperienceFactor)
    department_factor = providers.Singleton(DepartmentFactor)
    career_goals_factor = providers.Singleton(CareerGoalsFactor)

    factors = providers.List(
        skills_factor,
        experience_factor,
        department_factor,
        career_goals_factor,
    )

    scorer = providers.Singleton(MatchScorer, factors=factors)

    email_writer = providers.Object(None)
    drafter = providers.Singleton(EmailDrafter, writer=email_writer)

    repository = providers.Singleton(InMemoryProfileRepository.with_demo_profile)
    completeness = providers.Singleton(ProfileCompletenessAnalyzer)

    service = providers.Factory(
        MobilityService,
        parser=parser,
        scorer=scorer,
        drafter=drafter,
        repository=repository,
        completeness=completeness,
    )


_FACTOR_PROVIDERS = {
    "skills": ("skills_factor", SkillsFactor, SkillsFactorConfig),
    "experience": ("experience_factor", ExperienceFactor, ExperienceFactorConfig),
    "department": ("department_factor", DepartmentFactor, DepartmentFactorConfig),
    "career_goals": ("career_goals_factor", CareerGoalsFactor, CareerGoalsFactorConfig),
}


def create_container(*, settings: dict | None = None) -> MobilityContainer:
    """Instantiate container with optional overrides."""

    container = MobilityContainer()

    if not settings or not isinstance(settings, dict):
        return container

    parser_settings = settings.get("parser", {})
    if parser_settings:
        parser_config = PostingParserConfig()
        if parser_settings.get("skill_vocabulary"):
            parser_config.skill_vocabulary = tuple(parser_settings["skill_vocabulary"])
        if parser_settings.get("description_fallback_chars") is not None:
            parser_config.description_fallback_chars = int(
                parser_settings["description_fallback_chars"]
            )
        container.parser.override(providers.Singleton(PostingParser, config=parser_config))

    scoring_settings = settings.get("scoring", {})
    if scoring_settings.get("rating_thresholds"):
        container.scorer.override(
            providers.Singleton(
                MatchScorer,
                factors=container.factors,
                rating_thresholds=dict(scoring_settings["rating_thresholds"]),
            )
        )

    weights = scoring_settings.get("weights") or {}
    unknown = set(weights) - set(_FACTOR_PROVIDERS)
    if unknown:
        raise ValueError(f"Unknown scoring factors: {sorted(unknown)}")
    for key, weight in weights.items():
        attribute, factor_cls, config_cls = _FACTOR_PROVIDERS[key]
        getattr(container, attribute).override(
            providers.Singleton(factor_cls, config=config_cls(weight=int(weight)))
        )

    outreach_settings = settings.get("outreach", {})
    if outreach_settings.get("llm_endpoint"):
        container.email_writer.override(
            providers.Singleton(
                HTTPEmailWriter,
                outreach_settings["llm_endpoint"],
                outreach_settings.get("llm_api_key"),
                timeout=float(outreach_settings.get("timeout", 10.0)),
            )
        )

    return container
