"""Dependency injection container for the matching service."""

from __future__ import annotations

from dependency_injector import containers, providers

from .adapters import MongoExportAdapter, NativeAdapter
from .applications import ApplicationDesk
from .core import (
    BonusEvaluator,
    EducationEvaluator,
    ExperienceEvaluator,
    MatchScorer,
    SkillsEvaluator,
)
from .core.evaluators.bonus import BonusConfig
from .core.evaluators.education import EducationConfig
from .core.evaluators.experience import ExperienceConfig
from .core.evaluators.skills import SkillsConfig
from .pipeline import (
    AdapterRegistry,
    CandidateLoader,
    JobListing,
    JobLoader,
    RankingPipeline,
)


class MatchingContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    config = providers.Configuration()

    native_adapter = providers.Singleton(NativeAdapter)
    mongo_adapter = providers.Singleton(
        MongoExportAdapter,
        as_of=config.as_of,
    )

    adapter_registry = providers.Singleton(
        AdapterRegistry,
        adapters=providers.List(native_adapter, mongo_adapter),
    )

    candidate_loader = providers.Singleton(CandidateLoader, registry=adapter_registry)
    job_loader = providers.Singleton(JobLoader, registry=adapter_registry)

    experience_evaluator = providers.Singleton(ExperienceEvaluator)
    education_evaluator = providers.Singleton(EducationEvaluator)
    skills_evaluator = providers.Singleton(SkillsEvaluator)
    bonus_evaluator = providers.Singleton(BonusEvaluator)

    # Order matters only for the evaluation breakdown; reasons are re-prioritized.
    evaluators = providers.List(
        experience_evaluator,
        education_evaluator,
        skills_evaluator,
        bonus_evaluator,
    )

    match_scorer = providers.Singleton(
        MatchScorer,
        evaluators=evaluators,
        max_reasons=config.core.max_reasons,
    )

    job_listing = providers.Singleton(
        JobListing,
        scorer=match_scorer,
        max_page_size=config.listing.max_page_size,
    )

    application_desk = providers.Singleton(ApplicationDesk)

    pipeline = providers.Factory(
        RankingPipeline,
        listing=job_listing,
        registry=adapter_registry,
        candidate_loader=candidate_loader,
        job_loader=job_loader,
    )


def create_container(
    *,
    settings: dict | None = None,
    as_of: str | None = None,
) -> MatchingContainer:
    """Instantiate container with optional overrides."""

    container = MatchingContainer()
    overrides: dict = {"as_of": as_of}

    if isinstance(settings, dict):
        overrides["core"] = settings.get("core") or {}
        overrides["listing"] = settings.get("listing") or {}
    container.config.from_dict(overrides)

    evaluator_settings = settings.get("evaluators", {}) if isinstance(settings, dict) else {}

    if "experience" in evaluator_settings:
        experience_config = ExperienceConfig(**evaluator_settings["experience"])
        container.experience_evaluator.override(
            providers.Singleton(ExperienceEvaluator, config=experience_config)
        )

    if "education" in evaluator_settings:
        education_config = EducationConfig(**evaluator_settings["education"])
        container.education_evaluator.override(
            providers.Singleton(EducationEvaluator, config=education_config)
        )

    if "skills" in evaluator_settings:
        skills_config = SkillsConfig(**evaluator_settings["skills"])
        container.skills_evaluator.override(
            providers.Singleton(SkillsEvaluator, config=skills_config)
        )

    if "bonus" in evaluator_settings:
        bonus_settings = dict(evaluator_settings["bonus"])
        if "language_keywords" in bonus_settings:
            bonus_settings["language_keywords"] = tuple(bonus_settings["language_keywords"])
        bonus_config = BonusConfig(**bonus_settings)
        container.bonus_evaluator.override(
            providers.Singleton(BonusEvaluator, config=bonus_config)
        )

    return container
