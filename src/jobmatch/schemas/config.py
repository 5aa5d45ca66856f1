"""Pydantic configuration schema for CLI YAML input."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, ValidationError


class CoreConfig(BaseModel):
    max_reasons: int | None = None


class ListingConfig(BaseModel):
    max_page_size: int | None = None


class EvaluatorConfig(BaseModel):
    experience: dict[str, Any] | None = None
    education: dict[str, Any] | None = None
    skills: dict[str, Any] | None = None
    bonus: dict[str, Any] | None = None


class AppConfig(BaseModel):
    core: CoreConfig = Field(default_factory=CoreConfig)
    listing: ListingConfig = Field(default_factory=ListingConfig)
    evaluators: EvaluatorConfig = Field(default_factory=EvaluatorConfig)

    def to_settings(self) -> dict[str, Any]:
        settings: dict[str, Any] = {}
        core_settings = self.core.model_dump(exclude_none=True)
        if core_settings:
            settings["core"] = core_settings
        listing_settings = self.listing.model_dump(exclude_none=True)
        if listing_settings:
            settings["listing"] = listing_settings
        evaluator_settings = self.evaluators.model_dump(exclude_none=True)
        if evaluator_settings:
            settings["evaluators"] = evaluator_settings
        return settings


def load_config(raw: Any) -> AppConfig:
    if raw is None:
        return AppConfig()
    if not isinstance(raw, dict):
        raise ValidationError.from_exception_data(
            "AppConfig",
            [{"type": "dict_type", "loc": ("config",), "input": raw}],
        )
    return AppConfig.model_validate(raw)
