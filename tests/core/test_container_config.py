from __future__ import annotations

import pytest

from jobmatch.container import create_container
from jobmatch.schemas.config import AppConfig, load_config


def test_create_container_with_overrides():
    container = create_container(
        settings={
            "core": {"max_reasons": 2},
            "listing": {"max_page_size": 10},
            "evaluators": {
                "experience": {"match_points": 40},
                "education": {"match_points": 25},
                "skills": {"max_points": 60},
                "bonus": {"language_keywords": ["global"]},
            },
        }
    )

    scorer = container.match_scorer()

    assert scorer._max_reasons == 2
    assert container.experience_evaluator()._config.match_points == 40
    assert container.education_evaluator()._config.match_points == 25
    assert container.skills_evaluator()._config.max_points == 60
    assert container.bonus_evaluator()._config.language_keywords == ("global",)
    assert container.job_listing()._max_page_size == 10


def test_create_container_defaults():
    container = create_container()

    assert container.match_scorer()._max_reasons == 3
    assert container.job_listing()._max_page_size == 50
    assert container.adapter_registry().sources() == ["native", "mongo"]


def test_load_config_validation():
    data = {
        "core": {"max_reasons": 4},
        "evaluators": {"skills": {"reason_preview": 2}},
    }
    app_config = load_config(data)
    assert isinstance(app_config, AppConfig)
    settings = app_config.to_settings()
    assert settings["core"]["max_reasons"] == 4
    assert settings["evaluators"] == {"skills": {"reason_preview": 2}}
    assert "listing" not in settings


def test_load_config_rejects_non_mapping():
    with pytest.raises(ValueError):
        load_config(["core"])
