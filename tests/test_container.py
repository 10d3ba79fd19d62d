"""Tests for container wiring."""

import logging
from dataclasses import replace

import pytest

from meal_catalog import sample_data
from meal_catalog.config import Settings
from meal_catalog.containers import build_container


def test_build_container_seeds_sample_data() -> None:
    container = build_container(Settings(seed_sample_data=True))

    assert len(container.catalog_service.list_categories()) == 3
    assert len(container.catalog_service.list_meals()) == 13


def test_build_container_can_skip_seeding(settings: Settings) -> None:
    container = build_container(settings)

    assert container.catalog_service.list_categories() == []
    assert container.settings is settings


def test_containers_do_not_share_state(settings: Settings) -> None:
    first = build_container(settings)
    second = build_container(settings)

    first.catalog_service.add_user("chef", "secret")

    assert second.catalog_service.get_user_by_username("chef") is None


def test_build_container_warns_when_seed_counts_drift(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    preset = replace(sample_data.SAMPLE_CATEGORIES[1], meal_count=2)
    monkeypatch.setattr(
        sample_data,
        "SAMPLE_CATEGORIES",
        (sample_data.SAMPLE_CATEGORIES[0], preset, sample_data.SAMPLE_CATEGORIES[2]),
    )
    monkeypatch.setattr(logging.getLogger("meal_catalog"), "propagate", True)

    with caplog.at_level(logging.WARNING, logger="meal_catalog.containers"):
        container = build_container(Settings(seed_sample_data=True))

    assert container.catalog_service.category_count_drift() == {"lunch": 2}
    assert "drifted after seeding" in caplog.text
