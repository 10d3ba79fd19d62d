"""Dependency container wiring for the application."""

import logging
from dataclasses import dataclass

from meal_catalog.adapters.in_memory_catalog_repository import (
    InMemoryCatalogRepository,
)
from meal_catalog.config import Settings
from meal_catalog.sample_data import seed_catalog
from meal_catalog.services.catalog import CatalogService

_logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog_service: CatalogService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    catalog_service = CatalogService(InMemoryCatalogRepository())
    if resolved_settings.seed_sample_data:
        seed_catalog(catalog_service)
        drift = catalog_service.category_count_drift()
        if drift:
            _logger.warning("Category meal counts drifted after seeding: %s", drift)

    return AppContainer(
        settings=resolved_settings,
        catalog_service=catalog_service,
    )
