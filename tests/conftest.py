"""Shared test fixtures."""

from dataclasses import dataclass
from typing import Any

import pytest

from meal_catalog.adapters.in_memory_catalog_repository import (
    InMemoryCatalogRepository,
)
from meal_catalog.config import Settings
from meal_catalog.containers import AppContainer
from meal_catalog.domain.models import (
    Category,
    Meal,
    NewCategory,
    NewMeal,
    NutritionalInfo,
)
from meal_catalog.sample_data import seed_catalog
from meal_catalog.services.catalog import CatalogService


def make_new_meal(  # noqa: PLR0913
    name: str = "Test Meal",
    *,
    category: str = "lunch",
    calories: float = 400,
    protein: float = 20,
    carbs: float = 40,
    fats: float = 10,
    tags: tuple[str, ...] = (),
    description: str = "A meal for tests.",
) -> NewMeal:
    return NewMeal(
        name=name,
        description=description,
        category=category,
        image_url="https://example.com/meal.jpg",
        nutritional_info=NutritionalInfo(
            calories=calories, protein=protein, carbs=carbs, fats=fats
        ),
        tags=tags,
    )


def make_meal(meal_id: int, **kwargs: Any) -> Meal:
    new_meal = make_new_meal(**kwargs)
    return Meal(
        id=meal_id,
        name=new_meal.name,
        description=new_meal.description,
        category=new_meal.category,
        image_url=new_meal.image_url,
        nutritional_info=new_meal.nutritional_info,
        tags=new_meal.tags,
    )


def make_new_category(slug: str, name: str | None = None) -> NewCategory:
    return NewCategory(
        name=name or slug.title(),
        slug=slug,
        description=f"{slug} meals",
        image_url=f"https://example.com/{slug}.jpg",
    )


@dataclass
class FailingCatalogRepository(InMemoryCatalogRepository):
    """Repository whose reads fail, for exercising the 500 path."""

    def get_categories(self) -> list[Category]:
        raise RuntimeError("storage unavailable")

    def get_category_by_slug(self, slug: str) -> Category | None:
        raise RuntimeError("storage unavailable")

    def get_meals(self) -> list[Meal]:
        raise RuntimeError("storage unavailable")

    def get_meals_by_category(self, category: str) -> list[Meal]:
        raise RuntimeError("storage unavailable")

    def get_meal(self, meal_id: int) -> Meal | None:
        raise RuntimeError("storage unavailable")


@pytest.fixture
def settings() -> Settings:
    return Settings(seed_sample_data=False, api_prefix="/api")


@pytest.fixture
def repository() -> InMemoryCatalogRepository:
    return InMemoryCatalogRepository()


@pytest.fixture
def service(repository: InMemoryCatalogRepository) -> CatalogService:
    return CatalogService(repository)


@pytest.fixture
def seeded_service(service: CatalogService) -> CatalogService:
    seed_catalog(service)
    return service


@pytest.fixture
def container(settings: Settings, seeded_service: CatalogService) -> AppContainer:
    return AppContainer(settings=settings, catalog_service=seeded_service)
