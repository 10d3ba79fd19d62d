"""Catalog business logic."""

import logging
from dataclasses import dataclass
from typing import Protocol

from meal_catalog.domain.browse import BrowseQuery
from meal_catalog.domain.models import Category, Meal, NewCategory, NewMeal, User
from meal_catalog.services.browse import browse_meals

_logger = logging.getLogger(__name__)


class DuplicateEntryError(ValueError):
    """Raised when a unique username or category slug is already taken."""


class CatalogRepository(Protocol):
    """Storage interface for users, meals and categories."""

    def create_user(self, username: str, password: str) -> User:
        """Create and return a new user."""

    def get_user(self, user_id: int) -> User | None:
        """Return a user by id, if present."""

    def get_user_by_username(self, username: str) -> User | None:
        """Return a user by exact username, if present."""

    def create_meal(self, new_meal: NewMeal) -> Meal:
        """Create a meal and bump the matching category count."""

    def get_meals(self) -> list[Meal]:
        """Return all meals."""

    def get_meals_by_category(self, category: str) -> list[Meal]:
        """Return meals whose category matches case-insensitively."""

    def get_meal(self, meal_id: int) -> Meal | None:
        """Return a meal by id, if present."""

    def create_category(self, new_category: NewCategory) -> Category:
        """Create and return a new category."""

    def get_categories(self) -> list[Category]:
        """Return all categories."""

    def get_category(self, category_id: int) -> Category | None:
        """Return a category by id, if present."""

    def get_category_by_slug(self, slug: str) -> Category | None:
        """Return a category by slug, compared case-insensitively."""


@dataclass
class CatalogService:
    """Application service for catalog reads and creation policy."""

    repository: CatalogRepository

    def add_user(self, username: str, password: str) -> User:
        """Create a user, rejecting a username that is already taken."""
        if self.repository.get_user_by_username(username) is not None:
            raise DuplicateEntryError(f"Username already exists: {username}")
        return self.repository.create_user(username, password)

    def add_category(self, new_category: NewCategory) -> Category:
        """Create a category, rejecting a slug that is already taken."""
        if self.repository.get_category_by_slug(new_category.slug) is not None:
            raise DuplicateEntryError(
                f"Category slug already exists: {new_category.slug}"
            )
        return self.repository.create_category(new_category)

    def add_meal(self, new_meal: NewMeal) -> Meal:
        """Create a meal; unknown categories are accepted but never counted."""
        if self.repository.get_category_by_slug(new_meal.category) is None:
            _logger.warning(
                "Meal %r references unknown category %r",
                new_meal.name,
                new_meal.category,
            )
        return self.repository.create_meal(new_meal)

    def get_user(self, user_id: int) -> User | None:
        return self.repository.get_user(user_id)

    def get_user_by_username(self, username: str) -> User | None:
        return self.repository.get_user_by_username(username)

    def list_categories(self) -> list[Category]:
        return self.repository.get_categories()

    def get_category(self, category_id: int) -> Category | None:
        return self.repository.get_category(category_id)

    def get_category_by_slug(self, slug: str) -> Category | None:
        return self.repository.get_category_by_slug(slug)

    def list_meals(self) -> list[Meal]:
        return self.repository.get_meals()

    def list_meals_by_category(self, category: str) -> list[Meal]:
        return self.repository.get_meals_by_category(category)

    def get_meal(self, meal_id: int) -> Meal | None:
        return self.repository.get_meal(meal_id)

    def browse(self, category: str | None, query: BrowseQuery) -> list[Meal]:
        """Return meals for a category (or all) run through the browse pipeline."""
        meals = (
            self.repository.get_meals()
            if category is None
            else self.repository.get_meals_by_category(category)
        )
        return browse_meals(
            meals,
            search=query.search,
            active_filter=query.active_filter,
            sort_by=query.sort_by,
        )

    def category_count_drift(self) -> dict[str, int]:
        """Report categories whose stored meal count differs from the actual one.

        Values are stored minus actual. Stored counts are left untouched.
        """
        drift: dict[str, int] = {}
        for category in self.repository.get_categories():
            actual = len(self.repository.get_meals_by_category(category.slug))
            if category.meal_count != actual:
                drift[category.slug] = category.meal_count - actual
        return drift
