"""Tests for the in-memory catalog repository."""

from meal_catalog.adapters.in_memory_catalog_repository import (
    InMemoryCatalogRepository,
)
from meal_catalog.domain.models import NewCategory
from tests.conftest import make_new_category, make_new_meal


def test_ids_are_sequential_per_collection(
    repository: InMemoryCatalogRepository,
) -> None:
    categories = [
        repository.create_category(make_new_category(slug))
        for slug in ("breakfast", "lunch", "dinner")
    ]
    meals = [repository.create_meal(make_new_meal(f"Meal {i}")) for i in range(4)]
    user = repository.create_user("cook", "secret")

    assert [category.id for category in categories] == [1, 2, 3]
    assert [meal.id for meal in meals] == [1, 2, 3, 4]
    assert user.id == 1


def test_meal_count_tracks_case_insensitive_category(
    repository: InMemoryCatalogRepository,
) -> None:
    lunch = repository.create_category(make_new_category("lunch"))

    for name in ("Wrap", "Salad", "Soup"):
        repository.create_meal(make_new_meal(name, category="Lunch"))

    updated = repository.get_category(lunch.id)
    assert updated is not None
    assert updated.meal_count == lunch.meal_count + 3


def test_meal_with_unknown_category_is_stored_but_not_counted(
    repository: InMemoryCatalogRepository,
) -> None:
    dinner = repository.create_category(make_new_category("dinner"))

    meal = repository.create_meal(make_new_meal("Midnight Snack", category="snack"))

    assert repository.get_meal(meal.id) == meal
    assert repository.get_category(dinner.id).meal_count == 0


def test_create_meal_defaults_ingredients_and_steps(
    repository: InMemoryCatalogRepository,
) -> None:
    meal = repository.create_meal(make_new_meal())

    assert meal.ingredients == ()
    assert meal.steps == ()


def test_create_category_keeps_explicit_meal_count(
    repository: InMemoryCatalogRepository,
) -> None:
    category = repository.create_category(
        NewCategory(
            name="Brunch",
            slug="brunch",
            description="Late mornings",
            image_url="https://example.com/brunch.jpg",
            meal_count=2,
        )
    )
    repository.create_meal(make_new_meal(category="brunch"))

    assert repository.get_category(category.id).meal_count == 3


def test_meals_by_category_ignores_case(
    repository: InMemoryCatalogRepository,
) -> None:
    repository.create_meal(make_new_meal("Pancakes", category="breakfast"))
    repository.create_meal(make_new_meal("Omelette", category="Breakfast"))
    repository.create_meal(make_new_meal("Salmon", category="dinner"))

    upper = repository.get_meals_by_category("BREAKFAST")
    lower = repository.get_meals_by_category("breakfast")

    assert upper == lower
    assert [meal.name for meal in upper] == ["Pancakes", "Omelette"]


def test_category_by_slug_ignores_case(
    repository: InMemoryCatalogRepository,
) -> None:
    category = repository.create_category(make_new_category("Dinner"))

    assert repository.get_category_by_slug("dinner") == category
    assert repository.get_category_by_slug("DINNER") == category


def test_user_lookup_by_username_is_exact(
    repository: InMemoryCatalogRepository,
) -> None:
    user = repository.create_user("Chef", "secret")

    assert repository.get_user_by_username("Chef") == user
    assert repository.get_user_by_username("chef") is None
    assert repository.get_user(user.id) == user


def test_unknown_keys_return_none(repository: InMemoryCatalogRepository) -> None:
    assert repository.get_meal(99999) is None
    assert repository.get_category(99999) is None
    assert repository.get_category_by_slug("brunch") is None
    assert repository.get_user(42) is None
    assert repository.get_meals_by_category("lunch") == []
