"""Search, filter and sort pipeline for meal listings."""

from collections.abc import Callable, Iterable

from meal_catalog.domain.browse import MealFilter, MealSort
from meal_catalog.domain.models import Meal

HIGH_PROTEIN_MIN_G = 25
LOW_CARB_MAX_G = 30
VEGETARIAN_TAG = "vegetarian"

_FILTERS: dict[MealFilter, Callable[[Meal], bool]] = {
    MealFilter.VEGETARIAN: lambda meal: VEGETARIAN_TAG in meal.tags,
    MealFilter.HIGH_PROTEIN: lambda meal: (
        meal.nutritional_info.protein >= HIGH_PROTEIN_MIN_G
    ),
    MealFilter.LOW_CARB: lambda meal: meal.nutritional_info.carbs <= LOW_CARB_MAX_G,
}

# (key, reverse); sorted() is stable in both directions.
_SORTS: dict[MealSort, tuple[Callable[[Meal], float], bool]] = {
    MealSort.CALORIES_ASC: (lambda meal: meal.nutritional_info.calories, False),
    MealSort.CALORIES_DESC: (lambda meal: meal.nutritional_info.calories, True),
    MealSort.PROTEIN_DESC: (lambda meal: meal.nutritional_info.protein, True),
}


def matches_search(meal: Meal, search: str) -> bool:
    """Return True when the search text is in the meal name or description."""
    if not search:
        return True
    needle = search.lower()
    return needle in meal.name.lower() or needle in meal.description.lower()


def browse_meals(
    meals: Iterable[Meal],
    search: str = "",
    active_filter: MealFilter = MealFilter.ALL,
    sort_by: MealSort = MealSort.DEFAULT,
) -> list[Meal]:
    """Apply search, then filter, then sort, returning a new list."""
    result = [meal for meal in meals if matches_search(meal, search)]

    predicate = _FILTERS.get(MealFilter(active_filter))
    if predicate is not None:
        result = [meal for meal in result if predicate(meal)]

    ordering = _SORTS.get(MealSort(sort_by))
    if ordering is not None:
        key, reverse = ordering
        result = sorted(result, key=key, reverse=reverse)
    return result
