"""Domain models for browsing meals."""

from dataclasses import dataclass
from enum import Enum


class MealFilter(str, Enum):
    """Single active filter applied to a meal list."""

    ALL = "all"
    VEGETARIAN = "vegetarian"
    HIGH_PROTEIN = "high-protein"
    LOW_CARB = "low-carb"


class MealSort(str, Enum):
    """Sort order applied after search and filtering."""

    DEFAULT = "default"
    CALORIES_ASC = "calories-asc"
    CALORIES_DESC = "calories-desc"
    PROTEIN_DESC = "protein-desc"


@dataclass(frozen=True)
class BrowseQuery:
    """Search text, filter and sort chosen by the user."""

    search: str = ""
    active_filter: MealFilter = MealFilter.ALL
    sort_by: MealSort = MealSort.DEFAULT
