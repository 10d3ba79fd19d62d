"""Domain models for the meal catalog."""

import math
from dataclasses import dataclass, field


@dataclass(frozen=True)
class NutritionalInfo:
    """Nutritional facts for a single serving of a meal."""

    calories: float
    protein: float
    carbs: float
    fats: float

    def __post_init__(self) -> None:
        for name in ("calories", "protein", "carbs", "fats"):
            value = getattr(self, name)
            if not (math.isfinite(value) and value >= 0):
                raise ValueError(f"{name} must be a finite non-negative number")


@dataclass(frozen=True)
class NewMeal:
    """Payload for creating a meal."""

    name: str
    description: str
    category: str
    image_url: str
    nutritional_info: NutritionalInfo
    tags: tuple[str, ...] = ()
    ingredients: tuple[str, ...] = ()
    steps: tuple[str, ...] = ()


@dataclass(frozen=True)
class Meal:
    """Represents a meal stored in the catalog."""

    id: int
    name: str
    description: str
    category: str
    image_url: str
    nutritional_info: NutritionalInfo
    tags: tuple[str, ...] = ()
    ingredients: tuple[str, ...] = ()
    steps: tuple[str, ...] = ()


@dataclass(frozen=True)
class NewCategory:
    """Payload for creating a category."""

    name: str
    slug: str
    description: str
    image_url: str
    meal_count: int = 0


@dataclass(frozen=True)
class Category:
    """Represents a meal category with its derived meal count."""

    id: int
    name: str
    slug: str
    description: str
    image_url: str
    meal_count: int = 0


@dataclass(frozen=True)
class User:
    """Represents a catalog user."""

    id: int
    username: str
    password: str = field(repr=False)
