"""Pydantic response models for the catalog API."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from meal_catalog.domain.models import Category, Meal


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NutritionalInfoOut(_CamelModel):
    """Nutritional facts payload."""

    calories: int | float
    protein: int | float
    carbs: int | float
    fats: int | float


class MealOut(_CamelModel):
    """Meal payload."""

    id: int
    name: str
    description: str
    category: str
    image_url: str
    nutritional_info: NutritionalInfoOut
    tags: list[str]
    ingredients: list[str]
    steps: list[str]

    @classmethod
    def from_domain(cls, meal: Meal) -> "MealOut":
        info = meal.nutritional_info
        return cls(
            id=meal.id,
            name=meal.name,
            description=meal.description,
            category=meal.category,
            image_url=meal.image_url,
            nutritional_info=NutritionalInfoOut(
                calories=info.calories,
                protein=info.protein,
                carbs=info.carbs,
                fats=info.fats,
            ),
            tags=list(meal.tags),
            ingredients=list(meal.ingredients),
            steps=list(meal.steps),
        )


class CategoryOut(_CamelModel):
    """Category payload."""

    id: int
    name: str
    slug: str
    description: str
    image_url: str
    meal_count: int

    @classmethod
    def from_domain(cls, category: Category) -> "CategoryOut":
        return cls(
            id=category.id,
            name=category.name,
            slug=category.slug,
            description=category.description,
            image_url=category.image_url,
            meal_count=category.meal_count,
        )


class ErrorOut(BaseModel):
    """Error payload."""

    message: str
