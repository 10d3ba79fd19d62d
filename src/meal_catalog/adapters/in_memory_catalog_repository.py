"""In-memory catalog repository."""

from dataclasses import dataclass, field, replace
from itertools import count

from meal_catalog.domain.models import Category, Meal, NewCategory, NewMeal, User
from meal_catalog.services.catalog import CatalogRepository


@dataclass
class InMemoryCatalogRepository(CatalogRepository):
    """Dict-backed storage for users, meals and categories.

    Ids come from one counter per collection and are never reused. A
    category's ``meal_count`` is bumped when a matching meal is created and
    is never recomputed afterwards.
    """

    users: dict[int, User] = field(default_factory=dict)
    meals: dict[int, Meal] = field(default_factory=dict)
    categories: dict[int, Category] = field(default_factory=dict)
    _user_ids: count = field(default_factory=lambda: count(1), repr=False)
    _meal_ids: count = field(default_factory=lambda: count(1), repr=False)
    _category_ids: count = field(default_factory=lambda: count(1), repr=False)

    def create_user(self, username: str, password: str) -> User:
        user = User(id=next(self._user_ids), username=username, password=password)
        self.users[user.id] = user
        return user

    def get_user(self, user_id: int) -> User | None:
        return self.users.get(user_id)

    def get_user_by_username(self, username: str) -> User | None:
        return next(
            (user for user in self.users.values() if user.username == username),
            None,
        )

    def create_meal(self, new_meal: NewMeal) -> Meal:
        meal = Meal(
            id=next(self._meal_ids),
            name=new_meal.name,
            description=new_meal.description,
            category=new_meal.category,
            image_url=new_meal.image_url,
            nutritional_info=new_meal.nutritional_info,
            tags=tuple(new_meal.tags),
            ingredients=tuple(new_meal.ingredients or ()),
            steps=tuple(new_meal.steps or ()),
        )
        self.meals[meal.id] = meal

        category = self.get_category_by_slug(meal.category)
        if category is not None:
            self.categories[category.id] = replace(
                category, meal_count=category.meal_count + 1
            )
        return meal

    def get_meals(self) -> list[Meal]:
        return list(self.meals.values())

    def get_meals_by_category(self, category: str) -> list[Meal]:
        wanted = category.lower()
        return [meal for meal in self.meals.values() if meal.category.lower() == wanted]

    def get_meal(self, meal_id: int) -> Meal | None:
        return self.meals.get(meal_id)

    def create_category(self, new_category: NewCategory) -> Category:
        category = Category(
            id=next(self._category_ids),
            name=new_category.name,
            slug=new_category.slug,
            description=new_category.description,
            image_url=new_category.image_url,
            meal_count=new_category.meal_count or 0,
        )
        self.categories[category.id] = category
        return category

    def get_categories(self) -> list[Category]:
        return list(self.categories.values())

    def get_category(self, category_id: int) -> Category | None:
        return self.categories.get(category_id)

    def get_category_by_slug(self, slug: str) -> Category | None:
        wanted = slug.lower()
        return next(
            (
                category
                for category in self.categories.values()
                if category.slug.lower() == wanted
            ),
            None,
        )
