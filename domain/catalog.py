"""
Meal catalog: the in-memory index of every known meal.

The catalog is loaded once from a ``MealRepository`` and kept in sync on
every addition. Meal IDs come from an in-memory counter seeded with the
highest stored ID, so they keep increasing across restarts.
"""

import logging
from typing import Dict, Iterable, List, Optional, Union

from .entities import Meal, MealCategory
from .exceptions import NotFoundError, ValidationError
from .repo_abc import MealRepository
from .validators import (
    dedupe_ingredients,
    is_valid_category,
    is_valid_token,
    normalize,
    parse_ingredients,
)

logger = logging.getLogger(__name__)


class Catalog:
    """Index of meals keyed by lowercase name, backed by durable storage."""

    def __init__(self, meal_repo: MealRepository):
        self.meal_repo = meal_repo
        self._meals: Dict[str, Meal] = {}
        self._next_id = 1
        self.reload()

    def reload(self) -> None:
        """Re-read all meals from storage and reseed the ID counter."""
        meals = self.meal_repo.get_all()
        self._meals = {meal.key: meal for meal in meals}
        self._next_id = self.meal_repo.get_max_id() + 1
        logger.info(
            f"Loaded {len(self._meals)} meals, next meal id {self._next_id}"
        )

    @property
    def next_id(self) -> int:
        return self._next_id

    def add(
        self,
        category: Union[str, MealCategory],
        name: str,
        ingredients: Union[str, Iterable[str]],
    ) -> int:
        """Validate, persist and index a new meal.

        Args:
            category: breakfast, lunch or dinner
            name: meal name, letters and spaces only
            ingredients: comma separated string or a sequence of names

        Returns:
            int: the ID assigned to the new meal

        Raises:
            ValidationError: on malformed input or a duplicate name
            StorageError: if the meal could not be persisted
        """
        category_value = (
            category.value
            if isinstance(category, MealCategory)
            else normalize(str(category))
        )
        if not is_valid_category(category_value):
            raise ValidationError(
                "Wrong meal category! Choose from: breakfast, lunch, dinner."
            )

        if not is_valid_token(name):
            raise ValidationError(f"Invalid meal name: {name!r}")
        name = name.strip()

        if isinstance(ingredients, str):
            ingredient_names = parse_ingredients(ingredients.strip())
        else:
            ingredient_names = list(ingredients)
            for ingredient in ingredient_names:
                if not is_valid_token(ingredient):
                    raise ValidationError(
                        f"Invalid ingredient: {ingredient!r}"
                    )
            ingredient_names = dedupe_ingredients(ingredient_names)
        if not ingredient_names:
            raise ValidationError("A meal needs at least one ingredient")

        if normalize(name) in self._meals:
            raise ValidationError(f"Meal {name!r} already exists")

        meal = Meal(
            id=self._next_id,
            category=MealCategory(category_value),
            name=name,
            ingredients=ingredient_names,
        )
        self.meal_repo.save(meal)

        # Only index and advance once the write has succeeded
        self._meals[meal.key] = meal
        self._next_id += 1
        logger.info(f"Added {meal.category.value} meal {meal.name!r} (id {meal.id})")
        return meal.id

    def list_by_category(self, category: Union[str, MealCategory]) -> List[Meal]:
        """Meals of one category sorted by name, case-insensitively."""
        category = self._parse_category(category)
        return sorted(
            (meal for meal in self._meals.values() if meal.category is category),
            key=lambda meal: meal.name.lower(),
        )

    def find_by_id(self, meal_id: int) -> Optional[Meal]:
        """Get a meal by ID, or None."""
        for meal in self._meals.values():
            if meal.id == meal_id:
                return meal
        return None

    def get_by_id(self, meal_id: int) -> Meal:
        """Get a meal by ID.

        Raises:
            NotFoundError: if no meal has that ID
        """
        meal = self.find_by_id(meal_id)
        if meal is None:
            raise NotFoundError(f"No meal with id {meal_id}")
        return meal

    def find_by_name(self, category: Union[str, MealCategory], name: str) -> Meal:
        """Case-insensitive exact name match within a category.

        Raises:
            NotFoundError: if the category holds no meal with that name
        """
        category = self._parse_category(category)
        meal = self._meals.get(normalize(name))
        if meal is None or meal.category is not category:
            raise NotFoundError(
                f"No {category.value} meal named {name.strip()!r}"
            )
        return meal

    def all_meals(self) -> List[Meal]:
        """Every meal in ID order."""
        return sorted(self._meals.values(), key=lambda meal: meal.id)

    @staticmethod
    def _parse_category(category) -> MealCategory:
        try:
            return MealCategory.parse(category)
        except ValueError:
            raise ValidationError(f"Unknown meal category: {category!r}")

    def __contains__(self, name: str) -> bool:
        return normalize(name) in self._meals

    def __len__(self) -> int:
        return len(self._meals)
