"""
Domain entities for the meal planner.

These classes represent the core business concepts and contain only business
logic. They are independent of external technologies (database, API, etc.).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple


class MealCategory(Enum):
    """Meal categories, in the order they are planned within a day."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"

    @property
    def index(self) -> int:
        return list(MealCategory).index(self)

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @classmethod
    def parse(cls, value) -> "MealCategory":
        """Coerce a string or category into a MealCategory.

        Raises:
            ValueError: if value names no category.
        """
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().lower())


class DayOfWeek(Enum):
    """Days of the planning week, Monday first."""

    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"

    @property
    def index(self) -> int:
        return list(DayOfWeek).index(self)

    @classmethod
    def parse(cls, value) -> "DayOfWeek":
        """Coerce a day name (any casing) into a DayOfWeek."""
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().capitalize())


@dataclass(frozen=True)
class Meal:
    """A catalogued meal. Immutable once created."""

    id: int
    category: MealCategory
    name: str
    ingredients: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not isinstance(self.category, MealCategory):
            object.__setattr__(
                self, "category", MealCategory.parse(self.category)
            )
        object.__setattr__(self, "ingredients", tuple(self.ingredients))

        if not self.name or not self.name.strip():
            raise ValueError("name cannot be empty")
        if not self.ingredients:
            raise ValueError("a meal needs at least one ingredient")

    @property
    def key(self) -> str:
        """Catalog key: the lowercase name."""
        return self.name.lower()

    def describe(self) -> List[str]:
        """Lines used when printing a meal."""
        return [f"Name: {self.name}", "Ingredients:", *self.ingredients]

    def __str__(self) -> str:
        return f"{self.category.label}: {self.name}"


class WeeklyPlan:
    """Assignment of meals to (day, category) slots.

    Slots are always iterated day-major, then in category order, whatever
    order they were filled in.
    """

    def __init__(self):
        self._days: Dict[DayOfWeek, Dict[MealCategory, Meal]] = {}

    def set(self, day: DayOfWeek, category: MealCategory, meal: Meal) -> None:
        """Fill a slot."""
        day = DayOfWeek.parse(day)
        category = MealCategory.parse(category)
        if meal.category is not category:
            raise ValueError(
                f"{meal.name} is a {meal.category.value} meal, "
                f"not {category.value}"
            )
        self._days.setdefault(day, {})[category] = meal

    def get(self, day, category) -> Optional[Meal]:
        """Return the meal in a slot, or None when the slot is unfilled."""
        return self._days.get(DayOfWeek.parse(day), {}).get(
            MealCategory.parse(category)
        )

    def meals_for(self, day) -> Dict[MealCategory, Meal]:
        """Filled slots of one day, in category order."""
        meals = self._days.get(DayOfWeek.parse(day), {})
        return {
            category: meals[category]
            for category in MealCategory
            if category in meals
        }

    def days(self) -> List[DayOfWeek]:
        """Days holding at least one filled slot, in week order."""
        return [day for day in DayOfWeek if self._days.get(day)]

    def slots(self) -> Iterator[Tuple[DayOfWeek, MealCategory, Meal]]:
        """Yield every filled slot as (day, category, meal)."""
        for day in self.days():
            for category, meal in self.meals_for(day).items():
                yield day, category, meal

    def meals(self) -> List[Meal]:
        """Every meal reachable from a filled slot, repeats included."""
        return [meal for _, _, meal in self.slots()]

    def distinct_meals(self) -> List[Meal]:
        """Planned meals without repeats, in first-planned order."""
        seen = {}
        for meal in self.meals():
            seen.setdefault(meal.id, meal)
        return list(seen.values())

    def is_empty(self) -> bool:
        return len(self) == 0

    def to_dict(self) -> Dict[str, Dict[str, str]]:
        """Day name -> category -> meal name."""
        return {
            day.value: {
                category.value: meal.name
                for category, meal in self.meals_for(day).items()
            }
            for day in self.days()
        }

    def __len__(self) -> int:
        return sum(len(meals) for meals in self._days.values())

    def __eq__(self, other) -> bool:
        if not isinstance(other, WeeklyPlan):
            return NotImplemented
        return list(self.slots()) == list(other.slots())

    def __str__(self) -> str:
        return f"Weekly plan: {len(self)} meals over {len(self.days())} days"


class ShoppingList:
    """Ingredient occurrence counts derived from a weekly plan."""

    def __init__(self, counts: Optional[Dict[str, int]] = None):
        self.counts: Dict[str, int] = dict(counts or {})

    def add(self, ingredient: str, times: int = 1) -> None:
        """Count an ingredient occurrence."""
        self.counts[ingredient] = self.counts.get(ingredient, 0) + times

    def add_meal(self, meal: Meal) -> None:
        """Count every ingredient of a meal once."""
        for ingredient in meal.ingredients:
            self.add(ingredient)

    def lines(self) -> List[str]:
        """Render entries as 'name' or 'name xN' when needed more than once."""
        return [
            f"{name} x{count}" if count > 1 else name
            for name, count in self.counts.items()
        ]

    def __getitem__(self, ingredient: str) -> int:
        return self.counts[ingredient]

    def __contains__(self, ingredient: str) -> bool:
        return ingredient in self.counts

    def __len__(self) -> int:
        return len(self.counts)

    def __eq__(self, other) -> bool:
        if isinstance(other, ShoppingList):
            return self.counts == other.counts
        if isinstance(other, dict):
            return self.counts == other
        return NotImplemented
