"""
Domain package for the meal planner.

This package contains the core business logic and entities,
independent of external technologies.
"""

from .catalog import Catalog
from .entities import DayOfWeek, Meal, MealCategory, ShoppingList, WeeklyPlan
from .exceptions import (
    MealPlannerError,
    NotFoundError,
    NotPlannedError,
    StorageError,
    ValidationError,
)
from .planner import Planner
from .shopping import ShoppingListAggregator

__all__ = [
    "Catalog",
    "DayOfWeek",
    "Meal",
    "MealCategory",
    "MealPlannerError",
    "NotFoundError",
    "NotPlannedError",
    "Planner",
    "ShoppingList",
    "ShoppingListAggregator",
    "StorageError",
    "ValidationError",
    "WeeklyPlan",
]
