"""
Abstract repository interfaces for the meal planner domain.

These interfaces define the contract for data access without specifying
the implementation details (database, file system, etc.).
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from .entities import Meal, MealCategory, WeeklyPlan


class MealRepository(ABC):
    """Abstract repository for meal data access."""

    @abstractmethod
    def get_all(self) -> List[Meal]:
        """Get every stored meal with its ingredients."""
        pass

    @abstractmethod
    def get_by_id(self, meal_id: int) -> Optional[Meal]:
        """Get a meal by its ID."""
        pass

    @abstractmethod
    def get_by_category(self, category: MealCategory) -> List[Meal]:
        """Get all meals of one category."""
        pass

    @abstractmethod
    def get_max_id(self) -> int:
        """Highest meal ID ever stored, 0 when there is none."""
        pass

    @abstractmethod
    def save(self, meal: Meal) -> Meal:
        """Persist a new meal and its ingredients atomically."""
        pass


class PlanRepository(ABC):
    """Abstract repository for the current weekly plan."""

    @abstractmethod
    def clear(self) -> None:
        """Delete the stored plan."""
        pass

    @abstractmethod
    def commit(self, plan: WeeklyPlan) -> None:
        """Replace the stored plan with the given one, all or nothing."""
        pass

    @abstractmethod
    def load(self) -> Optional[WeeklyPlan]:
        """Rebuild the stored plan, or None when nothing is stored."""
        pass
