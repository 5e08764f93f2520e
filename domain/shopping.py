"""
Shopping list aggregation.

Reduces a weekly plan to ingredient occurrence counts. By default every
distinct planned meal contributes each of its ingredients once, so a count
above one means several different meals need that ingredient. With
``per_slot=True`` a meal planned on several slots is counted once per slot.
"""

import logging
from typing import List, Optional

from .entities import ShoppingList, WeeklyPlan
from .exceptions import NotPlannedError
from .repo_abc import PlanRepository

logger = logging.getLogger(__name__)


class ShoppingListAggregator:
    """Builds shopping lists from weekly plans."""

    def __init__(self, plan_repo: Optional[PlanRepository] = None, per_slot: bool = False):
        self.plan_repo = plan_repo
        self.per_slot = per_slot

    def aggregate(self, plan: Optional[WeeklyPlan]) -> ShoppingList:
        """Count the ingredients of the planned meals.

        Raises:
            NotPlannedError: if there is no plan or it has no filled slot
        """
        if plan is None or plan.is_empty():
            raise NotPlannedError()

        meals = plan.meals() if self.per_slot else plan.distinct_meals()
        shopping_list = ShoppingList()
        for meal in meals:
            shopping_list.add_meal(meal)
        logger.debug(
            f"Aggregated {len(shopping_list)} ingredients from {len(meals)} meals"
        )
        return shopping_list

    def aggregate_current(self) -> ShoppingList:
        """Aggregate the plan held by the plan store."""
        plan = self.plan_repo.load() if self.plan_repo is not None else None
        return self.aggregate(plan)

    @staticmethod
    def render(shopping_list: ShoppingList) -> List[str]:
        """Formatted shopping list lines."""
        return shopping_list.lines()
