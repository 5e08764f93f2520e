"""
Weekly meal planning.

The planner walks the 21 slots of a week (each day, then breakfast, lunch
and dinner) and fills every slot whose category has at least one meal in the
catalog. Selections are always checked against the live catalog.
"""

import logging
from typing import TYPE_CHECKING, Dict, Iterable, Mapping, Optional

from .catalog import Catalog
from .entities import DayOfWeek, Meal, MealCategory, WeeklyPlan
from .exceptions import NotFoundError, ValidationError
from .repo_abc import PlanRepository

if TYPE_CHECKING:
    from adapters.console.line_io import LineIO

logger = logging.getLogger(__name__)


class Planner:
    """Builds a weekly plan from the catalog and commits it."""

    def __init__(self, catalog: Catalog, plan_repo: Optional[PlanRepository] = None):
        self.catalog = catalog
        self.plan_repo = plan_repo

    @property
    def current_plan(self) -> Optional[WeeklyPlan]:
        """The committed plan, read from the plan store on every access."""
        if self.plan_repo is None:
            return None
        return self.plan_repo.load()

    def run(
        self,
        io: "LineIO",
        days: Iterable[DayOfWeek] = DayOfWeek,
        categories: Iterable[MealCategory] = MealCategory,
    ) -> WeeklyPlan:
        """Plan the week interactively, one slot at a time.

        A category without meals is reported and skipped. An unknown meal
        name is reported and asked for again, with no retry limit.
        """
        days = [DayOfWeek.parse(day) for day in days]
        categories = [MealCategory.parse(category) for category in categories]
        plan = WeeklyPlan()

        for day in days:
            io.write(day.value)
            for category in categories:
                meal = self._choose(io, day, category)
                if meal is not None:
                    plan.set(day, category, meal)
            io.write(f"Yeah! We planned the meals for {day.value}.")
            io.write()

        logger.info(f"Planned {len(plan)} slots interactively")
        return plan

    def _choose(self, io: "LineIO", day: DayOfWeek, category: MealCategory) -> Optional[Meal]:
        candidates = self.catalog.list_by_category(category)
        if not candidates:
            io.write(f"No meals available for category: {category.value}")
            return None

        for meal in candidates:
            io.write(meal.name)
        answer = io.read_line(
            f"Choose the {category.value} for {day.value} from the list above:"
        )
        while True:
            meal = self._match(candidates, answer)
            if meal is not None:
                return meal
            answer = io.read_line(
                "This meal doesn't exist. Choose a meal from the list above."
            )

    @staticmethod
    def _match(candidates, answer: str) -> Optional[Meal]:
        wanted = answer.strip().lower()
        for meal in candidates:
            if meal.name.lower() == wanted:
                return meal
        return None

    def build(self, selections: Mapping[str, Mapping[str, str]]) -> WeeklyPlan:
        """Build a plan from day -> category -> meal name selections.

        Every category that has candidates must be chosen for every day;
        categories with no meals in the catalog are left empty.

        Raises:
            ValidationError: on an unknown day or category, or a missing slot
            NotFoundError: if a name does not match a meal of that category
        """
        normalized: Dict[DayOfWeek, Dict[MealCategory, str]] = {}
        for day_name, choices in selections.items():
            try:
                day = DayOfWeek.parse(day_name)
            except ValueError:
                raise ValidationError(f"Unknown day: {day_name!r}")
            for category_name, meal_name in choices.items():
                try:
                    category = MealCategory.parse(category_name)
                except ValueError:
                    raise ValidationError(
                        f"Unknown meal category: {category_name!r}"
                    )
                normalized.setdefault(day, {})[category] = meal_name

        plan = WeeklyPlan()
        for day in DayOfWeek:
            for category in MealCategory:
                candidates = self.catalog.list_by_category(category)
                if not candidates:
                    continue
                meal_name = normalized.get(day, {}).get(category)
                if meal_name is None:
                    raise ValidationError(
                        f"No {category.value} chosen for {day.value}"
                    )
                meal = self._match(candidates, meal_name)
                if meal is None:
                    raise NotFoundError(
                        f"No {category.value} meal named {meal_name!r}"
                    )
                plan.set(day, category, meal)
        return plan

    def commit(self, plan: WeeklyPlan) -> WeeklyPlan:
        """Store the plan as the single current plan."""
        if self.plan_repo is None:
            raise RuntimeError("Planner has no plan repository to commit to")
        self.plan_repo.commit(plan)
        logger.info(f"Committed weekly plan with {len(plan)} slots")
        return plan

    def plan_and_commit(
        self,
        io: "LineIO",
        days: Iterable[DayOfWeek] = DayOfWeek,
        categories: Iterable[MealCategory] = MealCategory,
    ) -> WeeklyPlan:
        """Run the interactive planner, then commit its result."""
        return self.commit(self.run(io, days, categories))
