"""
SQLite implementation of PlanRepository.

The stored plan is a set of (day, category, meal id) rows. Replacing it
always happens in a single transaction, so readers see either the old plan
or the new one.
"""

import logging
import sqlite3
import threading
from typing import Optional

from domain.catalog import Catalog
from domain.entities import DayOfWeek, MealCategory, WeeklyPlan
from domain.exceptions import StorageError
from domain.repo_abc import PlanRepository

from .database import Database

logger = logging.getLogger(__name__)


class SQLitePlanRepository(PlanRepository):
    """SQLite implementation of PlanRepository."""

    def __init__(self, db: Database, catalog: Catalog):
        self.db = db
        self.catalog = catalog
        self._lock = threading.RLock()

    def clear(self) -> None:
        """Delete every stored plan row."""
        with self._lock:
            try:
                deleted = self.db.execute_update("DELETE FROM meal_planner")
            except sqlite3.Error as e:
                logger.error(f"Error clearing meal plan: {e}")
                raise StorageError(f"Failed to clear meal plan: {e}")
        logger.info(f"Cleared meal plan ({deleted} rows)")

    def commit(self, plan: WeeklyPlan) -> None:
        """Replace the stored plan with the given one."""
        rows = [
            (day.value, category.value, meal.id)
            for day, category, meal in plan.slots()
        ]
        with self._lock:
            try:
                with self.db.transaction():
                    self.db.execute_update_in_transaction(
                        "DELETE FROM meal_planner"
                    )
                    if rows:
                        self.db.execute_many_in_transaction(
                            "INSERT INTO meal_planner (day, meal_category, meal_id) "
                            "VALUES (?, ?, ?)",
                            rows,
                        )
            except sqlite3.Error as e:
                logger.error(f"Error committing meal plan: {e}")
                raise StorageError(f"Failed to save meal plan: {e}")
        logger.info(f"Committed meal plan with {len(rows)} slots")

    def load(self) -> Optional[WeeklyPlan]:
        """Rebuild the stored plan from its rows.

        Rows with an unknown day or category, a meal that no longer
        resolves in the catalog, or a meal of another category are dropped.
        """
        try:
            rows = self.db.execute_query(
                "SELECT day, meal_category, meal_id FROM meal_planner"
            )
        except sqlite3.Error as e:
            logger.error(f"Error loading meal plan: {e}")
            raise StorageError(f"Failed to load meal plan: {e}")

        if not rows:
            return None

        slots = []
        for row in rows:
            try:
                day = DayOfWeek.parse(row["day"])
                category = MealCategory.parse(row["meal_category"])
            except ValueError:
                logger.warning(
                    f"Dropping plan slot {row['day']}/{row['meal_category']}: "
                    f"unknown day or category"
                )
                continue
            slots.append((day, category, row["meal_id"]))

        plan = WeeklyPlan()
        for day, category, meal_id in sorted(
            slots, key=lambda slot: (slot[0].index, slot[1].index)
        ):
            meal = self.catalog.find_by_id(meal_id)
            if meal is None:
                logger.warning(
                    f"Dropping plan slot {day.value}/{category.value}: "
                    f"unknown meal id {meal_id}"
                )
                continue
            try:
                plan.set(day, category, meal)
            except ValueError as e:
                logger.warning(
                    f"Dropping plan slot {day.value}/{category.value}: {e}"
                )
        return plan

    def count(self) -> int:
        """Number of stored plan rows."""
        rows = self.db.execute_query(
            "SELECT COUNT(*) AS count FROM meal_planner"
        )
        return rows[0]["count"]
