"""
SQLite implementation of MealRepository.
"""

import logging
import sqlite3
import threading
from typing import Dict, List, Optional

from domain.entities import Meal, MealCategory
from domain.exceptions import StorageError
from domain.repo_abc import MealRepository

from .database import Database

logger = logging.getLogger(__name__)


class SQLiteMealRepository(MealRepository):
    """SQLite implementation of MealRepository."""

    def __init__(self, db: Database):
        self.db = db
        self._lock = threading.RLock()

    def get_all(self) -> List[Meal]:
        """Get every stored meal with its ingredients."""
        rows = self.db.execute_query("SELECT * FROM meals ORDER BY meal_id")
        return self._rows_to_meals(rows)

    def get_by_id(self, meal_id: int) -> Optional[Meal]:
        """Get a meal by its ID."""
        rows = self.db.execute_query(
            "SELECT * FROM meals WHERE meal_id = ?", (meal_id,)
        )
        if not rows:
            return None
        return self._rows_to_meals(rows)[0]

    def get_by_category(self, category: MealCategory) -> List[Meal]:
        """Get all meals of one category, sorted by name."""
        rows = self.db.execute_query(
            "SELECT * FROM meals WHERE category = ? ORDER BY meal COLLATE NOCASE",
            (MealCategory.parse(category).value,),
        )
        return self._rows_to_meals(rows)

    def get_max_id(self) -> int:
        """Highest meal ID stored, 0 for an empty table."""
        rows = self.db.execute_query(
            "SELECT COALESCE(MAX(meal_id), 0) AS max_meal_id FROM meals"
        )
        return rows[0]["max_meal_id"]

    def count(self) -> int:
        rows = self.db.execute_query("SELECT COUNT(*) AS count FROM meals")
        return rows[0]["count"]

    def save(self, meal: Meal) -> Meal:
        """Insert a meal and its ingredients in one transaction."""
        with self._lock:
            try:
                with self.db.transaction():
                    self.db.execute_update_in_transaction(
                        "INSERT INTO meals (meal_id, category, meal) "
                        "VALUES (?, ?, ?)",
                        (meal.id, meal.category.value, meal.name),
                    )
                    self.db.execute_many_in_transaction(
                        "INSERT INTO ingredients (ingredient, meal_id, position) "
                        "VALUES (?, ?, ?)",
                        [
                            (ingredient, meal.id, position)
                            for position, ingredient in enumerate(
                                meal.ingredients
                            )
                        ],
                    )
            except sqlite3.Error as e:
                logger.error(f"Error saving meal {meal.name!r}: {e}")
                raise StorageError(f"Failed to save meal {meal.name!r}: {e}")

        logger.debug(
            f"Saved meal {meal.id} with {len(meal.ingredients)} ingredients"
        )
        return meal

    def _load_ingredients(self, meal_ids: List[int]) -> Dict[int, List[str]]:
        """Ingredients per meal ID, in insertion order."""
        if not meal_ids:
            return {}
        placeholders = ",".join("?" * len(meal_ids))
        rows = self.db.execute_query(
            f"""
            SELECT meal_id, ingredient
            FROM ingredients
            WHERE meal_id IN ({placeholders})
            ORDER BY meal_id, position, ingredient_id
        """,
            tuple(meal_ids),
        )
        ingredients: Dict[int, List[str]] = {}
        for row in rows:
            ingredients.setdefault(row["meal_id"], []).append(row["ingredient"])
        return ingredients

    def _rows_to_meals(self, rows) -> List[Meal]:
        ingredients = self._load_ingredients([row["meal_id"] for row in rows])
        meals = []
        for row in rows:
            meal_ingredients = ingredients.get(row["meal_id"])
            if not meal_ingredients:
                logger.warning(
                    f"Skipping meal {row['meal_id']} without ingredients"
                )
                continue
            meals.append(
                Meal(
                    id=row["meal_id"],
                    category=MealCategory(row["category"]),
                    name=row["meal"],
                    ingredients=meal_ingredients,
                )
            )
        return meals
