"""
Tests for the meal catalog and its SQLite storage.
"""

from unittest.mock import Mock

import pytest

from domain.catalog import Catalog
from domain.entities import MealCategory
from domain.exceptions import NotFoundError, StorageError, ValidationError
from tests.base_test import BaseDatabaseTest


class TestCatalogAdd(BaseDatabaseTest):
    """Adding meals."""

    def test_add_then_find_preserves_ingredients(self):
        first_id = self.catalog.add("lunch", "Club Sandwich", "bread, Ham, cheese, lettuce")
        meal = self.catalog.find_by_name("lunch", "club sandwich")

        assert meal.id == first_id
        assert meal.name == "Club Sandwich"
        assert meal.category is MealCategory.LUNCH
        assert meal.ingredients == ("bread", "Ham", "cheese", "lettuce")

    def test_ids_strictly_increase(self):
        ids = [
            self.catalog.add("breakfast", "oatmeal", "oats, milk"),
            self.catalog.add("lunch", "salad", "lettuce"),
            self.catalog.add("dinner", "soup", "carrot"),
        ]
        assert ids == sorted(ids)
        assert len(set(ids)) == 3
        assert self.catalog.next_id == ids[-1] + 1

    def test_accepts_ingredient_sequence(self):
        meal_id = self.catalog.add(MealCategory.DINNER, "stew", ["beef", " Potato", "BEEF"])
        assert self.catalog.get_by_id(meal_id).ingredients == ("beef", "Potato")

    def test_duplicate_name_rejected_any_case(self):
        self.catalog.add("breakfast", "toast", "bread")
        with pytest.raises(ValidationError):
            self.catalog.add("dinner", "TOAST", "bread, jam")

        assert len(self.catalog) == 1
        assert self.meal_repo.count() == 1
        assert self.catalog.find_by_name("breakfast", "toast").ingredients == ("bread",)

    @pytest.mark.parametrize(
        "category,name,ingredients",
        [
            ("brunch", "toast", "bread"),
            ("breakfast", "toast2", "bread"),
            ("breakfast", "   ", "bread"),
            ("breakfast", "toast", "bread, 2 eggs"),
            ("breakfast", "toast", ""),
            ("breakfast", "toast", []),
        ],
    )
    def test_invalid_input_rejected(self, category, name, ingredients):
        with pytest.raises(ValidationError):
            self.catalog.add(category, name, ingredients)
        assert len(self.catalog) == 0
        assert self.meal_repo.count() == 0

    def test_meal_is_durable(self):
        meal_id = self.catalog.add("breakfast", "porridge", "oats, water, salt")
        self.reopen()

        meal = self.catalog.get_by_id(meal_id)
        assert meal.name == "porridge"
        assert meal.ingredients == ("oats", "water", "salt")

    def test_casing_survives_restart(self):
        meal_id = self.catalog.add("dinner", "Beef Stew", ["Beef", "carrot"])
        self.reopen()

        meal = self.catalog.get_by_id(meal_id)
        assert meal.name == "Beef Stew"
        assert meal.ingredients == ("Beef", "carrot")
        assert "beef stew" in self.catalog

    def test_ids_continue_after_restart(self):
        self.catalog.add("breakfast", "oatmeal", "oats")
        last_id = self.catalog.add("breakfast", "toast", "bread")
        self.reopen()

        new_id = self.catalog.add("lunch", "salad", "lettuce")
        assert new_id == last_id + 1


class TestCatalogQueries(BaseDatabaseTest):
    """Listing and lookups."""

    def setup_method(self):
        super().setup_method()
        self.seed_catalog()

    def test_list_by_category_sorted_by_name(self):
        names = [meal.name for meal in self.catalog.list_by_category("breakfast")]
        assert names == ["oatmeal", "toast"]

        names = [meal.name for meal in self.catalog.list_by_category(MealCategory.DINNER)]
        assert names == ["pasta", "soup"]

    def test_list_by_category_is_restartable(self):
        first = self.catalog.list_by_category("lunch")
        first.clear()
        assert len(self.catalog.list_by_category("lunch")) == 2

    def test_list_unknown_category(self):
        with pytest.raises(ValidationError):
            self.catalog.list_by_category("brunch")

    def test_find_by_name_is_scoped_to_category(self):
        assert self.catalog.find_by_name("dinner", " Pasta ").name == "pasta"
        with pytest.raises(NotFoundError):
            self.catalog.find_by_name("breakfast", "pasta")

    def test_get_by_id_missing(self):
        with pytest.raises(NotFoundError):
            self.catalog.get_by_id(999)
        assert self.catalog.find_by_id(999) is None

    def test_repository_matches_catalog(self):
        stored = self.meal_repo.get_by_category(MealCategory.BREAKFAST)
        assert [meal.name for meal in stored] == ["oatmeal", "toast"]
        assert self.meal_repo.get_by_id(stored[0].id) == stored[0]
        assert self.meal_repo.get_by_id(999) is None

    def test_all_meals_in_id_order(self):
        meals = self.catalog.all_meals()
        assert [meal.name for meal in meals] == [
            "oatmeal", "toast", "sandwich", "salad", "pasta", "soup"
        ]
        assert [meal.id for meal in meals] == sorted(meal.id for meal in meals)

    def test_contains(self):
        assert "Soup" in self.catalog
        assert "pizza" not in self.catalog


def test_failed_write_leaves_catalog_unchanged():
    """A storage failure neither indexes the meal nor burns its id."""
    repo = Mock()
    repo.get_all.return_value = []
    repo.get_max_id.return_value = 4
    repo.save.side_effect = StorageError("disk full")

    catalog = Catalog(repo)
    with pytest.raises(StorageError):
        catalog.add("lunch", "salad", "lettuce")

    assert len(catalog) == 0
    assert catalog.next_id == 5
