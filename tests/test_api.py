"""
Tests for API endpoints.

This module contains tests for the FastAPI endpoints: health, meal
catalog, weekly plan and shopping list.
"""

import pytest

from domain.entities import DayOfWeek

DAYS = [day.value for day in DayOfWeek]


def add_meal(client, category, name, ingredients):
    response = client.post(
        "/api/v1/meals/",
        json={"category": category, "name": name, "ingredients": ingredients},
    )
    assert response.status_code == 201, response.text
    return response.json()["meal"]


@pytest.fixture
def breakfast_only(client):
    """Two breakfasts and nothing else in the catalog."""
    add_meal(client, "breakfast", "toast", ["bread", "butter"])
    add_meal(client, "breakfast", "french toast", ["bread", "eggs", "milk"])
    return client


def week_of(*names):
    """Breakfast selections for Monday..Sunday, cycling through names."""
    return {
        day: {"breakfast": names[i % len(names)]} for i, day in enumerate(DAYS)
    }


class TestHealthEndpoints:
    """Test cases for health check endpoints."""

    def test_health_check(self, client):
        response = client.get("/api/v1/health/")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["service"] == "meal-planner-api"

    def test_detailed_health_check(self, client):
        response = client.get("/api/v1/health/detailed")

        assert response.status_code == 200
        data = response.json()
        assert data["checks"]["database"]["status"] == "healthy"
        assert data["checks"]["database"]["meals_count"] == 0
        assert data["checks"]["catalog"]["next_meal_id"] == 1

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["meals"] == "/api/v1/meals/"


class TestMealEndpoints:
    """Test cases for the meal catalog endpoints."""

    def test_create_meal(self, client):
        meal = add_meal(client, "Lunch", "Caesar Salad", ["Lettuce", "croutons"])

        assert meal["id"] == 1
        assert meal["category"] == "lunch"
        assert meal["name"] == "caesar salad"
        assert meal["ingredients"] == ["lettuce", "croutons"]

    def test_ids_increase(self, client):
        first = add_meal(client, "dinner", "soup", ["carrot"])
        second = add_meal(client, "dinner", "stew", ["beef"])
        assert second["id"] == first["id"] + 1

    def test_create_duplicate_meal(self, client):
        add_meal(client, "lunch", "salad", ["lettuce"])
        response = client.post(
            "/api/v1/meals/",
            json={"category": "dinner", "name": "SALAD", "ingredients": ["tomato"]},
        )
        assert response.status_code == 400
        assert "already exists" in response.json()["detail"]

    def test_create_meal_invalid_name(self, client):
        response = client.post(
            "/api/v1/meals/",
            json={"category": "lunch", "name": "salad 2", "ingredients": ["tomato"]},
        )
        assert response.status_code == 400

    def test_create_meal_invalid_ingredient(self, client):
        response = client.post(
            "/api/v1/meals/",
            json={"category": "lunch", "name": "salad", "ingredients": ["tomato!"]},
        )
        assert response.status_code == 400

    def test_create_meal_unknown_category(self, client):
        response = client.post(
            "/api/v1/meals/",
            json={"category": "brunch", "name": "salad", "ingredients": ["tomato"]},
        )
        assert response.status_code == 422

    def test_create_meal_without_ingredients(self, client):
        response = client.post(
            "/api/v1/meals/",
            json={"category": "lunch", "name": "salad", "ingredients": []},
        )
        assert response.status_code == 422

    def test_list_meals_sorted(self, client):
        add_meal(client, "breakfast", "toast", ["bread"])
        add_meal(client, "breakfast", "oatmeal", ["oats"])
        add_meal(client, "lunch", "sandwich", ["bread"])

        response = client.get("/api/v1/meals/", params={"category": "breakfast"})

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 2
        assert [meal["name"] for meal in data["meals"]] == ["oatmeal", "toast"]

    def test_list_all_meals(self, client):
        add_meal(client, "lunch", "sandwich", ["bread"])
        add_meal(client, "breakfast", "toast", ["bread"])

        response = client.get("/api/v1/meals/")

        assert response.status_code == 200
        data = response.json()
        assert data["category"] is None
        assert [meal["name"] for meal in data["meals"]] == ["sandwich", "toast"]
        assert data["total"] == 2

    def test_list_meals_bad_category(self, client):
        response = client.get("/api/v1/meals/", params={"category": "snack"})
        assert response.status_code == 422

    def test_get_meal(self, client):
        created = add_meal(client, "dinner", "soup", ["carrot", "potato"])

        response = client.get(f"/api/v1/meals/{created['id']}")

        assert response.status_code == 200
        assert response.json()["meal"] == created

    def test_get_missing_meal(self, client):
        response = client.get("/api/v1/meals/42")
        assert response.status_code == 404


class TestPlanEndpoints:
    """Test cases for the weekly plan endpoints."""

    def test_no_plan(self, client):
        response = client.get("/api/v1/plan/")
        assert response.status_code == 404

    def test_put_and_get_plan(self, breakfast_only):
        client = breakfast_only
        response = client.put(
            "/api/v1/plan/", json={"selections": week_of("Toast", "french toast")}
        )
        assert response.status_code == 200
        assert response.json()["plan"]["slots"] == 7

        response = client.get("/api/v1/plan/")
        assert response.status_code == 200
        days = response.json()["plan"]["days"]
        assert list(days) == DAYS
        assert days["Monday"] == {"breakfast": "toast"}
        assert days["Tuesday"] == {"breakfast": "french toast"}

    def test_put_replaces_previous_plan(self, breakfast_only):
        client = breakfast_only
        client.put("/api/v1/plan/", json={"selections": week_of("toast")})
        client.put("/api/v1/plan/", json={"selections": week_of("french toast")})

        days = client.get("/api/v1/plan/").json()["plan"]["days"]
        assert {choice["breakfast"] for choice in days.values()} == {"french toast"}

    def test_put_missing_slot(self, breakfast_only):
        selections = week_of("toast")
        del selections["Sunday"]
        response = breakfast_only.put("/api/v1/plan/", json={"selections": selections})
        assert response.status_code == 400

    def test_put_unknown_meal(self, breakfast_only):
        response = breakfast_only.put(
            "/api/v1/plan/", json={"selections": week_of("pancakes")}
        )
        assert response.status_code == 404
        assert breakfast_only.get("/api/v1/plan/").status_code == 404

    def test_put_unknown_day(self, breakfast_only):
        selections = week_of("toast")
        selections["Funday"] = {"breakfast": "toast"}
        response = breakfast_only.put("/api/v1/plan/", json={"selections": selections})
        assert response.status_code == 400

    def test_clear_plan(self, breakfast_only):
        client = breakfast_only
        client.put("/api/v1/plan/", json={"selections": week_of("toast")})

        response = client.delete("/api/v1/plan/")

        assert response.status_code == 200
        assert client.get("/api/v1/plan/").status_code == 404


class TestShoppingEndpoints:
    """Test cases for the shopping list endpoint."""

    def test_shopping_list_without_plan(self, client):
        response = client.get("/api/v1/shopping/")
        assert response.status_code == 409

    def test_shopping_list_counts_distinct_meals(self, breakfast_only):
        client = breakfast_only
        client.put(
            "/api/v1/plan/", json={"selections": week_of("toast", "french toast")}
        )

        response = client.get("/api/v1/shopping/")

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 4
        assert data["shopping_list"]["items"] == {
            "bread": 2,
            "butter": 1,
            "eggs": 1,
            "milk": 1,
        }
        assert sorted(data["shopping_list"]["lines"]) == [
            "bread x2",
            "butter",
            "eggs",
            "milk",
        ]
