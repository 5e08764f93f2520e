"""
Shared test fixtures and utilities.
"""

import pytest

from adapters.db import Database, SQLiteMealRepository, SQLitePlanRepository
from domain.catalog import Catalog
from domain.planner import Planner
from domain.shopping import ShoppingListAggregator
from tests.base_test import ScriptedIO


@pytest.fixture
def temp_database(tmp_path):
    """Create a temporary database for testing."""
    db = Database(str(tmp_path / "meals.db"))
    yield db
    db.close()


@pytest.fixture
def meal_repo(temp_database):
    """Create meal repository with temp database."""
    return SQLiteMealRepository(temp_database)


@pytest.fixture
def catalog(meal_repo):
    """Empty catalog backed by the temp database."""
    return Catalog(meal_repo)


@pytest.fixture
def plan_repo(temp_database, catalog):
    """Create plan repository with temp database."""
    return SQLitePlanRepository(temp_database, catalog)


@pytest.fixture
def planner(catalog, plan_repo):
    return Planner(catalog, plan_repo)


@pytest.fixture
def aggregator(plan_repo):
    return ShoppingListAggregator(plan_repo)


@pytest.fixture
def breakfast_catalog(catalog):
    """Catalog holding only the oatmeal and toast breakfasts."""
    catalog.add("breakfast", "oatmeal", ["oats", "milk"])
    catalog.add("breakfast", "toast", ["bread", "butter"])
    return catalog


@pytest.fixture
def scripted_io():
    """Factory for ScriptedIO instances."""
    return ScriptedIO


@pytest.fixture
def client(temp_database):
    """Test client for API testing, bound to the temp database."""
    from fastapi.testclient import TestClient

    from api.dependencies import Services, get_services
    from main import app

    services = Services.from_database(temp_database)
    app.dependency_overrides[get_services] = lambda: services
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
