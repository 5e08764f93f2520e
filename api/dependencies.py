"""
Shared services for the API routers.

The services are built once per process from the configured database and
handed to endpoints through FastAPI dependencies, so tests can override them.
"""

from dataclasses import dataclass
from functools import lru_cache

from adapters.db import Database, SQLiteMealRepository, SQLitePlanRepository
from config import settings
from domain.catalog import Catalog
from domain.planner import Planner
from domain.shopping import ShoppingListAggregator


@dataclass
class Services:
    """Catalog, plan store and helpers bound to one database."""

    db: Database
    meal_repo: SQLiteMealRepository
    catalog: Catalog
    plan_repo: SQLitePlanRepository
    planner: Planner
    aggregator: ShoppingListAggregator

    @classmethod
    def from_database(cls, db: Database) -> "Services":
        meal_repo = SQLiteMealRepository(db)
        catalog = Catalog(meal_repo)
        plan_repo = SQLitePlanRepository(db, catalog)
        return cls(
            db=db,
            meal_repo=meal_repo,
            catalog=catalog,
            plan_repo=plan_repo,
            planner=Planner(catalog, plan_repo),
            aggregator=ShoppingListAggregator(
                plan_repo, per_slot=settings.shopping_list_per_slot
            ),
        )


@lru_cache(maxsize=1)
def get_services() -> Services:
    """Services for the configured database."""
    return Services.from_database(Database(settings.sqlite_db))
