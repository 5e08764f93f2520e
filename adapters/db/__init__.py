"""
Database adapters package.

This package contains implementations of repository interfaces
using SQLite database.
"""

from .database import Database
from .meal_repository import SQLiteMealRepository
from .plan_repository import SQLitePlanRepository

__all__ = [
    "Database",
    "SQLiteMealRepository",
    "SQLitePlanRepository",
]
