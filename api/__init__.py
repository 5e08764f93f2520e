"""
API package for the meal planner.

This package contains FastAPI endpoints and related functionality
for the meal planner web API.
"""

from .health import router as health_router
from .meals import router as meals_router
from .plan import router as plan_router
from .shopping import router as shopping_router

__all__ = ["health_router", "meals_router", "plan_router", "shopping_router"]
