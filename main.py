"""
Meal Planner FastAPI application.

This is the HTTP entry point for the meal planner. The interactive shell
lives in cli.py.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from api import health_router, meals_router, plan_router, shopping_router
from api.dependencies import get_services
from api.middleware import LoggingMiddleware
from config import settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for database cleanup."""
    logger.info("Meal Planner API started")

    yield

    if get_services.cache_info().currsize:
        try:
            get_services().db.close()
        except Exception as e:
            logger.error(f"Error closing database: {e}")
    logger.info("Meal Planner API stopped")


app = FastAPI(
    title="Meal Planner API",
    description="Meal catalog, weekly planning and shopping lists",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(LoggingMiddleware)

# Include API routers
app.include_router(health_router)
app.include_router(meals_router)
app.include_router(plan_router)
app.include_router(shopping_router)


@app.get("/")
def read_root():
    """Root endpoint with API information."""
    return {
        "message": "Meal Planner API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/api/v1/health/",
        "meals": "/api/v1/meals/",
        "plan": "/api/v1/plan/",
        "shopping": "/api/v1/shopping/",
    }


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=settings.log_level.upper())
    uvicorn.run(
        "main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
