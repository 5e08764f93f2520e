"""
Health check API endpoints.

This module provides health check and system status endpoints
for monitoring and diagnostics.
"""

import logging
import sqlite3
from typing import Any, Dict

from fastapi import APIRouter, Depends

from .dependencies import Services, get_services

logger = logging.getLogger(__name__)

# Create router
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get(
    "/",
    response_model=Dict[str, Any],
    summary="Basic health check",
    description="Check if the API is running and responsive",
)
async def health_check() -> Dict[str, Any]:
    """Basic health check endpoint."""
    return {
        "status": "healthy",
        "service": "meal-planner-api",
        "version": "1.0.0",
    }


@router.get(
    "/detailed",
    response_model=Dict[str, Any],
    summary="Detailed health check",
    description="Health check including database connectivity",
)
async def detailed_health_check(
    services: Services = Depends(get_services),
) -> Dict[str, Any]:
    """
    Detailed health check endpoint.

    Returns database connectivity and catalog/plan sizes.
    """
    health_status = {
        "status": "healthy",
        "service": "meal-planner-api",
        "version": "1.0.0",
        "checks": {},
    }

    try:
        health_status["checks"]["database"] = {
            "status": "healthy",
            "path": services.db.db_path,
            "meals_count": services.meal_repo.count(),
            "plan_slots": services.plan_repo.count(),
        }
    except sqlite3.Error as e:
        logger.error(f"Database health check failed: {e}")
        health_status["status"] = "unhealthy"
        health_status["checks"]["database"] = {
            "status": "unhealthy",
            "error": str(e),
        }

    health_status["checks"]["catalog"] = {
        "status": "healthy",
        "meals_loaded": len(services.catalog),
        "next_meal_id": services.catalog.next_id,
    }
    return health_status
