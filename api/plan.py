"""
Weekly plan API endpoints.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException

from domain.exceptions import NotFoundError, StorageError, ValidationError

from .dependencies import Services, get_services
from .models import PlanCreate, PlanResponse

logger = logging.getLogger(__name__)

# Create router
router = APIRouter(prefix="/api/v1/plan", tags=["plan"])


@router.get(
    "/",
    response_model=Dict[str, Any],
    summary="Get current plan",
    description="Get the stored weekly plan",
)
async def get_plan(services: Services = Depends(get_services)) -> Dict[str, Any]:
    """Return the current weekly plan."""
    plan = services.plan_repo.load()
    if plan is None or plan.is_empty():
        raise HTTPException(
            status_code=404, detail="Database does not contain any meal plans."
        )
    return {"plan": PlanResponse.from_plan(plan).model_dump(), "status": "success"}


@router.put(
    "/",
    response_model=Dict[str, Any],
    summary="Replace current plan",
    description="Validate selections against the catalog and store them as the current plan",
)
async def put_plan(
    plan_data: PlanCreate, services: Services = Depends(get_services)
) -> Dict[str, Any]:
    """
    Replace the current weekly plan.

    Every category that has meals in the catalog must be chosen for every
    day; the previous plan is discarded.
    """
    try:
        plan = services.planner.build(plan_data.selections)
        services.planner.commit(plan)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StorageError as e:
        logger.error(f"Error committing plan: {e}")
        raise HTTPException(
            status_code=500, detail=f"Failed to save plan: {str(e)}"
        )
    logger.info(f"Plan replaced with {len(plan)} slots")
    return {"plan": PlanResponse.from_plan(plan).model_dump(), "status": "committed"}


@router.delete(
    "/",
    response_model=Dict[str, Any],
    summary="Clear current plan",
)
async def clear_plan(services: Services = Depends(get_services)) -> Dict[str, Any]:
    """Delete the stored plan."""
    try:
        services.plan_repo.clear()
    except StorageError as e:
        raise HTTPException(
            status_code=500, detail=f"Failed to clear plan: {str(e)}"
        )
    return {"status": "cleared"}
