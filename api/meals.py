"""
Meal catalog API endpoints.

This module provides REST API endpoints for adding meals and browsing
the catalog by category.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from domain.entities import MealCategory
from domain.exceptions import NotFoundError, StorageError, ValidationError

from .dependencies import Services, get_services
from .models import MealCreate, MealResponse

logger = logging.getLogger(__name__)

# Create router
router = APIRouter(prefix="/api/v1/meals", tags=["meals"])


@router.get(
    "/",
    response_model=Dict[str, Any],
    summary="List meals",
    description="List the meals of one category sorted by name, or every meal by ID",
)
async def list_meals(
    category: Optional[MealCategory] = Query(None, description="Meal category"),
    services: Services = Depends(get_services),
) -> Dict[str, Any]:
    """List catalogued meals, optionally of one category."""
    if category is None:
        meals = services.catalog.all_meals()
    else:
        logger.info(f"Listing {category.value} meals")
        meals = services.catalog.list_by_category(category)
    return {
        "category": category.value if category else None,
        "meals": [MealResponse.from_meal(meal).model_dump(mode="json") for meal in meals],
        "total": len(meals),
    }


@router.get(
    "/{meal_id}",
    response_model=Dict[str, Any],
    summary="Get meal by ID",
    description="Retrieve a specific meal by its ID",
)
async def get_meal(
    meal_id: int, services: Services = Depends(get_services)
) -> Dict[str, Any]:
    """Get a specific meal by ID."""
    try:
        meal = services.catalog.get_by_id(meal_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"meal": MealResponse.from_meal(meal).model_dump(mode="json"), "status": "success"}


@router.post(
    "/",
    response_model=Dict[str, Any],
    status_code=201,
    summary="Create new meal",
    description="Add a meal to the catalog",
)
async def create_meal(
    meal_data: MealCreate, services: Services = Depends(get_services)
) -> Dict[str, Any]:
    """
    Create a new meal.

    Names and ingredients must hold letters and spaces only, and names
    must be unique regardless of case.
    """
    try:
        logger.info(f"Creating {meal_data.category.value} meal")
        meal_id = services.catalog.add(
            meal_data.category, meal_data.name, meal_data.ingredients
        )
        meal = services.catalog.get_by_id(meal_id)
        return {
            "meal": MealResponse.from_meal(meal).model_dump(mode="json"),
            "status": "created",
            "message": "The meal has been added!",
        }
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StorageError as e:
        logger.error(f"Error creating meal: {e}")
        raise HTTPException(
            status_code=500, detail=f"Failed to create meal: {str(e)}"
        )
