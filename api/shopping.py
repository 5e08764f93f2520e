"""
Shopping list API endpoints.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException

from domain.exceptions import NotPlannedError

from .dependencies import Services, get_services
from .models import ShoppingListResponse

logger = logging.getLogger(__name__)

# Create router
router = APIRouter(prefix="/api/v1/shopping", tags=["shopping"])


@router.get(
    "/",
    response_model=Dict[str, Any],
    summary="Get shopping list",
    description="Aggregate the ingredients of the current weekly plan",
)
async def get_shopping_list(
    services: Services = Depends(get_services),
) -> Dict[str, Any]:
    """Ingredient counts for the stored plan."""
    try:
        shopping_list = services.aggregator.aggregate_current()
    except NotPlannedError:
        raise HTTPException(
            status_code=409, detail="Unable to build a shopping list. Plan your meals first."
        )
    response = ShoppingListResponse(
        items=shopping_list.counts,
        lines=services.aggregator.render(shopping_list),
    )
    logger.info(f"Built shopping list with {len(shopping_list)} items")
    return {"shopping_list": response.model_dump(), "total": len(shopping_list)}
