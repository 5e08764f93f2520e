"""
Pydantic models for API validation.
"""

from typing import Dict, List

from pydantic import BaseModel, Field, field_validator

from domain.entities import Meal, MealCategory, WeeklyPlan
from domain.validators import normalize


class MealCreate(BaseModel):
    """Model for creating a meal."""

    category: MealCategory = Field(..., description="Meal category")
    name: str = Field(
        ..., min_length=1, max_length=100, description="Meal name"
    )
    ingredients: List[str] = Field(
        ..., min_length=1, description="Ingredient names"
    )

    @field_validator("category", mode="before")
    @classmethod
    def normalize_category(cls, v):
        """Accept categories in any casing."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("name")
    @classmethod
    def normalize_name(cls, v):
        """Store names lowercased, as the shell does."""
        return normalize(v)

    @field_validator("ingredients")
    @classmethod
    def validate_ingredients(cls, v):
        """Validate ingredients list."""
        if len(v) > 50:
            raise ValueError("Too many ingredients (max 50)")
        return [normalize(ingredient) for ingredient in v]


class MealResponse(BaseModel):
    """A catalogued meal."""

    id: int
    category: MealCategory
    name: str
    ingredients: List[str]

    @classmethod
    def from_meal(cls, meal: Meal) -> "MealResponse":
        return cls(
            id=meal.id,
            category=meal.category,
            name=meal.name,
            ingredients=list(meal.ingredients),
        )


class PlanCreate(BaseModel):
    """Model for committing a weekly plan: day -> category -> meal name."""

    selections: Dict[str, Dict[str, str]] = Field(
        ..., description="Meal name chosen for each day and category"
    )


class PlanResponse(BaseModel):
    """A weekly plan as day -> category -> meal name."""

    days: Dict[str, Dict[str, str]]
    slots: int

    @classmethod
    def from_plan(cls, plan: WeeklyPlan) -> "PlanResponse":
        return cls(days=plan.to_dict(), slots=len(plan))


class ShoppingListResponse(BaseModel):
    """Aggregated ingredient counts and their rendered lines."""

    items: Dict[str, int]
    lines: List[str]
