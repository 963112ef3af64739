"""Pydantic models for request bodies."""

from uuid import UUID

from pydantic import BaseModel, Field

from nutrition_planner.domain.meal_plans import MealType


class GenerateMealPlanRequest(BaseModel):
    """Date range for a new meal plan."""

    start_date: str | None = Field(default=None, alias="startDate")
    end_date: str | None = Field(default=None, alias="endDate")


class MealEditRequest(BaseModel):
    """Change to one meal of a plan."""

    id: UUID
    type: MealType | None = None
    recipe_id: UUID | None = Field(default=None, alias="recipeId")


class UpdateMealPlanRequest(BaseModel):
    """Batch of meal edits."""

    meals: list[MealEditRequest]
