"""Meal plan endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Query, Request

from nutrition_planner.api.deps import require_user
from nutrition_planner.api.request_models import (  # noqa: TC001
    GenerateMealPlanRequest,
    UpdateMealPlanRequest,
)
from nutrition_planner.api.serializers import plan_summary_to_json, plan_view_to_json
from nutrition_planner.domain.meal_plans import MealEdit
from nutrition_planner.services.meal_plans import materialize

if TYPE_CHECKING:
    from nutrition_planner.containers import AppContainer

router = APIRouter(prefix="/meal-plans", tags=["meal-plans"])


@router.get("")
async def list_meal_plans(
    request: Request,
    start_date: str | None = Query(default=None, alias="startDate"),
    end_date: str | None = Query(default=None, alias="endDate"),
    user_id: UUID = Depends(require_user),
) -> list[dict[str, object]]:
    """Return the caller's plans within a date range."""
    container: AppContainer = request.app.state.container
    plans = container.meal_plan_service.list_plans(user_id, start_date, end_date)
    return [plan_summary_to_json(plan) for plan in plans]


@router.post("/generate")
async def generate_meal_plan(
    body: GenerateMealPlanRequest,
    request: Request,
    user_id: UUID = Depends(require_user),
) -> dict[str, object]:
    """Generate a random plan for the date range."""
    container: AppContainer = request.app.state.container
    plan = container.meal_plan_service.generate(user_id, body.start_date, body.end_date)
    return plan_view_to_json(materialize(plan))


@router.get("/{plan_id}")
async def get_meal_plan(
    plan_id: UUID, request: Request, user_id: UUID = Depends(require_user)
) -> dict[str, object]:
    """Return a plan with per-meal nutrition."""
    container: AppContainer = request.app.state.container
    return plan_view_to_json(container.meal_plan_service.get_plan(user_id, plan_id))


@router.put("/{plan_id}")
async def update_meal_plan(
    plan_id: UUID,
    body: UpdateMealPlanRequest,
    request: Request,
    user_id: UUID = Depends(require_user),
) -> dict[str, object]:
    """Change the slot type or recipe of individual meals."""
    container: AppContainer = request.app.state.container
    edits = [
        MealEdit(meal_id=meal.id, type=meal.type, recipe_id=meal.recipe_id)
        for meal in body.meals
    ]
    view = container.meal_plan_service.update_meals(user_id, plan_id, edits)
    return plan_view_to_json(view)


@router.delete("/{plan_id}")
async def delete_meal_plan(
    plan_id: UUID, request: Request, user_id: UUID = Depends(require_user)
) -> dict[str, str]:
    """Delete a plan and its meals."""
    container: AppContainer = request.app.state.container
    container.meal_plan_service.delete_plan(user_id, plan_id)
    return {"message": "Meal plan deleted successfully"}
