"""USDA food and nutrient endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Body, Depends, Request, status

from nutrition_planner.api.deps import require_user
from nutrition_planner.api.serializers import (
    food_to_json,
    nutrient_to_json,
    search_page_to_json,
)

if TYPE_CHECKING:
    from nutrition_planner.containers import AppContainer

router = APIRouter(prefix="/usda", tags=["usda"], dependencies=[Depends(require_user)])


@router.get("/nutrients")
async def list_nutrients(request: Request) -> dict[str, object]:
    """Return the nutrient catalog."""
    container: AppContainer = request.app.state.container
    nutrients = await container.nutrient_service.get_catalog()
    return {"nutrients": [nutrient_to_json(nutrient) for nutrient in nutrients]}


@router.get("/foods")
async def search_foods(
    request: Request, search: str = "", page: int = 1, limit: int | None = None
) -> dict[str, object]:
    """Search FoodData Central."""
    container: AppContainer = request.app.state.container
    page_size = container.settings.search_page_size if limit is None else limit
    result = await container.food_search_service.search(search, page, page_size)
    return search_page_to_json(result)


@router.post("/foods", status_code=status.HTTP_201_CREATED)
async def add_food(
    request: Request, payload: dict[str, object] = Body(...)
) -> dict[str, object]:
    """Store a food in the local database."""
    container: AppContainer = request.app.state.container
    return food_to_json(container.food_ingestion_service.ingest(payload))


@router.get("/foods/{fdc_id}")
async def get_food(fdc_id: str, request: Request) -> dict[str, object]:
    """Return full details for a food."""
    container: AppContainer = request.app.state.container
    return food_to_json(await container.food_service.resolve(fdc_id))
