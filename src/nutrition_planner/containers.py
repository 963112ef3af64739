"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from nutrition_planner.adapters.fdc_client import HttpxFdcClient
from nutrition_planner.adapters.supabase_food_repository import SupabaseFoodRepository
from nutrition_planner.adapters.supabase_meal_plan_repository import (
    SupabaseMealPlanRepository,
)
from nutrition_planner.adapters.supabase_nutrient_repository import (
    SupabaseNutrientRepository,
)
from nutrition_planner.adapters.supabase_recipe_repository import (
    SupabaseRecipeRepository,
)
from nutrition_planner.config import Settings
from nutrition_planner.services.food_ingestion import FoodIngestionService
from nutrition_planner.services.food_search import FoodSearchService
from nutrition_planner.services.foods import FoodService
from nutrition_planner.services.meal_plans import MealPlanService
from nutrition_planner.services.nutrients import NutrientCatalogService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    nutrient_service: NutrientCatalogService
    food_service: FoodService
    food_search_service: FoodSearchService
    food_ingestion_service: FoodIngestionService
    meal_plan_service: MealPlanService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    nutrient_repository = SupabaseNutrientRepository(supabase_client)
    food_repository = SupabaseFoodRepository(supabase_client)
    fdc_client = HttpxFdcClient.create(
        api_key=resolved_settings.fdc_api_key,
        base_url=resolved_settings.fdc_base_url,
        timeout_seconds=resolved_settings.fdc_timeout_seconds,
    )

    async def close_resources() -> None:
        await fdc_client.close()

    return AppContainer(
        settings=resolved_settings,
        nutrient_service=NutrientCatalogService(
            fdc_client=fdc_client, repository=nutrient_repository
        ),
        food_service=FoodService(fdc_client=fdc_client, repository=food_repository),
        food_search_service=FoodSearchService(fdc_client=fdc_client),
        food_ingestion_service=FoodIngestionService(
            repository=food_repository, nutrient_repository=nutrient_repository
        ),
        meal_plan_service=MealPlanService(
            repository=SupabaseMealPlanRepository(supabase_client),
            recipe_repository=SupabaseRecipeRepository(supabase_client),
        ),
        close_resources=close_resources,
    )
