"""Food lookups that prefer local storage over FoodData Central."""

import logging
from dataclasses import dataclass
from typing import Protocol

from nutrition_planner.adapters.fdc_client import FdcClient
from nutrition_planner.domain.food_mapping import food_from_upstream
from nutrition_planner.domain.foods import FoodItem, NutrientDefinition
from nutrition_planner.errors import ValidationError
from nutrition_planner.services.upstream import call_upstream

_logger = logging.getLogger(__name__)


class FoodRepository(Protocol):
    """Persistence interface for stored foods."""

    def get_by_fdc_id(self, fdc_id: str) -> FoodItem | None:
        """Return the stored food with its nutrient amounts, if present."""

    def create_food(
        self,
        payload: dict[str, object],
        nutrient_amounts: list[tuple[NutrientDefinition, float]],
    ) -> FoodItem:
        """Insert a food and its nutrient amounts and return it.

        Raises ``DuplicateKeyError`` when the FDC id is already stored.
        """


@dataclass
class FoodService:
    """Resolves single foods by FDC id."""

    fdc_client: FdcClient
    repository: FoodRepository

    async def resolve(self, fdc_id: str) -> FoodItem:
        """Return a food from local storage, falling back to FDC.

        Foods fetched from FDC are not written to local storage; only the
        ingestion service persists foods.
        """
        key = str(fdc_id).strip()
        if not key:
            raise ValidationError.for_field("fdcId", "FDC id is required")

        local = self.repository.get_by_fdc_id(key)
        if local is not None:
            return local

        payload = await call_upstream(
            lambda: self.fdc_client.get_food(key),
            action=f"get_food:{key}",
            message="Failed to fetch food details",
        )
        _logger.info("Resolved food %s from FDC", key)
        return food_from_upstream(payload)
