"""Food search proxied to FoodData Central."""

import logging
from dataclasses import dataclass

from nutrition_planner.adapters.fdc_client import FdcClient
from nutrition_planner.domain.foods import (
    DEFAULT_SEARCH_DATA_TYPES,
    FoodSearchPage,
    FoodSummary,
)
from nutrition_planner.errors import ValidationError
from nutrition_planner.services.upstream import call_upstream

_logger = logging.getLogger(__name__)


@dataclass
class FoodSearchService:
    """Runs free-text food searches against FDC.

    Results are never cached or persisted. Page numbers are forwarded as
    given, so a page past the end yields an empty page.
    """

    fdc_client: FdcClient
    data_types: tuple[str, ...] = tuple(DEFAULT_SEARCH_DATA_TYPES)

    async def search(self, query: str, page: int, page_size: int) -> FoodSearchPage:
        """Return one page of food summaries for the query."""
        if page < 1:
            raise ValidationError.for_field("page", "Page must be at least 1")
        if page_size < 1:
            raise ValidationError.for_field("pageSize", "Page size must be positive")

        payload = await call_upstream(
            lambda: self.fdc_client.search_foods(
                query,
                page_number=page,
                page_size=page_size,
                data_types=self.data_types,
            ),
            action="search",
            message="Failed to fetch foods",
        )
        foods = payload.get("foods") or []
        items = [
            FoodSummary(
                fdc_id=str(food["fdcId"]),
                description=str(food.get("description", "")),
                data_type=food.get("dataType"),
                brand_owner=food.get("brandOwner"),
            )
            for food in foods
            if food.get("fdcId") is not None
        ]
        skipped = len(foods) - len(items)
        if skipped:
            _logger.warning("Skipped %s search results without an FDC id", skipped)
        return FoodSearchPage(
            items=items,
            total_count=int(payload.get("totalHits") or 0),
            page=page,
            page_size=page_size,
        )
