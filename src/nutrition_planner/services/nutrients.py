"""Nutrient catalog backed by local storage and seeded from FDC."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from nutrition_planner.adapters.fdc_client import FdcClient
from nutrition_planner.domain.foods import NutrientDefinition
from nutrition_planner.services.upstream import call_upstream

_logger = logging.getLogger(__name__)


class NutrientRepository(Protocol):
    """Persistence interface for nutrient definitions."""

    def list_nutrients(self) -> list[NutrientDefinition]:
        """Return every stored nutrient definition."""

    def insert_nutrients(self, nutrients: list[NutrientDefinition]) -> None:
        """Insert definitions, skipping numbers that already exist."""

    def get_by_numbers(self, numbers: Iterable[str]) -> list[NutrientDefinition]:
        """Return stored definitions matching the given numbers."""


@dataclass
class NutrientCatalogService:
    """Resolves the nutrient catalog, seeding local storage on first use."""

    fdc_client: FdcClient
    repository: NutrientRepository

    async def get_catalog(self) -> list[NutrientDefinition]:
        """Return the local catalog, or fetch and store the upstream one.

        A non-empty local catalog is returned as is. Otherwise the upstream
        catalog is fetched, written to local storage and returned, so this read
        may perform a bulk write.
        """
        local = self.repository.list_nutrients()
        if local:
            return local

        payload = await call_upstream(
            self.fdc_client.list_nutrients,
            action="list_nutrients",
            message="Failed to fetch nutrients",
        )
        nutrients = [
            NutrientDefinition(
                number=str(entry.get("number", "")),
                name=str(entry.get("name", "")),
                unit_name=str(entry.get("unitName", "")),
            )
            for entry in payload
        ]
        self.repository.insert_nutrients(nutrients)
        _logger.info("Seeded nutrient catalog with %s entries", len(nutrients))
        return nutrients
