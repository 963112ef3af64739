"""Supabase implementation for nutrient definitions."""

from collections.abc import Iterable
from dataclasses import dataclass

from supabase import Client

from nutrition_planner.adapters.supabase_errors import execute
from nutrition_planner.domain.foods import NutrientDefinition
from nutrition_planner.services.nutrients import NutrientRepository

_TABLE = "usda_nutrients"


@dataclass
class SupabaseNutrientRepository(NutrientRepository):
    """Supabase-backed repository for the nutrient catalog."""

    client: Client

    def list_nutrients(self) -> list[NutrientDefinition]:
        """Return every stored nutrient ordered by number."""
        response = execute(
            self.client.table(_TABLE)
            .select("id, number, name, unit_name")
            .order("number", desc=False),
            table=_TABLE,
            operation="select",
        )
        return [_parse_nutrient(row) for row in response.data or []]

    def insert_nutrients(self, nutrients: list[NutrientDefinition]) -> None:
        """Insert definitions, ignoring numbers already stored."""
        if not nutrients:
            return
        execute(
            self.client.table(_TABLE).upsert(
                [
                    {
                        "number": nutrient.number,
                        "name": nutrient.name,
                        "unit_name": nutrient.unit_name,
                    }
                    for nutrient in nutrients
                ],
                on_conflict="number",
                ignore_duplicates=True,
            ),
            table=_TABLE,
            operation="insert",
        )

    def get_by_numbers(self, numbers: Iterable[str]) -> list[NutrientDefinition]:
        """Return stored definitions matching the given numbers."""
        wanted = sorted(set(numbers))
        if not wanted:
            return []
        response = execute(
            self.client.table(_TABLE)
            .select("id, number, name, unit_name")
            .in_("number", wanted),
            table=_TABLE,
            operation="select",
        )
        return [_parse_nutrient(row) for row in response.data or []]


def _parse_nutrient(row: dict[str, object]) -> NutrientDefinition:
    return NutrientDefinition(
        id=int(row["id"]) if row.get("id") is not None else None,
        number=str(row.get("number", "")),
        name=str(row.get("name", "")),
        unit_name=str(row.get("unit_name", "")),
    )
