"""Supabase implementation for stored USDA foods."""

from dataclasses import dataclass

from supabase import Client

from nutrition_planner.adapters.supabase_errors import discard, execute
from nutrition_planner.domain.food_mapping import food_from_local
from nutrition_planner.domain.foods import FoodItem, NutrientDefinition
from nutrition_planner.services.foods import FoodRepository

_FOODS = "usda_food_items"
_AMOUNTS = "usda_food_nutrients"
_FOOD_SELECT = (
    "*, usda_food_nutrients(id, amount, usda_nutrients(id, number, name, unit_name))"
)


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase-backed repository for foods and their nutrient amounts."""

    client: Client

    def get_by_fdc_id(self, fdc_id: str) -> FoodItem | None:
        """Return a stored food with nutrient definitions embedded."""
        response = execute(
            self.client.table(_FOODS)
            .select(_FOOD_SELECT)
            .eq("fdc_id", fdc_id)
            .limit(1),
            table=_FOODS,
            operation="select",
        )
        if not response.data:
            return None
        return food_from_local(response.data[0])

    def create_food(
        self,
        payload: dict[str, object],
        nutrient_amounts: list[tuple[NutrientDefinition, float]],
    ) -> FoodItem:
        """Insert a food, then its nutrient amounts.

        If the amounts cannot be stored the food row is removed again before
        the error propagates.
        """
        response = execute(
            self.client.table(_FOODS).insert(payload),
            table=_FOODS,
            operation="insert",
        )
        if not response.data:
            raise RuntimeError("Failed to create food entry")
        row = dict(response.data[0])
        links: list[dict[str, object]] = []
        if nutrient_amounts:
            try:
                links_response = execute(
                    self.client.table(_AMOUNTS).insert(
                        [
                            {
                                "food_item_id": row["id"],
                                "nutrient_id": nutrient.id,
                                "amount": amount,
                            }
                            for nutrient, amount in nutrient_amounts
                        ]
                    ),
                    table=_AMOUNTS,
                    operation="insert",
                )
            except Exception:
                discard(
                    self.client.table(_FOODS).delete().eq("id", row["id"]),
                    table=_FOODS,
                )
                raise
            definitions = {nutrient.id: nutrient for nutrient, _ in nutrient_amounts}
            for link in links_response.data or []:
                nutrient = definitions.get(link.get("nutrient_id"))
                links.append(
                    {
                        "id": link.get("id"),
                        "amount": link.get("amount"),
                        "usda_nutrients": {
                            "id": nutrient.id if nutrient else None,
                            "number": nutrient.number if nutrient else "",
                            "name": nutrient.name if nutrient else "",
                            "unit_name": nutrient.unit_name if nutrient else "",
                        },
                    }
                )
        row["usda_food_nutrients"] = links
        return food_from_local(row)
