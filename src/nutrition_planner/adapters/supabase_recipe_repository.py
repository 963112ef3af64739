"""Supabase implementation for recipes."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from nutrition_planner.adapters.supabase_errors import execute
from nutrition_planner.domain.meal_plans import Recipe
from nutrition_planner.services.meal_plans import RecipeRepository

_TABLE = "recipes"


@dataclass
class SupabaseRecipeRepository(RecipeRepository):
    """Supabase-backed read-only recipe repository."""

    client: Client

    def list_recipes(self) -> list[Recipe]:
        """Return every recipe."""
        response = execute(
            self.client.table(_TABLE).select("id, name, nutrition_info"),
            table=_TABLE,
            operation="select",
        )
        return [parse_recipe(row) for row in response.data or []]

    def get_recipe(self, recipe_id: UUID) -> Recipe | None:
        """Return a recipe by id, if present."""
        response = execute(
            self.client.table(_TABLE)
            .select("id, name, nutrition_info")
            .eq("id", str(recipe_id))
            .limit(1),
            table=_TABLE,
            operation="select",
        )
        if not response.data:
            return None
        return parse_recipe(response.data[0])


def parse_recipe(row: dict[str, object]) -> Recipe:
    """Parse a recipe row into a domain model."""
    return Recipe(
        id=UUID(str(row["id"])),
        name=str(row.get("name", "")),
        nutrition_info=row.get("nutrition_info") or {},
    )
