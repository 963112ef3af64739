"""Supabase repository for meal plans."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from nutrition_planner.adapters.supabase_errors import discard, execute
from nutrition_planner.adapters.supabase_recipe_repository import parse_recipe
from nutrition_planner.domain.meal_plans import MealDraft, MealPlanRecord, MealRecord
from nutrition_planner.services.meal_plans import MealPlanRepository

_PLANS = "meal_plans"
_MEALS = "meals"
_PLAN_SELECT = (
    "id, user_id, start_date, end_date, "
    "meals(id, meal_plan_id, date, type, recipe_id, recipes(id, name, nutrition_info))"
)


@dataclass
class SupabaseMealPlanRepository(MealPlanRepository):
    """Supabase implementation for meal plans and meals."""

    client: Client

    def create_plan(
        self,
        user_id: UUID,
        start_date: date,
        end_date: date,
        meals: list[MealDraft],
    ) -> MealPlanRecord:
        """Insert the plan header, then every meal in one statement.

        The header is removed again when the meals cannot be inserted, so a
        failed call leaves no plan behind.
        """
        response = execute(
            self.client.table(_PLANS).insert(
                {
                    "user_id": str(user_id),
                    "start_date": start_date.isoformat(),
                    "end_date": end_date.isoformat(),
                }
            ),
            table=_PLANS,
            operation="insert",
        )
        if not response.data:
            raise RuntimeError("Failed to create meal plan")
        plan_row = dict(response.data[0])
        plan_id = str(plan_row["id"])
        try:
            meals_response = execute(
                self.client.table(_MEALS).insert(
                    [
                        {
                            "meal_plan_id": plan_id,
                            "date": meal.date.isoformat(),
                            "type": meal.type.value,
                            "recipe_id": str(meal.recipe_id),
                        }
                        for meal in meals
                    ]
                ),
                table=_MEALS,
                operation="insert",
            )
        except Exception:
            discard(
                self.client.table(_PLANS).delete().eq("id", plan_id), table=_PLANS
            )
            raise
        plan_row["meals"] = meals_response.data or []
        return _parse_plan(plan_row)

    def get_plan(self, plan_id: UUID) -> MealPlanRecord | None:
        """Return a plan with its meals and their recipes."""
        response = execute(
            self.client.table(_PLANS)
            .select(_PLAN_SELECT)
            .eq("id", str(plan_id))
            .limit(1),
            table=_PLANS,
            operation="select",
        )
        if not response.data:
            return None
        return _parse_plan(response.data[0])

    def list_plans(
        self, user_id: UUID, start_date: date, end_date: date
    ) -> list[MealPlanRecord]:
        """Return a user's plans lying within the date range."""
        response = execute(
            self.client.table(_PLANS)
            .select(_PLAN_SELECT)
            .eq("user_id", str(user_id))
            .gte("start_date", start_date.isoformat())
            .lte("end_date", end_date.isoformat())
            .order("start_date", desc=False),
            table=_PLANS,
            operation="select",
        )
        return [_parse_plan(row) for row in response.data or []]

    def update_meal(self, meal_id: UUID, changes: dict[str, object]) -> None:
        """Update a meal row."""
        execute(
            self.client.table(_MEALS).update(changes).eq("id", str(meal_id)),
            table=_MEALS,
            operation="update",
        )

    def delete_plan(self, plan_id: UUID) -> None:
        """Delete the plan's meals and then the plan."""
        execute(
            self.client.table(_MEALS).delete().eq("meal_plan_id", str(plan_id)),
            table=_MEALS,
            operation="delete",
        )
        execute(
            self.client.table(_PLANS).delete().eq("id", str(plan_id)),
            table=_PLANS,
            operation="delete",
        )


def _parse_plan(row: dict[str, object]) -> MealPlanRecord:
    plan_id = UUID(str(row["id"]))
    return MealPlanRecord(
        id=plan_id,
        user_id=UUID(str(row["user_id"])),
        start_date=_parse_date(row["start_date"]),
        end_date=_parse_date(row["end_date"]),
        meals=[_parse_meal(meal, plan_id) for meal in row.get("meals") or []],
    )


def _parse_meal(row: dict[str, object], plan_id: UUID) -> MealRecord:
    recipe_row = row.get("recipes")
    return MealRecord(
        id=UUID(str(row["id"])),
        meal_plan_id=UUID(str(row.get("meal_plan_id") or plan_id)),
        date=_parse_date(row["date"]),
        type=str(row.get("type", "")),
        recipe_id=UUID(str(row["recipe_id"])),
        recipe=parse_recipe(recipe_row) if recipe_row else None,
    )


def _parse_date(value: object) -> date:
    return date.fromisoformat(str(value)[:10])
