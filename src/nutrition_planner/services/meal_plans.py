"""Meal plan generation, rendering and edits."""

import logging
import random
from dataclasses import dataclass, field, replace
from datetime import date, datetime, timedelta
from typing import Protocol
from uuid import UUID

from nutrition_planner.domain.meal_plans import (
    GENERATED_MEAL_TYPES,
    MACRO_KEYS,
    MealDraft,
    MealEdit,
    MealPlanRecord,
    MealPlanView,
    MealRecord,
    MealType,
    MealView,
    NutrientView,
    Recipe,
)
from nutrition_planner.errors import (
    InsufficientDataError,
    NotFoundError,
    ValidationError,
)

_logger = logging.getLogger(__name__)

_SLOT_ORDER = {meal_type.value: index for index, meal_type in enumerate(MealType)}


class RecipeRepository(Protocol):
    """Read-only access to recipes."""

    def list_recipes(self) -> list[Recipe]:
        """Return every recipe."""

    def get_recipe(self, recipe_id: UUID) -> Recipe | None:
        """Return a recipe by id, if present."""


class MealPlanRepository(Protocol):
    """Persistence interface for meal plans and their meals."""

    def create_plan(
        self,
        user_id: UUID,
        start_date: date,
        end_date: date,
        meals: list[MealDraft],
    ) -> MealPlanRecord:
        """Create a plan with all of its meals, or nothing at all."""

    def get_plan(self, plan_id: UUID) -> MealPlanRecord | None:
        """Return a plan with its meals and their recipes."""

    def list_plans(
        self, user_id: UUID, start_date: date, end_date: date
    ) -> list[MealPlanRecord]:
        """Return a user's plans lying within the date range."""

    def update_meal(self, meal_id: UUID, changes: dict[str, object]) -> None:
        """Update the slot type and/or recipe of a meal."""

    def delete_plan(self, plan_id: UUID) -> None:
        """Delete a plan and its meals."""


@dataclass
class MealPlanService:
    """Generates random meal plans and manages existing ones."""

    repository: MealPlanRepository
    recipe_repository: RecipeRepository
    rng: random.Random = field(default_factory=random.Random)

    def generate(
        self, user_id: UUID, start_date: object, end_date: object
    ) -> MealPlanRecord:
        """Create a plan with breakfast, lunch and dinner for every day.

        Each slot gets a recipe drawn uniformly from all recipes; repeats
        across slots and days are allowed.
        """
        start, end = _parse_range(start_date, end_date)
        days = (end - start).days + 1

        recipes = self.recipe_repository.list_recipes()
        if not recipes:
            raise InsufficientDataError("No recipes found in database")

        drafts = [
            MealDraft(
                date=start + timedelta(days=offset),
                type=meal_type,
                recipe_id=self.rng.choice(recipes).id,
            )
            for offset in range(days)
            for meal_type in GENERATED_MEAL_TYPES
        ]
        plan = self.repository.create_plan(user_id, start, end, drafts)
        _logger.info(
            "Generated meal plan %s: days=%s meals=%s", plan.id, days, len(drafts)
        )
        by_id = {recipe.id: recipe for recipe in recipes}
        return replace(
            plan,
            meals=[
                replace(meal, recipe=by_id.get(meal.recipe_id, meal.recipe))
                for meal in plan.meals
            ],
        )

    def get_plan(self, user_id: UUID, plan_id: UUID) -> MealPlanView:
        """Return a plan rendered with nutrition read from its recipes."""
        return materialize(self._owned_plan(user_id, plan_id))

    def list_plans(
        self, user_id: UUID, start_date: object, end_date: object
    ) -> list[MealPlanRecord]:
        """Return the user's plans lying within the date range."""
        start, end = _parse_range(start_date, end_date)
        return self.repository.list_plans(user_id, start, end)

    def update_meals(
        self, user_id: UUID, plan_id: UUID, edits: list[MealEdit]
    ) -> MealPlanView:
        """Apply per-meal edits and return the refreshed plan.

        Every edit is checked before any is written, so a rejected batch
        leaves the plan untouched. Edits are not checked against the
        three-meals-per-day layout.
        """
        plan = self._owned_plan(user_id, plan_id)
        meal_ids = {meal.id for meal in plan.meals}
        pending: list[tuple[UUID, dict[str, object]]] = []
        for edit in edits:
            if edit.meal_id not in meal_ids:
                raise NotFoundError("Meal", edit.meal_id)
            changes: dict[str, object] = {}
            if edit.type is not None:
                changes["type"] = edit.type.value
            if edit.recipe_id is not None:
                if self.recipe_repository.get_recipe(edit.recipe_id) is None:
                    raise NotFoundError("Recipe", edit.recipe_id)
                changes["recipe_id"] = str(edit.recipe_id)
            if changes:
                pending.append((edit.meal_id, changes))
        for meal_id, changes in pending:
            self.repository.update_meal(meal_id, changes)
        return self.get_plan(user_id, plan_id)

    def delete_plan(self, user_id: UUID, plan_id: UUID) -> None:
        """Delete a plan together with its meals."""
        self._owned_plan(user_id, plan_id)
        self.repository.delete_plan(plan_id)
        _logger.info("Deleted meal plan %s", plan_id)

    def _owned_plan(self, user_id: UUID, plan_id: UUID) -> MealPlanRecord:
        plan = self.repository.get_plan(plan_id)
        if plan is None or plan.user_id != user_id:
            raise NotFoundError("Meal plan", plan_id)
        return plan


def materialize(plan: MealPlanRecord) -> MealPlanView:
    """Render a plan, reading nutrition from each meal's recipe."""
    meals = sorted(
        plan.meals,
        key=lambda meal: (meal.date, _SLOT_ORDER.get(meal.type, len(_SLOT_ORDER))),
    )
    return MealPlanView(
        id=plan.id,
        start_date=plan.start_date,
        end_date=plan.end_date,
        meals=[_meal_view(meal) for meal in meals],
    )


def _meal_view(meal: MealRecord) -> MealView:
    recipe_name = meal.recipe.name if meal.recipe else ""
    info = meal.recipe.nutrition_info if meal.recipe else {}
    return MealView(
        id=meal.id,
        type=meal.type,
        recipe_id=meal.recipe_id,
        recipe_name=recipe_name,
        date=meal.date,
        calories=_to_float(info.get("calories")),
        protein=_to_float(info.get("protein")),
        carbs=_to_float(info.get("carbs")),
        fat=_to_float(info.get("fat")),
        nutrients=[
            NutrientView(name=name, amount=_to_float(value), unit="g")
            for name, value in info.items()
            if name not in MACRO_KEYS
        ],
    )


def _parse_range(start_value: object, end_value: object) -> tuple[date, date]:
    if start_value in (None, "") or end_value in (None, ""):
        raise ValidationError(
            "Start date and end date are required",
            fields=[
                {"field": name, "message": "Field required"}
                for name, value in (("startDate", start_value), ("endDate", end_value))
                if value in (None, "")
            ],
        )
    start = _parse_date(start_value, "startDate")
    end = _parse_date(end_value, "endDate")
    if start > end:
        raise ValidationError.for_field(
            "endDate", "End date must not be before start date"
        )
    return start, end


def _parse_date(value: object, field_name: str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
        except ValueError:
            pass
    raise ValidationError.for_field(field_name, f"Invalid date: {value!r}")


def _to_float(value: object) -> float:
    if isinstance(value, int | float):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return 0.0
    return 0.0
