"""Domain models for recipes and meal plans."""

from dataclasses import dataclass, field
from datetime import date
from enum import StrEnum
from uuid import UUID


class MealType(StrEnum):
    """Slot a meal occupies within a day."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


GENERATED_MEAL_TYPES = (MealType.BREAKFAST, MealType.LUNCH, MealType.DINNER)
MACRO_KEYS = ("calories", "protein", "carbs", "fat")


@dataclass(frozen=True)
class Recipe:
    """Recipe with its nutrition blob."""

    id: UUID
    name: str
    nutrition_info: dict[str, object] = field(default_factory=dict)


@dataclass(frozen=True)
class MealDraft:
    """Meal about to be persisted as part of a new plan."""

    date: date
    type: MealType
    recipe_id: UUID


@dataclass(frozen=True)
class MealRecord:
    """Stored meal with its recipe attached."""

    id: UUID
    meal_plan_id: UUID
    date: date
    type: str
    recipe_id: UUID
    recipe: Recipe | None


@dataclass(frozen=True)
class MealPlanRecord:
    """Stored meal plan header and its meals."""

    id: UUID
    user_id: UUID
    start_date: date
    end_date: date
    meals: list[MealRecord]


@dataclass(frozen=True)
class MealEdit:
    """Requested change to a single meal."""

    meal_id: UUID
    type: MealType | None = None
    recipe_id: UUID | None = None


@dataclass(frozen=True)
class NutrientView:
    """Extra nutrient read from a recipe's nutrition blob."""

    name: str
    amount: float
    unit: str


@dataclass(frozen=True)
class MealView:
    """Meal with nutrition figures materialized from its recipe."""

    id: UUID
    type: str
    recipe_id: UUID
    recipe_name: str
    date: date
    calories: float
    protein: float
    carbs: float
    fat: float
    nutrients: list[NutrientView]


@dataclass(frozen=True)
class MealPlanView:
    """Meal plan as rendered for display."""

    id: UUID
    start_date: date
    end_date: date
    meals: list[MealView]
