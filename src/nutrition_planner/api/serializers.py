"""camelCase JSON shapes returned to the web client."""

from nutrition_planner.domain.foods import (
    FoodItem,
    FoodSearchPage,
    FoodSummary,
    NutrientDefinition,
)
from nutrition_planner.domain.meal_plans import MealPlanRecord, MealPlanView


def food_to_json(food: FoodItem) -> dict[str, object]:
    """Serialize a canonical food."""
    return {
        "fdcId": food.fdc_id,
        "description": food.description,
        "dataType": food.data_type,
        "publicationDate": (
            food.publication_date.isoformat() if food.publication_date else None
        ),
        "brandOwner": food.brand_owner,
        "gtinUpc": food.gtin_upc,
        "ingredients": food.ingredients,
        "servingSize": food.serving_size,
        "servingSizeUnit": food.serving_size_unit,
        "nutrients": [
            {
                "id": nutrient.id,
                "number": nutrient.number,
                "name": nutrient.name,
                "amount": nutrient.amount,
                "unitName": nutrient.unit_name,
            }
            for nutrient in food.nutrients
        ],
        "nutritionData": food.nutrition_data,
    }


def summary_to_json(food: FoodSummary) -> dict[str, object]:
    """Serialize a search result entry."""
    return {
        "fdcId": food.fdc_id,
        "description": food.description,
        "dataType": food.data_type,
        "brandOwner": food.brand_owner,
    }


def search_page_to_json(page: FoodSearchPage) -> dict[str, object]:
    """Serialize a search page with pagination metadata."""
    return {
        "foods": [summary_to_json(item) for item in page.items],
        "totalCount": page.total_count,
        "currentPage": page.page,
        "totalPages": page.total_pages,
    }


def nutrient_to_json(nutrient: NutrientDefinition) -> dict[str, object]:
    """Serialize a nutrient definition."""
    return {
        "id": nutrient.id,
        "number": nutrient.number,
        "name": nutrient.name,
        "unitName": nutrient.unit_name,
    }


def plan_summary_to_json(plan: MealPlanRecord) -> dict[str, object]:
    """Serialize a plan with recipe names only."""
    return {
        "id": str(plan.id),
        "startDate": plan.start_date.isoformat(),
        "endDate": plan.end_date.isoformat(),
        "meals": [
            {
                "id": str(meal.id),
                "recipeId": str(meal.recipe_id),
                "recipeName": meal.recipe.name if meal.recipe else None,
                "type": meal.type,
                "date": meal.date.isoformat(),
            }
            for meal in plan.meals
        ],
    }


def plan_view_to_json(plan: MealPlanView) -> dict[str, object]:
    """Serialize a materialized plan."""
    return {
        "id": str(plan.id),
        "startDate": plan.start_date.isoformat(),
        "endDate": plan.end_date.isoformat(),
        "meals": [
            {
                "id": str(meal.id),
                "type": meal.type,
                "recipeName": meal.recipe_name,
                "recipeId": str(meal.recipe_id),
                "date": meal.date.isoformat(),
                "calories": meal.calories,
                "protein": meal.protein,
                "carbs": meal.carbs,
                "fat": meal.fat,
                "nutrients": [
                    {"name": item.name, "amount": item.amount, "unit": item.unit}
                    for item in meal.nutrients
                ],
            }
            for meal in plan.meals
        ],
    }
