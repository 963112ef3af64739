"""Pure mappers from stored and upstream food shapes to ``FoodItem``."""

from datetime import date, datetime

from nutrition_planner.domain.foods import FoodItem, NutrientAmount


def food_from_local(row: dict[str, object]) -> FoodItem:
    """Map a ``usda_food_items`` row with embedded nutrient rows."""
    nutrients = []
    for link in row.get("usda_food_nutrients") or []:
        definition = link.get("usda_nutrients") or {}
        nutrients.append(
            NutrientAmount(
                id=_to_int(link.get("id")),
                number=str(definition.get("number", "")),
                name=str(definition.get("name", "")),
                amount=_to_float(link.get("amount")),
                unit_name=str(definition.get("unit_name", "")),
            )
        )
    return FoodItem(
        fdc_id=str(row["fdc_id"]),
        description=str(row.get("description", "")),
        data_type=row.get("data_type"),
        publication_date=parse_publication_date(row.get("publication_date")),
        brand_owner=row.get("brand_owner"),
        gtin_upc=row.get("gtin_upc"),
        ingredients=row.get("ingredients"),
        serving_size=_to_optional_float(row.get("serving_size")),
        serving_size_unit=row.get("serving_size_unit"),
        nutrients=nutrients,
        nutrition_data=row.get("nutrition_data") or {},
    )


def food_from_upstream(payload: dict[str, object]) -> FoodItem:
    """Map a FoodData Central ``/food/{id}`` payload."""
    nutrients = []
    for entry in payload.get("foodNutrients") or []:
        definition = entry.get("nutrient") or {}
        nutrients.append(
            NutrientAmount(
                id=_to_int(entry.get("id")),
                number=str(definition.get("number", "")),
                name=str(definition.get("name", "")),
                amount=_to_float(entry.get("amount")),
                unit_name=str(definition.get("unitName", "")),
            )
        )
    return FoodItem(
        fdc_id=str(payload["fdcId"]),
        description=str(payload.get("description", "")),
        data_type=payload.get("dataType"),
        publication_date=parse_publication_date(payload.get("publicationDate")),
        brand_owner=payload.get("brandOwner"),
        gtin_upc=payload.get("gtinUpc"),
        ingredients=payload.get("ingredients"),
        serving_size=_to_optional_float(payload.get("servingSize")),
        serving_size_unit=payload.get("servingSizeUnit"),
        nutrients=nutrients,
    )


def parse_publication_date(value: object) -> date | None:
    """Parse ISO dates, ISO timestamps and FDC's ``M/D/YYYY`` form."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
    except ValueError:
        pass
    try:
        return datetime.strptime(value, "%m/%d/%Y").date()
    except ValueError:
        return None


def _to_float(value: object) -> float:
    if isinstance(value, int | float):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return 0.0
    return 0.0


def _to_optional_float(value: object) -> float | None:
    if value is None:
        return None
    return _to_float(value)


def _to_int(value: object) -> int | None:
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.isdigit():
        return int(value)
    return None
