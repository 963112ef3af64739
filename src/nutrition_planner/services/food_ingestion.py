"""Explicit persistence of foods into local storage."""

import logging
from dataclasses import dataclass
from datetime import UTC, date, datetime

import pydantic
from pydantic import BaseModel, ConfigDict, Field, field_validator

from nutrition_planner.domain.food_mapping import parse_publication_date
from nutrition_planner.domain.foods import DataType, FoodItem, NutrientDefinition
from nutrition_planner.errors import (
    ConflictError,
    DuplicateKeyError,
    InternalError,
    ValidationError,
)
from nutrition_planner.services.foods import FoodRepository
from nutrition_planner.services.nutrients import NutrientRepository

FOOD_TABLE = "usda_food_items"

_logger = logging.getLogger(__name__)


class NutrientCandidate(BaseModel):
    """Nutrient amount submitted alongside a food."""

    model_config = ConfigDict(extra="ignore")

    number: str
    amount: float

    @field_validator("number", mode="before")
    @classmethod
    def _coerce_number(cls, value: object) -> object:
        if isinstance(value, int | float):
            return str(value)
        return value


class FoodCandidate(BaseModel):
    """Food submitted for ingestion."""

    model_config = ConfigDict(
        extra="ignore", populate_by_name=True, str_strip_whitespace=True
    )

    fdc_id: str = Field(alias="fdcId", min_length=1)
    description: str = Field(min_length=1)
    data_type: DataType | None = Field(default=None, alias="dataType")
    publication_date: date | None = Field(default=None, alias="publicationDate")
    brand_owner: str | None = Field(default=None, alias="brandOwner")
    gtin_upc: str | None = Field(default=None, alias="gtinUpc")
    ingredients: str | None = None
    serving_size: float | None = Field(default=None, alias="servingSize")
    serving_size_unit: str | None = Field(default=None, alias="servingSizeUnit")
    nutrition_data: dict[str, object] = Field(
        default_factory=dict, alias="nutritionData"
    )
    nutrients: list[NutrientCandidate] = Field(default_factory=list)

    @field_validator("fdc_id", "gtin_upc", mode="before")
    @classmethod
    def _coerce_identifier(cls, value: object) -> object:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("publication_date", mode="before")
    @classmethod
    def _parse_date(cls, value: object) -> object:
        if value is None or value == "":
            return None
        parsed = parse_publication_date(value)
        if parsed is None:
            raise ValueError("Invalid publication date")
        return parsed

    @field_validator("nutrition_data", mode="before")
    @classmethod
    def _default_blob(cls, value: object) -> object:
        return {} if value is None else value


@dataclass
class FoodIngestionService:
    """Validates and stores foods, rejecting duplicate FDC ids."""

    repository: FoodRepository
    nutrient_repository: NutrientRepository

    def ingest(self, raw: dict[str, object]) -> FoodItem:
        """Persist a food and return the stored record.

        Raises ``ConflictError`` carrying the stored record when the FDC id
        already exists, either on the pre-insert lookup or when the storage
        uniqueness constraint rejects a concurrent insert.
        """
        candidate = validate_candidate(raw)

        existing = self.repository.get_by_fdc_id(candidate.fdc_id)
        if existing is not None:
            _logger.info("Food %s already stored", candidate.fdc_id)
            raise ConflictError("Food already exists in database", existing=existing)

        amounts = self._resolve_amounts(candidate)
        try:
            created = self.repository.create_food(_to_row(candidate), amounts)
        except DuplicateKeyError as exc:
            if exc.table != FOOD_TABLE:
                _logger.error("Storing food %s failed: %s", candidate.fdc_id, exc)
                raise InternalError(
                    "Failed to store food nutrients", operation="insert"
                ) from exc
            _logger.info("Food %s stored concurrently", candidate.fdc_id)
            raise ConflictError(
                "Food already exists in database",
                existing=self.repository.get_by_fdc_id(candidate.fdc_id),
            ) from exc
        _logger.info(
            "Stored food %s with %s nutrient amounts", created.fdc_id, len(amounts)
        )
        return created

    def _resolve_amounts(
        self, candidate: FoodCandidate
    ) -> list[tuple[NutrientDefinition, float]]:
        if not candidate.nutrients:
            return []
        # A repeated number keeps its last amount.
        amounts = {nutrient.number: nutrient.amount for nutrient in candidate.nutrients}
        definitions = {
            definition.number: definition
            for definition in self.nutrient_repository.get_by_numbers(set(amounts))
        }
        return [
            (definitions[number], amount)
            for number, amount in amounts.items()
            if number in definitions
        ]


def validate_candidate(raw: dict[str, object]) -> FoodCandidate:
    """Validate raw input, raising ``ValidationError`` with per-field detail."""
    try:
        return FoodCandidate.model_validate(raw)
    except pydantic.ValidationError as exc:
        fields = [
            {
                "field": ".".join(str(part) for part in error["loc"]),
                "message": error["msg"],
            }
            for error in exc.errors()
        ]
        raise ValidationError("Invalid food data", fields=fields) from exc


def _to_row(candidate: FoodCandidate) -> dict[str, object]:
    publication_date = candidate.publication_date or datetime.now(tz=UTC).date()
    return {
        "fdc_id": candidate.fdc_id,
        "description": candidate.description,
        "data_type": candidate.data_type.value if candidate.data_type else None,
        "publication_date": publication_date.isoformat(),
        "brand_owner": candidate.brand_owner,
        "gtin_upc": candidate.gtin_upc,
        "ingredients": candidate.ingredients,
        "serving_size": candidate.serving_size,
        "serving_size_unit": candidate.serving_size_unit,
        "nutrition_data": candidate.nutrition_data,
    }
