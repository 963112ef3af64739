"""Food and nutrient domain models."""

import math
from dataclasses import dataclass, field
from datetime import date
from enum import StrEnum


class DataType(StrEnum):
    """FoodData Central data-type categories."""

    SURVEY = "Survey (FNDDS)"
    FOUNDATION = "Foundation"
    LEGACY = "SR Legacy"
    BRANDED = "Branded"


DEFAULT_SEARCH_DATA_TYPES = (DataType.SURVEY, DataType.FOUNDATION, DataType.LEGACY)


@dataclass(frozen=True)
class NutrientDefinition:
    """Static metadata for a nutrient."""

    number: str
    name: str
    unit_name: str
    id: int | None = None


@dataclass(frozen=True)
class NutrientAmount:
    """Amount of one nutrient contained in a food."""

    id: int | None
    number: str
    name: str
    amount: float
    unit_name: str


@dataclass(frozen=True)
class FoodItem:
    """Canonical representation of a food, whatever source it came from."""

    fdc_id: str
    description: str
    data_type: str | None
    publication_date: date | None
    brand_owner: str | None = None
    gtin_upc: str | None = None
    ingredients: str | None = None
    serving_size: float | None = None
    serving_size_unit: str | None = None
    nutrients: list[NutrientAmount] = field(default_factory=list)
    nutrition_data: dict[str, object] = field(default_factory=dict)


@dataclass(frozen=True)
class FoodSummary:
    """Search result entry for a food."""

    fdc_id: str
    description: str
    data_type: str | None
    brand_owner: str | None


@dataclass(frozen=True)
class FoodSearchPage:
    """One page of upstream search results."""

    items: list[FoodSummary]
    total_count: int
    page: int
    page_size: int

    @property
    def total_pages(self) -> int:
        """Number of pages needed to show every hit."""
        return math.ceil(self.total_count / self.page_size)
