"""USDA FoodData Central API client."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

import httpx


class FdcClient(Protocol):
    """Interface for FoodData Central API interactions."""

    async def get_food(self, fdc_id: str) -> dict[str, object]:
        """Fetch a food by FDC id and return raw API data."""

    async def search_foods(
        self,
        query: str,
        page_number: int,
        page_size: int,
        data_types: Sequence[str],
    ) -> dict[str, object]:
        """Search foods and return the raw API page."""

    async def list_nutrients(self) -> list[dict[str, object]]:
        """Return the raw nutrient catalog."""


@dataclass
class HttpxFdcClient(FdcClient):
    """HTTPX-backed FDC client."""

    api_key: str
    base_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 15

    @classmethod
    def create(
        cls, api_key: str, base_url: str, timeout_seconds: float = 15
    ) -> "HttpxFdcClient":
        """Create an FDC client with a managed httpx session."""
        return cls(
            api_key=api_key,
            base_url=base_url,
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def get_food(self, fdc_id: str) -> dict[str, object]:
        """Fetch a food by FDC id."""
        return await self._get(f"/food/{fdc_id}")

    async def search_foods(
        self,
        query: str,
        page_number: int,
        page_size: int,
        data_types: Sequence[str],
    ) -> dict[str, object]:
        """Search foods restricted to the given data types."""
        return await self._get(
            "/foods/search",
            query=query,
            pageSize=page_size,
            pageNumber=page_number,
            dataType=",".join(data_types),
        )

    async def list_nutrients(self) -> list[dict[str, object]]:
        """Fetch the nutrient catalog."""
        return await self._get("/nutrients")

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

    async def _get(self, path: str, **params: object) -> object:
        response = await self.http_client.get(
            f"{self.base_url}{path}",
            params={"api_key": self.api_key, **params},
            timeout=self.timeout_seconds,
        )
        response.raise_for_status()
        return response.json()
