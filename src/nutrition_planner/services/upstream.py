"""Helpers for calling FoodData Central from services."""

import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

import httpx

from nutrition_planner.errors import UpstreamError

_logger = logging.getLogger(__name__)

T = TypeVar("T")


async def call_upstream(
    func: Callable[[], Awaitable[T]], *, action: str, message: str
) -> T:
    """Await an upstream call once, translating HTTP failures to UpstreamError."""
    try:
        return await func()
    except httpx.HTTPStatusError as exc:
        status_code = exc.response.status_code
        detail = _response_detail(exc.response)
        _logger.warning("FDC %s failed (status=%s): %s", action, status_code, detail)
        raise UpstreamError(
            message, upstream_status=status_code, upstream_detail=detail
        ) from exc
    except httpx.HTTPError as exc:
        _logger.warning("FDC %s failed (status=n/a): %s", action, exc)
        raise UpstreamError(message, upstream_detail=str(exc)) from exc


def _response_detail(response: httpx.Response) -> object:
    try:
        return response.json()
    except ValueError:
        return response.text
