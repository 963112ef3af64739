"""Exception handlers rendering application errors as JSON."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from nutrition_planner.api.serializers import food_to_json
from nutrition_planner.domain.foods import FoodItem
from nutrition_planner.errors import AppError, ConflictError

_logger = logging.getLogger(__name__)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Render an application error with its status code and details."""
    _logger.warning(
        "%s on %s %s: %s",
        type(exc).__name__,
        request.method,
        request.url.path,
        exc.message,
    )
    details = dict(exc.details)
    if isinstance(exc, ConflictError) and isinstance(exc.existing, FoodItem):
        details["existing"] = food_to_json(exc.existing)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message, "details": details},
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render request validation failures in the application error shape."""
    fields = [
        {
            "field": ".".join(str(part) for part in error["loc"]),
            "message": error["msg"],
        }
        for error in exc.errors()
    ]
    _logger.warning(
        "Validation error on %s %s: %s", request.method, request.url.path, fields
    )
    return JSONResponse(
        status_code=422,
        content={"error": "Validation error", "details": {"fields": fields}},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the application error handlers."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
