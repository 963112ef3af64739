"""Translation of PostgREST failures into application errors."""

import logging

from postgrest.exceptions import APIError

from nutrition_planner.errors import DuplicateKeyError, InternalError

_UNIQUE_VIOLATION = "23505"

_logger = logging.getLogger(__name__)


def execute(query, *, table: str, operation: str):  # type: ignore[no-untyped-def]
    """Execute a Supabase query, translating storage failures."""
    try:
        return query.execute()
    except APIError as exc:
        if exc.code == _UNIQUE_VIOLATION:
            raise DuplicateKeyError(table, exc.details or exc.message) from exc
        _logger.error("Supabase %s on %s failed: %s", operation, table, exc.message)
        raise InternalError(
            f"Failed to {operation} {table}: {exc.message}", operation=operation
        ) from exc


def discard(query, *, table: str) -> None:  # type: ignore[no-untyped-def]
    """Run a compensating delete, logging rather than raising on failure."""
    try:
        query.execute()
    except APIError as exc:
        _logger.error("Supabase cleanup on %s failed: %s", table, exc.message)
