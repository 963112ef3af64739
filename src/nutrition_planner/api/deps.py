"""Shared FastAPI dependencies."""

from uuid import UUID

from fastapi import Header

from nutrition_planner.errors import UnauthorizedError


async def require_user(x_user_id: str | None = Header(default=None)) -> UUID:
    """Return the caller's user id, set upstream by the auth layer."""
    if not x_user_id:
        raise UnauthorizedError
    try:
        return UUID(x_user_id)
    except ValueError:
        raise UnauthorizedError from None
