"""FastAPI application factory."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from nutrition_planner.api.error_handlers import register_exception_handlers
from nutrition_planner.api.foods import router as foods_router
from nutrition_planner.api.meal_plans import router as meal_plans_router
from nutrition_planner.app_logging import configure_logging
from nutrition_planner.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    register_exception_handlers(app)
    app.include_router(foods_router)
    app.include_router(meal_plans_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
