"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from fastapi import FastAPI

from talent_scout.domain.entities import Persona
from talent_scout.interface.dependencies import shutdown, startup
from talent_scout.interface.error_handlers import register_error_handlers
from talent_scout.interface.routes import router

SERVICE_NAME = "talent-scout"
SERVICE_VERSION = "1.0.0"


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the GitHub and OpenAI clients for the app's lifetime."""
    await startup()
    yield
    await shutdown()


def create_app() -> FastAPI:
    """Build and wire the FastAPI application."""
    app = FastAPI(
        title="Talent Scout",
        version=SERVICE_VERSION,
        description=(
            "Takes a GitHub username and streams an LLM-written assessment of "
            "how the developer's skills could serve public health technology. "
            "`POST /assess` follows the callable-function protocol; send "
            "`Accept: text/event-stream` to receive chunks as they are generated."
        ),
        openapi_tags=[
            {"name": "assessment", "description": "Persona-driven GitHub profile assessments."},
        ],
        lifespan=_lifespan,
    )

    register_error_handlers(app)
    app.include_router(router, tags=["assessment"])

    # Liveness probe; also advertises the personas /assess accepts.
    @app.get("/health", include_in_schema=False)
    async def health() -> dict[str, Any]:
        return {
            "status": "ok",
            "service": SERVICE_NAME,
            "version": SERVICE_VERSION,
            "personas": [persona.value for persona in Persona],
        }

    return app
