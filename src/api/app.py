"""
FastAPI application factory.

``create_app()`` assembles the application with CORS, error handlers,
the generation routes, and the health endpoint. The module-level ``app``
instance allows ``uvicorn src.api.app:app --reload``; ``run()`` serves it on
``APP_HOST``:``APP_PORT``.
"""

from contextlib import asynccontextmanager
from datetime import UTC, datetime

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.middleware.error_handler import register_error_handlers
from src.api.routes import generation
from src.core.config import get_settings
from src.core.logging import configure_logging
from src.core.models import HealthResponse
from src.services.gateway import AIGateway, create_gateway


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and build the AI gateway once per process."""
    settings = get_settings()
    configure_logging(settings.log_level)
    if getattr(app.state, "gateway", None) is None:
        app.state.gateway = create_gateway(settings)
    yield


def create_app(gateway: AIGateway | None = None) -> FastAPI:
    """Build and return a fully configured FastAPI application.

    Args:
        gateway: Pre-built gateway to use instead of constructing one at startup.
    """
    settings = get_settings()

    app = FastAPI(
        title="SoundSketch",
        description="Record your voice, get an image prompt, and generate art from it.",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.gateway = gateway

    # -- CORS --
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -- Error handlers --
    register_error_handlers(app)

    @app.get("/health", response_model=HealthResponse, tags=["system"])
    async def health() -> HealthResponse:
        return HealthResponse(timestamp=datetime.now(UTC))

    # -- REST routes --
    app.include_router(generation.router)

    return app


app = create_app()


def run() -> None:
    """Serve the API with uvicorn on the configured host and port."""
    settings = get_settings()
    uvicorn.run("src.api.app:app", host=settings.app_host, port=settings.app_port)


if __name__ == "__main__":
    run()
