"""FastAPI application factory and configuration.

This module provides the main FastAPI application with CORS configuration,
lifespan management, and route registration.

Example:
    from feature_tour.api import create_app

    app = create_app()

    # Run with uvicorn:
    # uvicorn feature_tour.api.app:app --reload
"""

from collections.abc import AsyncGenerator, Sequence
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from feature_tour.api.dependencies import AppState
from feature_tour.api.routes import (
    health_router,
    paginator_router,
    topics_router,
    websocket_router,
)
from feature_tour.core.config import Settings
from feature_tour.core.logging import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Manage application lifecycle - startup and shutdown."""
    logger.info("api_starting")

    settings: Settings = app.state.settings
    app_state: AppState = app.state.app_state

    await app_state.initialize(
        catalog_backend=settings.catalog_backend,
        initial_topic_id=settings.initial_topic_id,
    )

    logger.info("api_started", version=settings.app_version)

    yield

    logger.info("api_shutting_down")
    await app_state.shutdown()
    logger.info("api_shutdown_complete")


def create_app(
    title: str = "Feature Tour API",
    description: str = "Browse and page through the feature tour topics",
    cors_origins: Sequence[str] | None = None,
    settings: Settings | None = None,
    app_state: AppState | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        title: API title for OpenAPI docs.
        description: API description for OpenAPI docs.
        cors_origins: Allowed CORS origins. Defaults to the settings value.
        settings: Settings to use. Defaults to ``Settings.from_env()``.
        app_state: State container to use. A fresh one is created if omitted;
            pass an initialized container to skip catalog loading.

    Returns:
        Configured FastAPI application instance.
    """
    if settings is None:
        settings = Settings.from_env()
    if cors_origins is None:
        cors_origins = settings.cors_origins

    app = FastAPI(
        title=title,
        description=description,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.app_state = app_state if app_state is not None else AppState()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router)
    app.include_router(topics_router)
    app.include_router(paginator_router)
    app.include_router(websocket_router)

    logger.info(
        "app_configured",
        title=title,
        cors_origins=list(cors_origins),
    )

    return app


# Default app instance for uvicorn
app = create_app()
