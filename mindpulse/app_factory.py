"""
Application Factory for the MindPulse API.

Creates the FastAPI application, wires the service container during the
lifespan and mounts the versioned API router.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mindpulse.core.config.settings import Settings, get_settings
from mindpulse.infrastructure.di.container import ServiceContainer, build_container
from mindpulse.presentation.api.v1.api_router import api_v1_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(fastapi_app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Manage the service container for the application's lifetime.

    A container placed on app.state before startup is used as-is; otherwise
    one is built from the application's settings.
    """
    logger.info("LIFESPAN_START: Entered lifespan context manager.")
    container: ServiceContainer | None = getattr(fastapi_app.state, "container", None)
    if container is None:
        container = build_container(fastapi_app.state.settings)
        fastapi_app.state.container = container

    try:
        await container.startup()
    except Exception as e:
        logger.critical(f"LIFESPAN_STARTUP_FAILURE: {e}", exc_info=True)
        raise RuntimeError(f"Critical error in application lifespan: {e}") from e

    logger.info("LIFESPAN_STARTUP_COMPLETE: Service container ready.")
    try:
        yield
    finally:
        logger.info("LIFESPAN_SHUTDOWN: Draining uploads and releasing resources.")
        await container.shutdown()


def create_application(
    settings: Settings | None = None,
    container: ServiceContainer | None = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Optional settings; the cached process settings otherwise
        container: Optional prebuilt service container, used by tests

    Returns:
        Configured FastAPI application
    """
    current_settings = settings or (container.settings if container else get_settings())

    app_instance = FastAPI(
        title=current_settings.PROJECT_NAME,
        version=current_settings.VERSION,
        openapi_url=f"{current_settings.API_V1_STR}/openapi.json",
        lifespan=lifespan,
    )
    app_instance.state.settings = current_settings
    app_instance.state.container = container

    if current_settings.BACKEND_CORS_ORIGINS:
        app_instance.add_middleware(
            CORSMiddleware,
            allow_origins=current_settings.BACKEND_CORS_ORIGINS,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app_instance.include_router(api_v1_router, prefix=current_settings.API_V1_STR)
    logger.info(f"Application created for environment {current_settings.ENVIRONMENT}")
    return app_instance
