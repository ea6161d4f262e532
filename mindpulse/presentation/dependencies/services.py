"""
FastAPI dependencies resolving services from the application container.
"""

from fastapi import Request

from mindpulse.application.services.assessment_engine import AssessmentEngine
from mindpulse.application.services.storage_router import StorageRouter
from mindpulse.core.config.settings import Settings
from mindpulse.infrastructure.di.container import ServiceContainer


def get_container(request: Request) -> ServiceContainer:
    container = getattr(request.app.state, "container", None)
    if container is None:
        raise RuntimeError("Service container not initialized. Application lifespan did not run.")
    return container


def get_assessment_engine(request: Request) -> AssessmentEngine:
    return get_container(request).engine


def get_storage_router(request: Request) -> StorageRouter:
    return get_container(request).router


def get_app_settings(request: Request) -> Settings:
    return get_container(request).settings
