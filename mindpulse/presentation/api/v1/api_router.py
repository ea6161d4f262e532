"""
Main API router for version 1 of the MindPulse API.

Aggregates all endpoint routers for this version.
"""

from fastapi import APIRouter

from mindpulse.presentation.api.v1.endpoints.assessments import router as assessments_router

api_v1_router = APIRouter()

api_v1_router.include_router(assessments_router, tags=["Assessments"])


@api_v1_router.get("/health", tags=["Health"])
async def health_check() -> dict[str, str]:
    """Check the health of the API."""
    return {"status": "ok"}
