"""
Assessment API Endpoints Module.

Runs the assessment pipeline on submitted text, stores the result under the
user's storage preference, and exposes per-user history and deletion.
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi.concurrency import run_in_threadpool

from mindpulse.application.services.assessment_engine import AssessmentEngine
from mindpulse.application.services.storage_router import StorageRouter
from mindpulse.core.config.settings import Settings
from mindpulse.domain.exceptions import PersistenceError
from mindpulse.presentation.api.schemas.assessment import (
    AssessmentCreateRequest,
    AssessmentListResponse,
    AssessmentResponse,
)
from mindpulse.presentation.dependencies.services import (
    get_app_settings,
    get_assessment_engine,
    get_storage_router,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/assessments",
    response_model=AssessmentResponse,
    summary="Assess a text and store the result",
    status_code=status.HTTP_201_CREATED,
)
async def create_assessment(
    payload: AssessmentCreateRequest,
    engine: AssessmentEngine = Depends(get_assessment_engine),
    storage: StorageRouter = Depends(get_storage_router),
    settings: Settings = Depends(get_app_settings),
) -> AssessmentResponse:
    """
    Assess a text and save it.

    Remote upload, when the preference calls for one, happens in the
    background and never affects this response.

    Raises:
        HTTPException: 503 if the local save fails
    """
    assessment = await run_in_threadpool(engine.assess, payload.text, payload.input_type, payload.user_id)
    preference = payload.storage_preference or settings.DEFAULT_STORAGE_PREFERENCE

    try:
        await storage.save(assessment, preference)
    except PersistenceError as e:
        logger.error(f"Assessment {assessment.id} not stored: {e}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Local assessment store is unavailable",
        ) from e

    return AssessmentResponse.from_entity(assessment)


@router.get(
    "/users/{user_id}/assessments",
    response_model=AssessmentListResponse,
    summary="List a user's assessments, newest first",
)
async def list_user_assessments(
    user_id: UUID,
    storage: StorageRouter = Depends(get_storage_router),
) -> AssessmentListResponse:
    history = await storage.fetch_history(user_id)
    return AssessmentListResponse(
        user_id=user_id,
        assessments=[AssessmentResponse.from_entity(a) for a in history],
    )


@router.delete(
    "/assessments/{assessment_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a stored assessment",
)
async def delete_assessment(
    assessment_id: UUID,
    storage: StorageRouter = Depends(get_storage_router),
) -> Response:
    if not await storage.delete(assessment_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Assessment {assessment_id} not found",
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
