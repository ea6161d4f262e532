"""
HTTP implementation of the remote sync collaborator.

Posts assessments as JSON to the remote assessment service using httpx.
"""

import logging
from collections.abc import Mapping
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError

from mindpulse.core.config.settings import Settings
from mindpulse.domain.entities.assessment import Assessment
from mindpulse.domain.exceptions import SyncError
from mindpulse.domain.interfaces.remote_sync import IRemoteSync
from mindpulse.infrastructure.integrations.remote_sync.schemas import (
    AnonymizedAssessmentPayload,
    FullAssessmentPayload,
)

logger = logging.getLogger(__name__)

FULL_UPLOAD_PATH = "/api/assessments"
ANONYMIZED_UPLOAD_PATH = "/api/assessments/anonymous"


class HttpRemoteSync(IRemoteSync):
    """
    Remote sync over HTTP.

    Every failure, whether serialization, transport or a non-2xx status,
    is raised as SyncError. Nothing is retried here.
    """

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(timeout_seconds, connect=min(timeout_seconds, 5.0)),
            follow_redirects=False,
            headers={"Content-Type": "application/json", "User-Agent": "MindPulse-Sync/1.0"},
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "HttpRemoteSync":
        return cls(settings.REMOTE_SYNC_BASE_URL, timeout_seconds=settings.REMOTE_SYNC_TIMEOUT_SECONDS)

    async def aclose(self) -> None:
        """Close the underlying client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    async def upload_full(self, assessment: Assessment) -> None:
        body = self._serialize(FullAssessmentPayload, assessment.to_wire(), FULL_UPLOAD_PATH)
        await self._post(FULL_UPLOAD_PATH, body)

    async def upload_anonymized(self, payload: Mapping[str, float | str]) -> None:
        body = self._serialize(AnonymizedAssessmentPayload, dict(payload), ANONYMIZED_UPLOAD_PATH)
        await self._post(ANONYMIZED_UPLOAD_PATH, body)

    def _serialize(self, schema: type[BaseModel], data: dict[str, Any], path: str) -> dict[str, Any]:
        try:
            return schema.model_validate(data).model_dump(mode="json", by_alias=True)
        except ValidationError as e:
            raise SyncError(
                f"Invalid payload for {path}: {e.error_count()} validation errors",
                endpoint=path,
                original_exception=e,
            ) from e

    async def _post(self, path: str, body: dict[str, Any]) -> None:
        try:
            response = await self._client.post(path, json=body)
        except httpx.TimeoutException as e:
            raise SyncError("Request timeout", endpoint=path, original_exception=e) from e
        except httpx.HTTPError as e:
            raise SyncError(f"Transport error: {e!s}", endpoint=path, original_exception=e) from e

        if not 200 <= response.status_code < 300:
            raise SyncError("Remote service rejected upload", endpoint=path, status_code=response.status_code)

        logger.debug(f"POST {path} -> {response.status_code}")
