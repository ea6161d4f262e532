"""
Storage Router.

Applies a user's data-sharing preference to a finished assessment: the full
record is always persisted locally first, then the full or anonymized record
may be uploaded in the background.
"""

import asyncio
import inspect
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any
from uuid import UUID

from mindpulse.core.utils.logging import get_logger
from mindpulse.domain.entities.assessment import Assessment
from mindpulse.domain.entities.user import DataStoragePreference, User
from mindpulse.domain.exceptions import PersistenceError, SyncError
from mindpulse.domain.interfaces.remote_sync import IRemoteSync
from mindpulse.domain.repositories.assessment_repository import IAssessmentRepository
from mindpulse.domain.utils.datetime_utils import now_utc

logger = get_logger(__name__)


class UploadKind(str, Enum):
    """Kind of remote upload dispatched for an assessment."""

    FULL = "full"
    ANONYMIZED = "anonymized"


@dataclass(frozen=True)
class SyncOutcome:
    """Diagnostic record of one finished background upload."""

    assessment_id: UUID
    kind: UploadKind
    success: bool
    error: str | None = None
    status_code: int | None = None
    completed_at: datetime = field(default_factory=now_utc)


SyncListener = Callable[[SyncOutcome], Any]


class StorageRouter:
    """
    Routes assessments to the local store and the remote sync service.

    Remote uploads are fire-and-forget: they are not awaited by save(), never
    retried, and their failures only reach the log and the sync listener.
    Delivery of a failed upload is not attempted again.
    """

    def __init__(
        self,
        repository: IAssessmentRepository,
        remote_sync: IRemoteSync,
        sync_listener: SyncListener | None = None,
    ):
        self.repository = repository
        self.remote_sync = remote_sync
        self.sync_listener = sync_listener
        # Strong references keep detached tasks alive until they finish
        self._background_tasks: set[asyncio.Task] = set()

    @property
    def pending_uploads(self) -> int:
        return len(self._background_tasks)

    @staticmethod
    def _resolve_preference(preference: DataStoragePreference | User | str) -> DataStoragePreference:
        if isinstance(preference, User):
            return preference.data_storage_preference
        try:
            return DataStoragePreference(preference)
        except ValueError:
            logger.warning(f"Unknown storage preference {preference!r}, keeping data local")
            return DataStoragePreference.LOCAL

    async def save(self, assessment: Assessment, preference: DataStoragePreference | User | str) -> None:
        """
        Persist an assessment and dispatch its remote upload.

        Args:
            assessment: The finished assessment
            preference: The owning user's data-sharing policy, or the user itself

        Raises:
            PersistenceError: If the local save fails; no upload is dispatched then
        """
        preference = self._resolve_preference(preference)

        try:
            await self.repository.save(assessment)
        except PersistenceError as e:
            logger.error(
                f"Local save of assessment {assessment.id} failed: {e!s}",
                extra={"error_details": e.to_log_dict()},
            )
            raise

        if preference is DataStoragePreference.SERVER:
            self._dispatch(assessment.id, UploadKind.FULL, self.remote_sync.upload_full(assessment))
        elif preference is DataStoragePreference.HYBRID:
            self._dispatch(
                assessment.id,
                UploadKind.ANONYMIZED,
                self.remote_sync.upload_anonymized(assessment.anonymized()),
            )
        else:
            logger.debug(f"Assessment {assessment.id} kept local only")

    async def fetch_history(self, user_id: UUID) -> list[Assessment]:
        """List a user's assessments newest first; a store failure yields an empty list."""
        try:
            assessments = await self.repository.list_by_user(user_id)
        except PersistenceError as e:
            logger.warning(f"Fetching assessments for user {user_id} failed: {e!s}")
            return []
        return sorted(assessments, key=lambda a: a.timestamp, reverse=True)

    async def delete(self, assessment_id: UUID) -> bool:
        """Delete an assessment; a store failure is logged and treated as a no-op."""
        try:
            return await self.repository.delete_by_id(assessment_id)
        except PersistenceError as e:
            logger.warning(f"Deleting assessment {assessment_id} failed: {e!s}")
            return False

    async def drain(self) -> None:
        """Wait for in-flight uploads to finish. Does not cancel them."""
        while self._background_tasks:
            await asyncio.gather(*list(self._background_tasks), return_exceptions=True)

    def _dispatch(self, assessment_id: UUID, kind: UploadKind, upload: Awaitable[None]) -> None:
        task = asyncio.create_task(self._run_upload(assessment_id, kind, upload))
        self._background_tasks.add(task)
        task.add_done_callback(self._background_tasks.discard)

    async def _run_upload(self, assessment_id: UUID, kind: UploadKind, upload: Awaitable[None]) -> None:
        try:
            await upload
        except SyncError as e:
            logger.error(
                f"{kind.value.capitalize()} upload of assessment {assessment_id} failed: {e!s}",
                extra={"error_details": e.to_log_dict()},
            )
            outcome = SyncOutcome(assessment_id, kind, success=False, error=str(e), status_code=e.status_code)
        except Exception as e:
            logger.exception(f"Unexpected error during {kind.value} upload of assessment {assessment_id}")
            outcome = SyncOutcome(assessment_id, kind, success=False, error=f"{type(e).__name__}: {e!s}")
        else:
            logger.info(f"{kind.value.capitalize()} upload of assessment {assessment_id} succeeded")
            outcome = SyncOutcome(assessment_id, kind, success=True)

        await self._notify(outcome)

    async def _notify(self, outcome: SyncOutcome) -> None:
        if self.sync_listener is None:
            return
        try:
            result = self.sync_listener(outcome)
            if inspect.isawaitable(result):
                await result
        except Exception as e:
            logger.error(f"Sync listener error: {e!s}")
