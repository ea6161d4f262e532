"""
Shared fixtures for the MindPulse test suite.
"""

from uuid import UUID, uuid4

import pytest

from mindpulse.application.services.assessment_engine import AssessmentEngine
from mindpulse.application.services.storage_router import StorageRouter, SyncOutcome
from mindpulse.core.config.settings import Settings
from mindpulse.domain.entities.assessment import Assessment
from mindpulse.domain.exceptions import SyncError
from mindpulse.infrastructure.repositories.memory import InMemoryAssessmentRepository
from mindpulse.tests.helpers.fakes import RecordingRemoteSync


@pytest.fixture
def user_id() -> UUID:
    """A fresh user id."""
    return uuid4()


@pytest.fixture
def test_settings() -> Settings:
    """Settings isolated from the environment and any .env file."""
    return Settings(
        _env_file=None,
        ENVIRONMENT="test",
        DATABASE_URL="sqlite+aiosqlite:///:memory:",
        REMOTE_SYNC_BASE_URL="https://sync.test",
    )


@pytest.fixture
def assessment_engine() -> AssessmentEngine:
    """Engine with the keyword sentiment fallback."""
    return AssessmentEngine()


@pytest.fixture
def memory_repository() -> InMemoryAssessmentRepository:
    return InMemoryAssessmentRepository()


@pytest.fixture
def remote_sync() -> RecordingRemoteSync:
    return RecordingRemoteSync()


@pytest.fixture
def sync_outcomes() -> list[SyncOutcome]:
    """Collected background upload outcomes."""
    return []


@pytest.fixture
def storage_router(memory_repository, remote_sync, sync_outcomes) -> StorageRouter:
    """Router over the in-memory store and the recording sync double."""
    return StorageRouter(memory_repository, remote_sync, sync_listener=sync_outcomes.append)


@pytest.fixture
def make_assessment(assessment_engine, user_id):
    """Factory producing assessments, by default for the fixture user."""

    def _make(text: str = "今天有点压力", input_type: str = "text", owner: UUID | None = None) -> Assessment:
        return assessment_engine.assess(text, input_type, owner or user_id)

    return _make


@pytest.fixture
def sync_error() -> SyncError:
    return SyncError("Remote service rejected upload", endpoint="/api/assessments", status_code=500)
