"""
Composition root.

Builds the assessment engine, local store, remote sync and storage router
from settings. Any collaborator can be passed in instead of built.
"""

import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncEngine

from mindpulse.application.services.assessment_engine import AssessmentEngine
from mindpulse.application.services.storage_router import StorageRouter, SyncListener
from mindpulse.core.config.settings import Settings
from mindpulse.domain.interfaces.remote_sync import IRemoteSync
from mindpulse.domain.repositories.assessment_repository import IAssessmentRepository
from mindpulse.domain.services.feature_extractor import FeatureExtractor
from mindpulse.domain.services.risk_classifier import RiskClassifier
from mindpulse.infrastructure.integrations.remote_sync import HttpRemoteSync
from mindpulse.infrastructure.ml.sentiment.factory import build_sentiment_scorer
from mindpulse.infrastructure.ml.sentiment.model_scorer import Classifier
from mindpulse.infrastructure.persistence.sqlalchemy.database import (
    create_engine_from_settings,
    create_session_factory,
    create_tables,
)
from mindpulse.infrastructure.persistence.sqlalchemy.repositories import SQLAlchemyAssessmentRepository

logger = logging.getLogger(__name__)


@dataclass
class ServiceContainer:
    """Wired application services and the resources they own."""

    settings: Settings
    engine: AssessmentEngine
    router: StorageRouter
    repository: IAssessmentRepository
    remote_sync: IRemoteSync
    db_engine: AsyncEngine | None = None

    async def startup(self) -> None:
        if self.db_engine is not None:
            await create_tables(self.db_engine)

    async def shutdown(self) -> None:
        """Let in-flight uploads finish, then release connections."""
        await self.router.drain()
        if isinstance(self.remote_sync, HttpRemoteSync):
            await self.remote_sync.aclose()
        if self.db_engine is not None:
            await self.db_engine.dispose()


def build_assessment_engine(settings: Settings, classifier: Classifier | None = None) -> AssessmentEngine:
    return AssessmentEngine(
        sentiment_scorer=build_sentiment_scorer(settings, classifier=classifier),
        feature_extractor=FeatureExtractor(intensifier_multiplier=settings.INTENSIFIER_MULTIPLIER),
        risk_classifier=RiskClassifier(sensitivity_factor=settings.SENSITIVITY_FACTOR),
    )


def build_container(
    settings: Settings,
    repository: IAssessmentRepository | None = None,
    remote_sync: IRemoteSync | None = None,
    classifier: Classifier | None = None,
    sync_listener: SyncListener | None = None,
) -> ServiceContainer:
    """
    Build the service container.

    Args:
        settings: Application settings
        repository: Optional store; a SQLAlchemy store on DATABASE_URL otherwise
        remote_sync: Optional transport; HTTP sync to REMOTE_SYNC_BASE_URL otherwise
        classifier: Optional preloaded sentiment classifier
        sync_listener: Optional sink for background upload outcomes

    Returns:
        ServiceContainer with all services wired
    """
    db_engine = None
    if repository is None:
        db_engine = create_engine_from_settings(settings)
        repository = SQLAlchemyAssessmentRepository(create_session_factory(db_engine))

    if remote_sync is None:
        remote_sync = HttpRemoteSync.from_settings(settings)

    router = StorageRouter(repository, remote_sync, sync_listener=sync_listener)

    logger.info(
        f"Built service container: repository={type(repository).__name__} "
        f"remote_sync={type(remote_sync).__name__}"
    )
    return ServiceContainer(
        settings=settings,
        engine=build_assessment_engine(settings, classifier=classifier),
        router=router,
        repository=repository,
        remote_sync=remote_sync,
        db_engine=db_engine,
    )
