# backend/thumbnail_api/dependencies/pipelines.py
"""
Pipeline dependencies: the shared IntakePipeline and the bounded
ProcessingPool it runs on.
"""

from ..config import settings
from ..services.processing_pool import ProcessingPool
from ..services.thumbnail_pipeline import IntakePipeline, create_intake_pipeline
from .registry import get_registry

INTAKE_PIPELINE = "intake_pipeline"
PROCESSING_POOL = "processing_pool"

_registry = get_registry()

_registry.register_factory(INTAKE_PIPELINE, lambda: create_intake_pipeline(settings))
_registry.register_factory(
    PROCESSING_POOL,
    lambda: ProcessingPool(max_workers=settings.processing_workers),
    teardown=lambda pool: pool.shutdown(),
)


def get_intake_pipeline() -> IntakePipeline:
    """Get IntakePipeline singleton configured from application settings."""
    return _registry.get_service(INTAKE_PIPELINE)


def get_processing_pool() -> ProcessingPool:
    """Get the ProcessingPool singleton, starting it on first use."""
    return _registry.get_service(PROCESSING_POOL)


def shutdown_processing_pool() -> None:
    """Shut down the pool if it was started; a later request starts a new one."""
    _registry.shutdown_service(PROCESSING_POOL)
