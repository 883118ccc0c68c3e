"""
Dependency Injection for the Thumbnail API.

Usage:
    from thumbnail_api.dependencies import IntakePipelineDep

    @router.post("")
    async def create_thumbnails(pipeline: IntakePipelineDep):
        ...
"""

from .pipelines import (
    get_intake_pipeline,
    get_processing_pool,
    shutdown_processing_pool,
)
from .registry import ServiceRegistry, get_registry
from .type_annotations import IntakePipelineDep, ProcessingPoolDep

__all__ = [
    "ServiceRegistry",
    "get_registry",
    "get_intake_pipeline",
    "get_processing_pool",
    "shutdown_processing_pool",
    "IntakePipelineDep",
    "ProcessingPoolDep",
]
