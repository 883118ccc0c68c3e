# backend/thumbnail_api/dependencies/type_annotations.py
"""
Type annotations for FastAPI dependency injection.
"""

from typing import Annotated

from fastapi import Depends

from ..services.processing_pool import ProcessingPool
from ..services.thumbnail_pipeline import IntakePipeline
from .pipelines import get_intake_pipeline, get_processing_pool

IntakePipelineDep = Annotated[IntakePipeline, Depends(get_intake_pipeline)]
ProcessingPoolDep = Annotated[ProcessingPool, Depends(get_processing_pool)]
