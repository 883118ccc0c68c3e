# backend/thumbnail_api/services/thumbnail_pipeline/__init__.py
"""
Thumbnail Pipeline Module

Upload intake core: format detection, content validation, size parsing and
thumbnail generation behind a single IntakePipeline.
"""

from .generators import ThumbnailGenerator
from .intake_pipeline import IntakePipeline, create_intake_pipeline
from .utils import (
    ContentValidator,
    DimensionParser,
    FormatDetector,
    IntakeConfig,
    signature_format,
)

__all__ = [
    # Main pipeline
    "IntakePipeline",
    "create_intake_pipeline",
    # Components
    "ContentValidator",
    "DimensionParser",
    "FormatDetector",
    "ThumbnailGenerator",
    # Config / helpers
    "IntakeConfig",
    "signature_format",
]
