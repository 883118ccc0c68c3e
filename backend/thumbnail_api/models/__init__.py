# backend/thumbnail_api/models/__init__.py
from .thumbnail_model import (
    ApiInfo,
    ErrorResponse,
    IntakeResult,
    NativeDimensions,
    RawUpload,
    TargetDimension,
    ThumbnailResult,
)

__all__ = [
    "ApiInfo",
    "ErrorResponse",
    "IntakeResult",
    "NativeDimensions",
    "RawUpload",
    "TargetDimension",
    "ThumbnailResult",
]
