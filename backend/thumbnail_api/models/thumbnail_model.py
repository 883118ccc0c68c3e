# backend/thumbnail_api/models/thumbnail_model.py
"""
Thumbnail Intake Domain Models

Value types flowing through the intake pipeline, plus the response models
serialized by the HTTP layer. All models are immutable once created.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..enums import DetectedFormat


class RawUpload(BaseModel):
    """One uploaded file as handed over by the HTTP layer."""

    content: bytes = Field(..., repr=False, description="Raw upload bytes")
    content_type: Optional[str] = Field(
        None, description="Caller-declared MIME type (not trusted for detection)"
    )
    filename: Optional[str] = Field(
        None, description="Original filename, advisory only"
    )

    model_config = ConfigDict(frozen=True)

    @property
    def size_bytes(self) -> int:
        return len(self.content)


class NativeDimensions(BaseModel):
    """Pixel dimensions of the decoded source image."""

    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)

    model_config = ConfigDict(frozen=True)


class TargetDimension(BaseModel):
    """A requested output size with its display label."""

    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)
    label: str = Field(..., description="Preset name or literal WIDTHxHEIGHT")

    model_config = ConfigDict(frozen=True)


class ThumbnailResult(BaseModel):
    """Metadata (and encoded bytes) for one generated thumbnail."""

    size: str = Field(..., description="Label of the target dimension")
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)
    format: DetectedFormat = Field(..., description="Output container format")
    file_size_bytes: int = Field(..., ge=0)
    timestamp: datetime = Field(..., description="Generation time (UTC)")
    processing_time_ms: float = Field(
        ..., ge=0, description="Resize + encode time for this target only"
    )
    # Never serialized; defaulted so response_model re-validation accepts the dump
    data: bytes = Field(
        default=b"", exclude=True, repr=False, description="Encoded thumbnail bytes"
    )

    model_config = ConfigDict(frozen=True)


class IntakeResult(BaseModel):
    """Terminal artifact returned for one processed upload."""

    original_filename: Optional[str] = None
    original_format: DetectedFormat
    original_width: int = Field(..., gt=0)
    original_height: int = Field(..., gt=0)
    original_file_size_bytes: int = Field(..., ge=0)
    thumbnails: List[ThumbnailResult] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class ErrorResponse(BaseModel):
    """Structured error body returned for every failed request."""

    status: int
    error: str
    message: str
    path: str
    timestamp: str
    trace_id: str


class ApiInfo(BaseModel):
    """Response model for the service information endpoint."""

    name: str
    version: str
    description: str
    main_endpoint: str
