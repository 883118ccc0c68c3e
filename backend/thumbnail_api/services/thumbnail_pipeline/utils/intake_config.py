# backend/thumbnail_api/services/thumbnail_pipeline/utils/intake_config.py
"""
Intake Pipeline Configuration

Immutable limits shared by every pipeline component. Built once at startup
from Settings and passed into each component; defaults mirror constants.py.
"""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Tuple

from ....constants import (
    DEFAULT_THUMBNAIL_QUALITY,
    MAX_DIMENSION,
    MAX_FILE_SIZE_BYTES,
    MAX_THUMBNAIL_SIZES,
    MIN_DIMENSION,
    PRESET_DIMENSIONS,
    SUPPORTED_MIME_TYPES,
)
from ....enums import PresetSize, ResizeMode


@dataclass(frozen=True)
class IntakeConfig:
    """Process-wide immutable configuration for the intake pipeline."""

    max_file_size_bytes: int = MAX_FILE_SIZE_BYTES
    supported_mime_types: FrozenSet[str] = SUPPORTED_MIME_TYPES
    min_dimension: int = MIN_DIMENSION
    max_dimension: int = MAX_DIMENSION
    max_thumbnail_sizes: int = MAX_THUMBNAIL_SIZES
    presets: Dict[PresetSize, Tuple[int, int]] = field(
        default_factory=lambda: dict(PRESET_DIMENSIONS)
    )
    thumbnail_quality: int = DEFAULT_THUMBNAIL_QUALITY
    resize_mode: ResizeMode = ResizeMode.STRETCH

    @classmethod
    def from_settings(cls, settings) -> "IntakeConfig":
        """Build the pipeline configuration from application Settings."""
        return cls(
            max_file_size_bytes=settings.max_file_size_bytes,
            min_dimension=settings.min_dimension,
            max_dimension=settings.max_dimension,
            max_thumbnail_sizes=settings.max_thumbnail_sizes,
            thumbnail_quality=settings.thumbnail_quality,
            resize_mode=settings.resize_mode,
        )
