# backend/thumbnail_api/constants.py
"""
Global Constants for the Thumbnail API

Centralized location for all application constants to avoid hardcoded values
throughout the codebase. These are process-wide defaults; runtime overrides
come from config.Settings.
"""

from typing import Dict, FrozenSet, Tuple

from .enums import PresetSize

# =============================================================================
# UPLOAD LIMITS
# =============================================================================

MAX_FILE_SIZE_BYTES = 20 * 1024 * 1024  # 20 MiB

SUPPORTED_MIME_TYPES: FrozenSet[str] = frozenset(
    {
        "image/jpeg",
        "image/png",
        "image/webp",
        "image/gif",
        "image/bmp",
        "image/tiff",
    }
)

# Shortest buffer that can carry any of the accepted signatures
MIN_SIGNATURE_BYTES = 4

# =============================================================================
# THUMBNAIL DIMENSIONS
# =============================================================================

PRESET_SMALL = 150
PRESET_MEDIUM = 300
PRESET_LARGE = 600

# Ordered: this is also the default output order
PRESET_DIMENSIONS: Dict[PresetSize, Tuple[int, int]] = {
    PresetSize.SMALL: (PRESET_SMALL, PRESET_SMALL),
    PresetSize.MEDIUM: (PRESET_MEDIUM, PRESET_MEDIUM),
    PresetSize.LARGE: (PRESET_LARGE, PRESET_LARGE),
}

MIN_DIMENSION = 16
MAX_DIMENSION = 2000
MAX_THUMBNAIL_SIZES = 10

SIZE_SPEC_SEPARATOR = ","
CUSTOM_DIMENSION_SEPARATOR = "x"

# =============================================================================
# ENCODING
# =============================================================================

# Image quality settings (1-95), used by lossy encoders only
DEFAULT_THUMBNAIL_QUALITY = 85
MIN_THUMBNAIL_QUALITY = 1
MAX_THUMBNAIL_QUALITY = 95

# Canvas fill used by ResizeMode.FIT
FIT_BACKGROUND_RGB = (255, 255, 255)

# =============================================================================
# API
# =============================================================================

API_VERSION = "v1"
BASE_API_PATH = f"/api/{API_VERSION}"
THUMBNAILS_PATH = f"{BASE_API_PATH}/thumbnails"

SERVICE_NAME = "Thumbnail API Service"
SERVICE_VERSION = "1.0.0"
SERVICE_DESCRIPTION = "Generate image thumbnails at preset or custom dimensions"

# =============================================================================
# PROCESSING POOL
# =============================================================================

DEFAULT_PROCESSING_WORKERS = 8
PROCESSING_THREAD_PREFIX = "thumbnail-processor"

# Requests slower than this are logged as warnings
SLOW_REQUEST_THRESHOLD_SECONDS = 5.0
