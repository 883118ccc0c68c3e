# backend/thumbnail_api/enums.py
"""
Application Enums - Centralized enum definitions.

Kept separate from constants.py and the models package so that both can
import them without creating circular dependencies.
"""

from enum import Enum


# =============================================================================
# IMAGE FORMATS
# =============================================================================


class DetectedFormat(str, Enum):
    """Container format classified from leading magic bytes."""

    JPEG = "JPEG"
    PNG = "PNG"
    GIF = "GIF"
    BMP = "BMP"
    WEBP = "WEBP"
    TIFF = "TIFF"
    UNKNOWN = "UNKNOWN"

    @property
    def pil_format(self) -> str:
        """Pillow encoder name for this container (identical to the value)."""
        if self is DetectedFormat.UNKNOWN:
            raise ValueError("UNKNOWN has no encoder")
        return self.value

    @classmethod
    def get_known_formats(cls) -> list["DetectedFormat"]:
        return [cls.JPEG, cls.PNG, cls.GIF, cls.BMP, cls.WEBP, cls.TIFF]


# =============================================================================
# THUMBNAIL SYSTEM
# =============================================================================


class PresetSize(str, Enum):
    """Named thumbnail presets. Must be: small, medium, large."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class ResizeMode(str, Enum):
    """How a source raster is mapped onto the exact target canvas."""

    STRETCH = "stretch"  # non-uniform scale straight to width x height
    FIT = "fit"  # aspect-preserving scale, centred on a padded canvas


# =============================================================================
# LOGGING SYSTEM
# =============================================================================


class LogLevel(str, Enum):
    """Log level constants for centralized logging system."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogSource(str, Enum):
    """Log source constants for identifying log origins."""

    API = "api"
    SYSTEM = "system"
    PIPELINE = "pipeline"
    MIDDLEWARE = "middleware"


class LogEmoji(str, Enum):
    """Type-safe emoji constants for log messages."""

    # Request/Response emojis
    REQUEST = "📥"
    RESPONSE = "📤"

    # Status emojis
    SUCCESS = "✅"
    FAILED = "❌"
    ERROR = "❌"
    WARNING = "⚠️"
    INFO = "ℹ️"
    DEBUG = "🐞"
    SLOW = "🐌"

    # Work emojis
    PROCESSING = "🔄"
    THUMBNAIL = "🖼️"
    VALIDATION = "🔍"

    # Lifecycle emojis
    STARTUP = "🚀"
    SHUTDOWN = "🛑"


class LoggerName(str, Enum):
    """Logger name constants for categorizing log entries."""

    # API/Request loggers
    REQUEST_LOGGER = "request_logger"
    ERROR_HANDLER = "error_handler"
    MIDDLEWARE = "middleware"
    API = "api"

    # Pipeline loggers
    THUMBNAIL_PIPELINE = "thumbnail_pipeline"

    # Infrastructure loggers
    PROCESSING_POOL = "processing_pool"
    SYSTEM = "system"
