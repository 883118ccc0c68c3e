# backend/thumbnail_api/exceptions.py
"""
Custom exceptions for the Thumbnail API.

Centralized location for all custom exception classes to avoid
duplicating exception definitions across modules.
"""

# Each exception type represents one distinct failure kind of the intake
# pipeline. Status-code mapping lives in middleware.error_handler, never here.

from typing import Iterable, Optional


class ThumbnailApiError(Exception):
    """Base exception for all Thumbnail API specific errors."""

    pass


class IntakeError(ThumbnailApiError):
    """Base class for every failure the intake pipeline can surface."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


# =============================================================================
# EXPECTED INPUT REJECTIONS
# =============================================================================


class IntakeValidationError(IntakeError):
    """The caller's input was rejected by a validation or parsing rule."""

    pass


class EmptyInputError(IntakeValidationError):
    """No bytes were supplied."""

    def __init__(self):
        super().__init__("Uploaded file is empty or null")


class SizeLimitExceededError(IntakeValidationError):
    """Upload buffer exceeds the size ceiling."""

    def __init__(self, actual_bytes: int, limit_bytes: int):
        self.actual_bytes = actual_bytes
        self.limit_bytes = limit_bytes
        super().__init__(
            f"File size {actual_bytes} bytes exceeds maximum allowed size "
            f"of {limit_bytes} bytes"
        )


class UnsupportedFormatError(IntakeValidationError):
    """Declared content-type is not in the MIME allowlist."""

    def __init__(self, declared_type: Optional[str], supported_types: Iterable[str]):
        self.declared_type = declared_type
        self.supported_types = sorted(supported_types)
        super().__init__(
            f"Unsupported image format: {declared_type}. "
            f"Supported formats: {', '.join(self.supported_types)}"
        )


class CorruptContentError(IntakeValidationError):
    """Bytes do not carry any known image signature."""

    def __init__(self, reason: str = "File is not a valid image or is corrupted"):
        self.reason = reason
        super().__init__(reason)


class TooManySizesError(IntakeValidationError):
    """More target sizes were requested than the configured maximum."""

    def __init__(self, requested: int, limit: int):
        self.requested = requested
        self.limit = limit
        super().__init__(
            f"Too many thumbnail sizes requested: {requested}. Maximum allowed: {limit}"
        )


class MalformedDimensionError(IntakeValidationError):
    """Size token is neither a preset nor a WIDTHxHEIGHT literal."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(
            f"Invalid dimension format: '{token}'. "
            "Expected format: WIDTHxHEIGHT (e.g., 500x500)"
        )


class NonNumericDimensionError(IntakeValidationError):
    """WIDTHxHEIGHT token whose parts cannot be read as integers."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Dimension values must be valid integers: {token}")


class DimensionOutOfRangeError(IntakeValidationError):
    """Width or height outside the inclusive [min, max] range."""

    def __init__(self, dimension: str, value: int, minimum: int, maximum: int):
        self.dimension = dimension
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"{dimension.capitalize()} {value} is outside valid range "
            f"[{minimum}, {maximum}]"
        )


class EmptyDimensionTokenError(IntakeValidationError):
    """A comma-separated size entry was empty or whitespace-only."""

    def __init__(self):
        super().__init__("Empty dimension specification")


# =============================================================================
# CODEC / UNEXPECTED FAILURES
# =============================================================================


class IntakeProcessingError(IntakeError):
    """Input passed validation but the image could not be processed."""

    pass


class DecodeFailureError(IntakeProcessingError):
    """Bytes match a signature but the codec cannot decode a raster."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Unable to read image data: {reason}")


class EncodeFailureError(IntakeProcessingError):
    """Resized raster could not be re-encoded in the source format."""

    def __init__(self, target_label: str, reason: str):
        self.target_label = target_label
        self.reason = reason
        super().__init__(f"Failed to encode thumbnail '{target_label}': {reason}")


class InternalFailureError(IntakeProcessingError):
    """Catch-all for anything unanticipated while handling an upload."""

    def __init__(self, operation: str, cause: Optional[BaseException] = None):
        self.operation = operation
        self.cause = cause
        super().__init__(f"Failed to {operation}")
