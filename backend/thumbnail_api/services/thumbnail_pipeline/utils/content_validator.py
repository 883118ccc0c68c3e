# backend/thumbnail_api/services/thumbnail_pipeline/utils/content_validator.py
"""
Upload Content Validation

Cheap, bounded checks run before any decode. Rules are applied in a fixed
order and the first violation is the one reported.
"""

from typing import Optional

from ....constants import MIN_SIGNATURE_BYTES
from ....enums import DetectedFormat, LogEmoji, LoggerName, LogSource
from ....exceptions import (
    CorruptContentError,
    EmptyInputError,
    SizeLimitExceededError,
    UnsupportedFormatError,
)
from ....models.thumbnail_model import RawUpload
from ....services.logger import get_service_logger
from ....utils.log_utils import sanitize_for_log
from .format_detector import signature_format
from .intake_config import IntakeConfig

logger = get_service_logger(
    LoggerName.THUMBNAIL_PIPELINE, LogSource.PIPELINE, default_emoji=LogEmoji.VALIDATION
)


class ContentValidator:
    """
    Validator for uploaded image files.

    Order of checks:
    1. non-empty buffer
    2. size ceiling
    3. declared MIME type allowlist
    4. magic-byte signature
    """

    def __init__(self, config: Optional[IntakeConfig] = None):
        self.config = config or IntakeConfig()

    def validate(self, upload: RawUpload) -> None:
        """
        Validate an uploaded image.

        Args:
            upload: The upload to check

        Raises:
            EmptyInputError: No bytes supplied
            SizeLimitExceededError: Buffer larger than the configured ceiling
            UnsupportedFormatError: Declared content-type not allowed
            CorruptContentError: Bytes carry no known image signature
        """
        self._validate_not_empty(upload)
        self._validate_file_size(upload)
        self._validate_mime_type(upload)
        self._validate_signature(upload)

        logger.debug(
            f"Image validation passed for file: {sanitize_for_log(upload.filename)}"
        )

    def _validate_not_empty(self, upload: RawUpload) -> None:
        if not upload.content:
            logger.warning("Rejected empty upload")
            raise EmptyInputError()

    def _validate_file_size(self, upload: RawUpload) -> None:
        size = len(upload.content)
        if size > self.config.max_file_size_bytes:
            logger.warning(
                "Rejected oversized upload",
                extra_context={
                    "size_bytes": size,
                    "limit_bytes": self.config.max_file_size_bytes,
                },
            )
            raise SizeLimitExceededError(size, self.config.max_file_size_bytes)

    def _validate_mime_type(self, upload: RawUpload) -> None:
        declared = upload.content_type
        normalized = declared.strip().lower() if declared else None

        if normalized not in self.config.supported_mime_types:
            logger.warning(
                f"Rejected unsupported content type: {sanitize_for_log(declared)}"
            )
            raise UnsupportedFormatError(declared, self.config.supported_mime_types)

    def _validate_signature(self, upload: RawUpload) -> None:
        # Checked independently of FormatDetector.detect
        if len(upload.content) < MIN_SIGNATURE_BYTES:
            logger.warning("Rejected upload too small to carry an image signature")
            raise CorruptContentError("File is too small to be a valid image")

        if signature_format(upload.content) is DetectedFormat.UNKNOWN:
            logger.warning("Rejected upload with unrecognized signature")
            raise CorruptContentError()
