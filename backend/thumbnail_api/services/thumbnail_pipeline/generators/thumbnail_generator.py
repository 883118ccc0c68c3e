# backend/thumbnail_api/services/thumbnail_pipeline/generators/thumbnail_generator.py
"""
Thumbnail Generator Component

Decodes a validated upload once and produces one thumbnail per requested
target dimension, re-encoded in the source container format.
"""

import io
from typing import List, Optional, Sequence

from PIL import Image

from ....enums import DetectedFormat, LogEmoji, LoggerName, LogSource, ResizeMode
from ....exceptions import DecodeFailureError, EncodeFailureError
from ....models.thumbnail_model import TargetDimension, ThumbnailResult
from ....services.logger import get_service_logger
from ....utils.time_utils import elapsed_ms, monotonic_start, utc_now
from ..utils.format_detector import DECODE_ERRORS
from ..utils.intake_config import IntakeConfig
from ..utils.thumbnail_utils import encode_image, fit_on_canvas, stretch_to_size

logger = get_service_logger(
    LoggerName.THUMBNAIL_PIPELINE, LogSource.PIPELINE, default_emoji=LogEmoji.THUMBNAIL
)


class ThumbnailGenerator:
    """
    Component responsible for generating thumbnails from an in-memory image.

    Every thumbnail has exactly the requested width and height. Results are
    returned in target order, and generation is all-or-nothing: the first
    failing target aborts the whole batch.
    """

    def __init__(self, config: Optional[IntakeConfig] = None):
        """
        Initialize thumbnail generator.

        Args:
            config: Intake configuration supplying quality and resize mode
        """
        self.config = config or IntakeConfig()
        self.quality = self.config.thumbnail_quality
        self.resize_mode = self.config.resize_mode

        logger.debug(
            f"ThumbnailGenerator initialized (quality={self.quality}, mode={self.resize_mode.value})"
        )

    def generate(
        self,
        data: bytes,
        source_format: DetectedFormat,
        targets: Sequence[TargetDimension],
    ) -> List[ThumbnailResult]:
        """
        Generate one thumbnail per target.

        Args:
            data: Validated source image bytes
            source_format: Container format detected from the bytes
            targets: Ordered, de-duplicated target dimensions

        Returns:
            One ThumbnailResult per target, in target order

        Raises:
            DecodeFailureError: The source could not be decoded
            EncodeFailureError: A thumbnail could not be encoded
        """
        img = self._decode(data)
        try:
            if source_format is DetectedFormat.UNKNOWN:
                label = targets[0].label if targets else "unknown"
                raise EncodeFailureError(label, "Source format is unknown")
            return [self._generate_one(img, source_format, target) for target in targets]
        finally:
            img.close()

    def _decode(self, data: bytes) -> Image.Image:
        """Decode the source raster once for all targets."""
        img = None
        try:
            img = Image.open(io.BytesIO(data))
            img.load()
        except DECODE_ERRORS as e:
            if img is not None:
                img.close()
            logger.warning(
                "Failed to decode source image for thumbnail generation",
                extra_context={"error": str(e)},
            )
            raise DecodeFailureError(str(e) or type(e).__name__) from e
        return img

    def _generate_one(
        self, img: Image.Image, source_format: DetectedFormat, target: TargetDimension
    ) -> ThumbnailResult:
        """Resize and encode a single target; only this step is timed."""
        start = monotonic_start()
        size = (target.width, target.height)

        if self.resize_mode is ResizeMode.FIT:
            resized = fit_on_canvas(img, size)
        else:
            resized = stretch_to_size(img, size)

        try:
            encoded = encode_image(resized, source_format, self.quality)
        except (OSError, ValueError, KeyError) as e:
            logger.error(
                f"Failed to encode thumbnail {target.label}",
                exception=e,
                extra_context={"format": source_format.value, "size": target.label},
            )
            raise EncodeFailureError(target.label, str(e) or type(e).__name__) from e

        processing_time = elapsed_ms(start)

        logger.debug(
            f"Generated thumbnail {target.label}",
            extra_context={
                "width": target.width,
                "height": target.height,
                "bytes": len(encoded),
                "processing_time_ms": processing_time,
            },
        )

        return ThumbnailResult(
            size=target.label,
            width=target.width,
            height=target.height,
            format=source_format,
            file_size_bytes=len(encoded),
            timestamp=utc_now(),
            processing_time_ms=processing_time,
            data=encoded,
        )
