# backend/thumbnail_api/services/thumbnail_pipeline/utils/format_detector.py
"""
Image Format Detection

Classifies raw bytes by magic-byte signature and reads true pixel
dimensions by decoding. Caller-declared metadata is never consulted.
"""

import io
from typing import Optional, Sequence, Tuple

from PIL import Image

from ....enums import DetectedFormat, LoggerName, LogSource
from ....exceptions import DecodeFailureError
from ....models.thumbnail_model import NativeDimensions
from ....services.logger import get_service_logger

logger = get_service_logger(LoggerName.THUMBNAIL_PIPELINE, LogSource.PIPELINE)

# (offset, magic) pairs that must all match for one signature variant
SignaturePart = Tuple[int, bytes]

# Checked in order; the first matching format wins.
# Each format lists one or more alternative variants.
IMAGE_SIGNATURES: Tuple[Tuple[DetectedFormat, Tuple[Tuple[SignaturePart, ...], ...]], ...] = (
    (DetectedFormat.JPEG, (((0, b"\xff\xd8\xff"),),)),
    (DetectedFormat.PNG, (((0, b"\x89PNG"),),)),
    (DetectedFormat.GIF, (((0, b"GIF"),),)),
    (DetectedFormat.BMP, (((0, b"BM"),),)),
    (DetectedFormat.WEBP, (((0, b"RIFF"), (8, b"WEBP")),)),
    (DetectedFormat.TIFF, (((0, b"II*\x00"),), ((0, b"MM\x00*"),))),
)

# Decoder errors Pillow raises for unreadable or hostile input
DECODE_ERRORS = (OSError, ValueError, SyntaxError, EOFError, Image.DecompressionBombError)


def _matches(data: bytes, parts: Sequence[SignaturePart]) -> bool:
    """True when every (offset, magic) part is present at its offset."""
    for offset, magic in parts:
        if data[offset : offset + len(magic)] != magic:
            return False
    return True


def signature_format(data: Optional[bytes]) -> DetectedFormat:
    """
    Classify bytes against IMAGE_SIGNATURES.

    Buffers too short for a signature simply fail to match it.
    """
    if not data:
        return DetectedFormat.UNKNOWN

    head = bytes(data[:12])
    for detected_format, variants in IMAGE_SIGNATURES:
        if any(_matches(head, variant) for variant in variants):
            return detected_format
    return DetectedFormat.UNKNOWN


class FormatDetector:
    """
    Detects image container format and reads native image dimensions.

    Stateless; safe to share across concurrent requests.
    """

    def detect(self, data: Optional[bytes]) -> DetectedFormat:
        """
        Detect the container format from leading bytes.

        Total and deterministic: never raises, and trailing bytes beyond the
        signature region do not affect the result.

        Args:
            data: Raw image bytes

        Returns:
            Detected format, DetectedFormat.UNKNOWN when nothing matches
        """
        return signature_format(data)

    def read_native_dimensions(self, data: bytes) -> NativeDimensions:
        """
        Fully decode the buffer and return its pixel dimensions.

        Signatures do not encode size, so a real decode is required; it also
        proves the payload behind the signature is readable.

        Args:
            data: Raw image bytes

        Returns:
            NativeDimensions of the decoded raster

        Raises:
            DecodeFailureError: If the codec cannot decode a raster
        """
        try:
            with Image.open(io.BytesIO(data)) as img:
                img.load()
                width, height = img.size
        except DECODE_ERRORS as e:
            logger.warning(
                "Failed to decode image while reading dimensions",
                extra_context={"error": str(e), "byte_length": len(data)},
            )
            raise DecodeFailureError(str(e) or type(e).__name__) from e

        if width <= 0 or height <= 0:
            raise DecodeFailureError(f"Decoded image has invalid size {width}x{height}")

        return NativeDimensions(width=width, height=height)
