#!/usr/bin/env python3
# backend/tests/conftest.py
"""
Pytest configuration and shared fixtures for Thumbnail API tests.
"""

import io
from typing import Callable, Optional, Tuple

import pytest
from PIL import Image, ImageDraw

from thumbnail_api.enums import DetectedFormat
from thumbnail_api.models.thumbnail_model import RawUpload
from thumbnail_api.services.thumbnail_pipeline import IntakeConfig

MIME_TYPES = {
    DetectedFormat.JPEG: "image/jpeg",
    DetectedFormat.PNG: "image/png",
    DetectedFormat.GIF: "image/gif",
    DetectedFormat.BMP: "image/bmp",
    DetectedFormat.WEBP: "image/webp",
    DetectedFormat.TIFF: "image/tiff",
}


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast isolated tests")
    config.addinivalue_line("markers", "integration: tests through the HTTP layer")
    config.addinivalue_line("markers", "thumbnail: thumbnail pipeline tests")


def encode_test_image(
    image_format: DetectedFormat = DetectedFormat.PNG,
    size: Tuple[int, int] = (200, 200),
    mode: str = "RGB",
    color="red",
) -> bytes:
    """Build a real image in memory with a contrasting rectangle."""
    img = Image.new(mode, size, color=color)
    if mode in ("RGB", "RGBA"):
        draw = ImageDraw.Draw(img)
        draw.rectangle(
            [size[0] // 4, size[1] // 4, size[0] * 3 // 4, size[1] * 3 // 4],
            fill="blue",
        )
    buffer = io.BytesIO()
    img.save(buffer, image_format.pil_format)
    return buffer.getvalue()


@pytest.fixture
def make_image_bytes() -> Callable[..., bytes]:
    """Factory fixture producing encoded image bytes."""
    return encode_test_image


@pytest.fixture
def png_bytes() -> bytes:
    """A 200x200 PNG."""
    return encode_test_image(DetectedFormat.PNG, (200, 200))


@pytest.fixture
def make_upload() -> Callable[..., RawUpload]:
    """Factory fixture producing RawUpload values."""

    def _make(
        content: bytes,
        content_type: Optional[str] = "image/png",
        filename: Optional[str] = "test.png",
    ) -> RawUpload:
        return RawUpload(content=content, content_type=content_type, filename=filename)

    return _make


@pytest.fixture
def intake_config() -> IntakeConfig:
    """Default intake configuration."""
    return IntakeConfig()
