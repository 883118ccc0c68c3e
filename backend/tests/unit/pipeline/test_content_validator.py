#!/usr/bin/env python3
"""
Unit tests for ContentValidator.

Tests rule ordering and each rejection kind.
"""

import pytest

from thumbnail_api.constants import MAX_FILE_SIZE_BYTES
from thumbnail_api.exceptions import (
    CorruptContentError,
    EmptyInputError,
    SizeLimitExceededError,
    UnsupportedFormatError,
)
from thumbnail_api.services.thumbnail_pipeline import ContentValidator, IntakeConfig


@pytest.mark.unit
@pytest.mark.thumbnail
class TestContentValidator:
    """Test suite for ContentValidator component."""

    @pytest.fixture
    def validator(self):
        return ContentValidator()

    @pytest.fixture
    def small_limit_validator(self):
        return ContentValidator(IntakeConfig(max_file_size_bytes=64))

    # ============================================================================
    # ACCEPTANCE TESTS
    # ============================================================================

    def test_valid_png_passes(self, validator, make_upload, png_bytes):
        validator.validate(make_upload(png_bytes))

    @pytest.mark.parametrize(
        "content_type", ["image/png", "IMAGE/PNG", "Image/Png", " image/png "]
    )
    def test_content_type_is_case_insensitive(
        self, validator, make_upload, png_bytes, content_type
    ):
        validator.validate(make_upload(png_bytes, content_type=content_type))

    def test_declared_type_need_not_match_signature(self, validator, make_upload):
        """MIME allowlist and signature are independent checks."""
        validator.validate(make_upload(b"\xff\xd8\xff\xe0rest", content_type="image/gif"))

    def test_buffer_exactly_at_limit_passes(self, small_limit_validator, make_upload):
        content = b"\x89PNG" + b"\x00" * 60
        small_limit_validator.validate(make_upload(content))

    # ============================================================================
    # REJECTION TESTS
    # ============================================================================

    def test_empty_buffer_rejected(self, validator, make_upload):
        with pytest.raises(EmptyInputError):
            validator.validate(make_upload(b""))

    def test_empty_checked_before_content_type(self, validator, make_upload):
        with pytest.raises(EmptyInputError):
            validator.validate(make_upload(b"", content_type="text/plain"))

    def test_size_limit_exceeded(self, small_limit_validator, make_upload):
        content = b"\x89PNG" + b"\x00" * 61

        with pytest.raises(SizeLimitExceededError) as exc_info:
            small_limit_validator.validate(make_upload(content, content_type="text/plain"))

        assert exc_info.value.actual_bytes == 65
        assert exc_info.value.limit_bytes == 64

    def test_default_limit_exceeded_by_one_byte(self, validator, make_upload):
        content = b"\x89PNG" + b"\x00" * (MAX_FILE_SIZE_BYTES - 3)

        with pytest.raises(SizeLimitExceededError) as exc_info:
            validator.validate(make_upload(content))

        assert exc_info.value.actual_bytes == MAX_FILE_SIZE_BYTES + 1

    @pytest.mark.parametrize(
        "content_type", ["text/plain", "image/svg+xml", "application/pdf", "", None]
    )
    def test_unsupported_content_type(self, validator, make_upload, png_bytes, content_type):
        with pytest.raises(UnsupportedFormatError) as exc_info:
            validator.validate(make_upload(png_bytes, content_type=content_type))

        assert exc_info.value.declared_type == content_type
        assert "image/png" in exc_info.value.supported_types

    def test_content_type_checked_before_signature(self, validator, make_upload):
        with pytest.raises(UnsupportedFormatError):
            validator.validate(make_upload(b"not an image", content_type="text/plain"))

    @pytest.mark.parametrize("content", [b"BM", b"\xff\xd8\xff", b"GIF"])
    def test_buffer_shorter_than_four_bytes(self, validator, make_upload, content):
        with pytest.raises(CorruptContentError):
            validator.validate(make_upload(content))

    def test_unrecognized_signature(self, validator, make_upload):
        with pytest.raises(CorruptContentError):
            validator.validate(make_upload(b"this is plain text pretending"))
