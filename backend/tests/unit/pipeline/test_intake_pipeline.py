#!/usr/bin/env python3
"""
Unit tests for IntakePipeline.

End-to-end scenarios through validation, detection, parsing and generation.
"""

from unittest.mock import MagicMock

import pytest

from thumbnail_api.config import Settings
from thumbnail_api.enums import DetectedFormat, ResizeMode
from thumbnail_api.exceptions import (
    CorruptContentError,
    DecodeFailureError,
    EmptyInputError,
    MalformedDimensionError,
    SizeLimitExceededError,
    UnsupportedFormatError,
)
from thumbnail_api.services.thumbnail_pipeline import (
    IntakeConfig,
    IntakePipeline,
    create_intake_pipeline,
)


@pytest.mark.unit
@pytest.mark.thumbnail
class TestIntakePipeline:
    """Test suite for the intake pipeline orchestration."""

    @pytest.fixture
    def pipeline(self):
        return IntakePipeline()

    # ============================================================================
    # END-TO-END SCENARIOS
    # ============================================================================

    def test_png_with_default_sizes(self, pipeline, make_upload, png_bytes):
        result = pipeline.process(make_upload(png_bytes, filename="photo.png"))

        assert result.original_filename == "photo.png"
        assert result.original_format == DetectedFormat.PNG
        assert result.original_width == 200
        assert result.original_height == 200
        assert result.original_file_size_bytes == len(png_bytes)
        assert [(t.size, t.width, t.height) for t in result.thumbnails] == [
            ("small", 150, 150),
            ("medium", 300, 300),
            ("large", 600, 600),
        ]
        assert all(t.format == DetectedFormat.PNG for t in result.thumbnails)

    def test_png_with_size_spec(self, pipeline, make_upload, png_bytes):
        result = pipeline.process(make_upload(png_bytes), "small,500x500")

        assert [t.size for t in result.thumbnails] == ["small", "500x500"]
        assert (result.thumbnails[1].width, result.thumbnails[1].height) == (500, 500)

    def test_format_comes_from_bytes_not_declared_type(
        self, pipeline, make_upload, make_image_bytes
    ):
        data = make_image_bytes(DetectedFormat.JPEG, (64, 48))

        result = pipeline.process(make_upload(data, content_type="image/png"), "32x32")

        assert result.original_format == DetectedFormat.JPEG
        assert result.thumbnails[0].format == DetectedFormat.JPEG

    def test_serialized_result_excludes_encoded_bytes(self, pipeline, make_upload, png_bytes):
        payload = pipeline.process(make_upload(png_bytes), "small").model_dump(mode="json")

        assert set(payload) == {
            "original_filename",
            "original_format",
            "original_width",
            "original_height",
            "original_file_size_bytes",
            "thumbnails",
        }
        assert set(payload["thumbnails"][0]) == {
            "size",
            "width",
            "height",
            "format",
            "file_size_bytes",
            "timestamp",
            "processing_time_ms",
        }
        assert payload["original_format"] == "PNG"

    # ============================================================================
    # FAILURE PROPAGATION
    # ============================================================================

    def test_text_file_rejected(self, pipeline, make_upload):
        with pytest.raises(UnsupportedFormatError):
            pipeline.process(
                make_upload(b"just some text", content_type="text/plain", filename="a.txt")
            )

    def test_oversized_upload_rejected(self, make_upload, png_bytes):
        pipeline = IntakePipeline(IntakeConfig(max_file_size_bytes=len(png_bytes) - 1))

        with pytest.raises(SizeLimitExceededError):
            pipeline.process(make_upload(png_bytes))

    def test_empty_upload_wins_over_bad_sizes(self, pipeline, make_upload):
        with pytest.raises(EmptyInputError):
            pipeline.process(make_upload(b""), "not-a-size")

    def test_bad_sizes_on_valid_image(self, pipeline, make_upload, png_bytes):
        with pytest.raises(MalformedDimensionError):
            pipeline.process(make_upload(png_bytes), "big")

    def test_unrecognized_bytes(self, pipeline, make_upload):
        with pytest.raises(CorruptContentError):
            pipeline.process(make_upload(b"\x00\x01\x02\x03\x04"))

    def test_signature_only_bytes_fail_decode(self, pipeline, make_upload):
        with pytest.raises(DecodeFailureError):
            pipeline.process(make_upload(b"BM" + b"\x00" * 30, content_type="image/bmp"))

    def test_components_run_in_order(self, make_upload, png_bytes):
        calls = []
        validator = MagicMock()
        validator.validate.side_effect = lambda upload: calls.append("validate")
        parser = MagicMock()
        parser.parse.side_effect = lambda spec: calls.append("parse") or []
        generator = MagicMock()
        generator.generate.side_effect = lambda *args: calls.append("generate") or []

        pipeline = IntakePipeline(validator=validator, parser=parser, generator=generator)
        result = pipeline.process(make_upload(png_bytes), "small")

        assert calls == ["validate", "parse", "generate"]
        parser.parse.assert_called_once_with("small")
        assert result.thumbnails == []

    # ============================================================================
    # FACTORY
    # ============================================================================

    def test_factory_uses_settings(self):
        settings = Settings(max_thumbnail_sizes=3, resize_mode="fit", thumbnail_quality=70)

        pipeline = create_intake_pipeline(settings)

        assert pipeline.config.max_thumbnail_sizes == 3
        assert pipeline.generator.resize_mode == ResizeMode.FIT
        assert pipeline.generator.quality == 70

    def test_factory_without_settings(self):
        assert create_intake_pipeline().config == IntakeConfig()
