#!/usr/bin/env python3
"""
Unit tests for the failure kind -> HTTP status mapping.
"""

import pytest
from fastapi.exceptions import RequestValidationError

from thumbnail_api.exceptions import (
    CorruptContentError,
    DecodeFailureError,
    DimensionOutOfRangeError,
    EmptyDimensionTokenError,
    EmptyInputError,
    EncodeFailureError,
    IntakeValidationError,
    InternalFailureError,
    MalformedDimensionError,
    NonNumericDimensionError,
    SizeLimitExceededError,
    TooManySizesError,
    UnsupportedFormatError,
)
from thumbnail_api.middleware.error_handler import (
    format_validation_errors,
    resolve_error_mapping,
)


@pytest.mark.unit
class TestResolveErrorMapping:
    @pytest.mark.parametrize(
        "exc,status,label",
        [
            (EmptyInputError(), 400, "Invalid Image"),
            (SizeLimitExceededError(10, 5), 413, "File Size Limit Exceeded"),
            (UnsupportedFormatError("text/plain", ["image/png"]), 415, "Unsupported Format"),
            (CorruptContentError(), 400, "Invalid Image"),
            (TooManySizesError(11, 10), 400, "Invalid Dimensions"),
            (MalformedDimensionError("big"), 400, "Invalid Dimensions"),
            (NonNumericDimensionError("１x1"), 400, "Invalid Dimensions"),
            (DimensionOutOfRangeError("width", 1, 16, 2000), 400, "Invalid Dimensions"),
            (EmptyDimensionTokenError(), 400, "Invalid Dimensions"),
            (DecodeFailureError("truncated"), 422, "Image Decode Failed"),
            (EncodeFailureError("small", "no encoder"), 500, "Thumbnail Encoding Failed"),
            (InternalFailureError("generate thumbnails"), 500, "Internal Server Error"),
        ],
    )
    def test_taxonomy_mapping(self, exc, status, label):
        assert resolve_error_mapping(exc) == (status, label)

    def test_unknown_exception_is_internal(self):
        assert resolve_error_mapping(RuntimeError("boom")) == (500, "Internal Server Error")

    def test_unmapped_validation_subclass_is_bad_request(self):
        class CustomRejection(IntakeValidationError):
            pass

        assert resolve_error_mapping(CustomRejection("nope"))[0] == 400


@pytest.mark.unit
class TestFormatValidationErrors:
    def test_joins_location_and_message(self):
        exc = RequestValidationError(
            [
                {"loc": ("body", "file"), "msg": "Expected UploadFile", "type": "value_error"},
                {"loc": ("body", "sizes"), "msg": "Input should be a string", "type": "string_type"},
            ]
        )

        assert format_validation_errors(exc) == (
            "body.file: Expected UploadFile; body.sizes: Input should be a string"
        )

    def test_no_errors_gives_generic_message(self):
        assert format_validation_errors(RequestValidationError([])) == "Invalid request"
