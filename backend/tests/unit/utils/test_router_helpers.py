#!/usr/bin/env python3
"""
Unit tests for router helpers: exception handling and bounded upload reads.
"""

import io

import pytest
from fastapi import HTTPException, UploadFile
from starlette.datastructures import Headers

from thumbnail_api.exceptions import (
    EmptyInputError,
    InternalFailureError,
    SizeLimitExceededError,
)
from thumbnail_api.utils.router_helpers import handle_intake_exceptions, read_upload


@pytest.mark.unit
class TestHandleIntakeExceptions:
    @pytest.mark.asyncio
    async def test_returns_result(self):
        @handle_intake_exceptions("do work")
        async def endpoint():
            return 42

        assert await endpoint() == 42

    @pytest.mark.asyncio
    async def test_intake_errors_pass_through(self):
        @handle_intake_exceptions("do work")
        async def endpoint():
            raise EmptyInputError()

        with pytest.raises(EmptyInputError):
            await endpoint()

    @pytest.mark.asyncio
    async def test_http_exceptions_pass_through(self):
        @handle_intake_exceptions("do work")
        async def endpoint():
            raise HTTPException(status_code=404)

        with pytest.raises(HTTPException):
            await endpoint()

    @pytest.mark.asyncio
    async def test_unexpected_errors_wrapped(self):
        @handle_intake_exceptions("generate thumbnails")
        async def endpoint():
            raise ZeroDivisionError("boom")

        with pytest.raises(InternalFailureError) as exc_info:
            await endpoint()

        assert exc_info.value.message == "Failed to generate thumbnails"
        assert isinstance(exc_info.value.cause, ZeroDivisionError)


def _upload_file(content: bytes, size=None) -> UploadFile:
    return UploadFile(
        file=io.BytesIO(content),
        size=size,
        filename="photo.png",
        headers=Headers({"content-type": "image/png"}),
    )


@pytest.mark.unit
class TestReadUpload:
    @pytest.mark.asyncio
    async def test_missing_file_is_empty_upload(self):
        upload = await read_upload(None, 128)

        assert upload.content == b""
        assert upload.filename is None

    @pytest.mark.asyncio
    async def test_reads_whole_file_within_limit(self):
        upload = await read_upload(_upload_file(b"x" * 100, size=100), 128)

        assert upload.size_bytes == 100
        assert upload.filename == "photo.png"
        assert upload.content_type == "image/png"

    @pytest.mark.asyncio
    async def test_known_oversize_rejected_without_reading(self):
        file = _upload_file(b"x" * 1000, size=1000)

        with pytest.raises(SizeLimitExceededError) as exc_info:
            await read_upload(file, 128)

        assert exc_info.value.actual_bytes == 1000
        assert exc_info.value.limit_bytes == 128
        assert file.file.tell() == 0

    @pytest.mark.asyncio
    async def test_unknown_size_read_is_capped(self):
        upload = await read_upload(_upload_file(b"x" * 1000), 128)

        assert upload.size_bytes == 129
