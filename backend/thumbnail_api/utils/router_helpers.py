# backend/thumbnail_api/utils/router_helpers.py
"""
Router Helper Functions

Common helpers for FastAPI routers: standardized exception handling so
every failure leaving an endpoint is a member of the intake taxonomy, and
bounded reading of uploaded file parts.
"""

from functools import wraps
from typing import Callable, Optional

from fastapi import HTTPException, UploadFile

from ..enums import LoggerName, LogSource
from ..exceptions import InternalFailureError, IntakeError, SizeLimitExceededError
from ..models.thumbnail_model import RawUpload
from ..services.logger import get_service_logger

logger = get_service_logger(LoggerName.API, LogSource.API)


def handle_intake_exceptions(operation_name: str):
    """
    Decorator for standardized exception handling in router endpoints.

    Intake failures and HTTP exceptions pass through untouched; anything
    else is logged and re-raised as InternalFailureError.

    Args:
        operation_name: Human-readable description of the operation for error messages

    Usage:
        @handle_intake_exceptions("generate thumbnails")
        async def create_thumbnails(...):
            ...
    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except (IntakeError, HTTPException):
                raise
            except Exception as e:
                logger.error(f"Error {operation_name}: {e}", exception=e)
                raise InternalFailureError(operation_name, cause=e) from e

        return wrapper

    return decorator


async def read_upload(file: Optional[UploadFile], limit_bytes: int) -> RawUpload:
    """
    Read an uploaded file part into a RawUpload without buffering past the limit.

    A missing file part becomes an empty upload. When the part's size is known
    and over the limit, SizeLimitExceededError is raised without reading. Otherwise
    at most limit_bytes + 1 bytes are read, enough for the validator to reject
    an oversized upload.

    Args:
        file: The multipart file part, if any
        limit_bytes: Maximum accepted upload size

    Returns:
        RawUpload holding at most limit_bytes + 1 bytes
    """
    if file is None:
        return RawUpload(content=b"")

    if file.size is not None and file.size > limit_bytes:
        logger.warning(
            "Rejecting oversized upload before reading",
            extra_context={"size_bytes": file.size, "limit_bytes": limit_bytes},
        )
        raise SizeLimitExceededError(file.size, limit_bytes)

    return RawUpload(
        content=await file.read(limit_bytes + 1),
        content_type=file.content_type,
        filename=file.filename,
    )
