# backend/thumbnail_api/middleware/error_handler.py
"""
Error handling middleware for FastAPI application.

Translates intake failures into HTTP statuses and a structured error body.
This is the only place where failure kinds meet status codes.
"""

import traceback
import uuid
from typing import Dict, Tuple, Type

from fastapi import Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from ..config import settings
from ..enums import LogEmoji, LoggerName, LogSource
from ..exceptions import (
    CorruptContentError,
    DecodeFailureError,
    DimensionOutOfRangeError,
    EmptyDimensionTokenError,
    EmptyInputError,
    EncodeFailureError,
    IntakeError,
    IntakeValidationError,
    InternalFailureError,
    MalformedDimensionError,
    NonNumericDimensionError,
    SizeLimitExceededError,
    TooManySizesError,
    UnsupportedFormatError,
)
from ..models.thumbnail_model import ErrorResponse
from ..services.logger import get_service_logger
from ..utils.time_utils import utc_now_iso

logger = get_service_logger(LoggerName.ERROR_HANDLER, LogSource.MIDDLEWARE)

TRACE_ID_HEADER = "X-Trace-Id"

GENERIC_ERROR_MESSAGE = "An unexpected error occurred"

# Failure kind -> (HTTP status, short error label)
ERROR_MAPPINGS: Dict[Type[IntakeError], Tuple[int, str]] = {
    EmptyInputError: (400, "Invalid Image"),
    SizeLimitExceededError: (413, "File Size Limit Exceeded"),
    UnsupportedFormatError: (415, "Unsupported Format"),
    CorruptContentError: (400, "Invalid Image"),
    TooManySizesError: (400, "Invalid Dimensions"),
    MalformedDimensionError: (400, "Invalid Dimensions"),
    NonNumericDimensionError: (400, "Invalid Dimensions"),
    DimensionOutOfRangeError: (400, "Invalid Dimensions"),
    EmptyDimensionTokenError: (400, "Invalid Dimensions"),
    DecodeFailureError: (422, "Image Decode Failed"),
    EncodeFailureError: (500, "Thumbnail Encoding Failed"),
    InternalFailureError: (500, "Internal Server Error"),
}

INTERNAL_ERROR = ERROR_MAPPINGS[InternalFailureError]


def resolve_error_mapping(exc: BaseException) -> Tuple[int, str]:
    """Find the (status, label) for an exception, walking its class hierarchy."""
    for cls in type(exc).__mro__:
        if cls in ERROR_MAPPINGS:
            return ERROR_MAPPINGS[cls]
    if isinstance(exc, IntakeValidationError):
        return 400, "Bad Request"
    return INTERNAL_ERROR


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Centralized error handling middleware.

    Assigns a trace id to every request, catches all exceptions escaping
    the route and returns an ErrorResponse body.
    """

    def __init__(self, app: ASGIApp):
        super().__init__(app)
        self.debug_mode = settings.environment == "development"

    async def dispatch(self, request: Request, call_next) -> Response:
        trace_id = str(uuid.uuid4())
        request.state.trace_id = trace_id

        try:
            response = await call_next(request)
        except Exception as exc:
            self._log_error(exc, request, trace_id)
            response = self._create_error_response(exc, request, trace_id)

        response.headers[TRACE_ID_HEADER] = trace_id
        return response

    def _log_error(self, exc: Exception, request: Request, trace_id: str) -> None:
        """Expected rejections log as warnings, everything else as errors."""
        context = {
            "trace_id": trace_id,
            "method": request.method,
            "path": request.url.path,
            "exception_type": type(exc).__name__,
        }

        if isinstance(exc, IntakeValidationError):
            logger.warning(
                f"Rejected request {request.method} {request.url.path}: {exc.message}",
                extra_context=context,
            )
            return

        logger.error(
            f"Unhandled exception in {request.method} {request.url.path}",
            exception=exc,
            extra_context=context,
            emoji=LogEmoji.FAILED,
        )

    def _create_error_response(
        self, exc: Exception, request: Request, trace_id: str
    ) -> JSONResponse:
        status, label = resolve_error_mapping(exc)

        if isinstance(exc, IntakeError):
            message = exc.message
        elif self.debug_mode:
            message = f"{type(exc).__name__}: {exc}"
        else:
            message = GENERIC_ERROR_MESSAGE

        body = ErrorResponse(
            status=status,
            error=label,
            message=message,
            path=request.url.path,
            timestamp=utc_now_iso(),
            trace_id=trace_id,
        ).model_dump()

        # Include traceback in debug mode for non-taxonomy failures
        if self.debug_mode and not isinstance(exc, IntakeError):
            body["traceback"] = "".join(
                traceback.format_exception(type(exc), exc, exc.__traceback__)
            )

        return JSONResponse(status_code=status, content=body)


def format_validation_errors(exc: RequestValidationError) -> str:
    """Flatten FastAPI validation errors into a single readable message."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts) or "Invalid request"


async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Render request validation failures as a 400 ErrorResponse.

    Runs inside ErrorHandlerMiddleware, so the request already carries the
    trace id that the middleware attaches to the response header.
    """
    trace_id = getattr(request.state, "trace_id", None) or str(uuid.uuid4())
    message = format_validation_errors(exc)

    logger.warning(
        f"Rejected request {request.method} {request.url.path}: {message}",
        extra_context={
            "trace_id": trace_id,
            "method": request.method,
            "path": request.url.path,
            "exception_type": type(exc).__name__,
        },
    )

    body = ErrorResponse(
        status=400,
        error="Bad Request",
        message=message,
        path=request.url.path,
        timestamp=utc_now_iso(),
        trace_id=trace_id,
    ).model_dump()

    return JSONResponse(status_code=400, content=body)
