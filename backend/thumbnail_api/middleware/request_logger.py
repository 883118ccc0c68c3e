# backend/thumbnail_api/middleware/request_logger.py
"""
Request logging middleware for FastAPI application.

Provides structured request/response logging with timing, keyed by the
trace id assigned in ErrorHandlerMiddleware.
"""

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from ..constants import SLOW_REQUEST_THRESHOLD_SECONDS, THUMBNAILS_PATH
from ..enums import LogEmoji, LoggerName, LogSource
from ..services.logger import get_service_logger
from ..utils.log_utils import sanitize_for_log
from ..utils.time_utils import elapsed_ms, monotonic_start

logger = get_service_logger(LoggerName.REQUEST_LOGGER, LogSource.MIDDLEWARE)


class RequestLoggerMiddleware(BaseHTTPMiddleware):
    """
    Request logging middleware with performance metrics.

    Health checks and API docs are not logged.
    """

    def __init__(self, app: ASGIApp):
        super().__init__(app)

        # Paths to exclude from logging (health checks, docs)
        self.exclude_paths = {
            f"{THUMBNAILS_PATH}/health",
            "/docs",
            "/redoc",
            "/openapi.json",
            "/favicon.ico",
        }

    async def dispatch(self, request: Request, call_next) -> Response:
        if request.url.path in self.exclude_paths:
            return await call_next(request)

        start = monotonic_start()
        trace_id = getattr(request.state, "trace_id", "unknown")

        logger.info(
            f"{request.method} {request.url.path}",
            extra_context={
                "trace_id": trace_id,
                "client_ip": getattr(request.client, "host", "unknown"),
                "content_length": request.headers.get("content-length"),
                "content_type": sanitize_for_log(request.headers.get("content-type")),
            },
            emoji=LogEmoji.REQUEST,
        )

        try:
            response = await call_next(request)
        except Exception as exc:
            duration_ms = elapsed_ms(start)
            logger.error(
                f"{request.method} {request.url.path} -> FAILED ({duration_ms}ms)",
                extra_context={
                    "trace_id": trace_id,
                    "exception_type": type(exc).__name__,
                    "duration_ms": duration_ms,
                },
            )
            # Re-raise exception for error handler
            raise

        self._log_request_complete(request, response, elapsed_ms(start), trace_id)
        return response

    def _log_request_complete(
        self, request: Request, response: Response, duration_ms: float, trace_id: str
    ) -> None:
        """Pick the log level from response status and duration."""
        status_code = response.status_code
        message = f"{request.method} {request.url.path} -> {status_code} ({duration_ms}ms)"
        context = {
            "trace_id": trace_id,
            "status_code": status_code,
            "duration_ms": duration_ms,
        }

        if status_code >= 500:
            logger.error(message, extra_context=context, emoji=LogEmoji.FAILED)
        elif status_code >= 400:
            logger.warning(message, extra_context=context)
        elif duration_ms > SLOW_REQUEST_THRESHOLD_SECONDS * 1000:
            logger.warning(message, extra_context=context, emoji=LogEmoji.SLOW)
        else:
            logger.info(message, extra_context=context, emoji=LogEmoji.RESPONSE)
