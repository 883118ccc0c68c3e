"""
Middleware package for FastAPI application.

Provides centralized error handling and request logging.
"""

from .error_handler import ErrorHandlerMiddleware, request_validation_exception_handler
from .request_logger import RequestLoggerMiddleware

__all__ = [
    "ErrorHandlerMiddleware",
    "RequestLoggerMiddleware",
    "request_validation_exception_handler",
]
