"""
Centralized Logger Service Module.

A unified logging interface built on loguru.

Features:
- Type-safe enum-based logging methods
- Console and rotating file handlers
- Per-service loggers with emoji priority

Usage:
    from thumbnail_api.services.logger import get_service_logger
    from thumbnail_api.enums import LoggerName, LogSource

    logger = get_service_logger(LoggerName.THUMBNAIL_PIPELINE, LogSource.PIPELINE)
    logger.info("Generated 3 thumbnails", extra_context={"format": "PNG"})
"""

# Re-export commonly used enums for convenience
from ...enums import LogEmoji, LoggerName, LogLevel, LogSource
from .handlers import ConsoleHandler, FileHandler
from .logger_service import (
    LoggerService,
    format_context,
    get_service_logger,
    initialize_global_logger,
    log,
)

__all__ = [
    "LoggerService",
    "log",
    "format_context",
    "get_service_logger",
    "initialize_global_logger",
    "ConsoleHandler",
    "FileHandler",
    # Enums
    "LogLevel",
    "LogSource",
    "LoggerName",
    "LogEmoji",
]
