"""
Centralized Logger Service for the Thumbnail API.

This service provides a unified logging interface on top of loguru:
- Console output with emoji support
- Optional rotating file logging
- Structured context rendered under each message

Architecture:
- Type-safe enum-based configuration
- One loguru sink per handler
- Service loggers pre-bound to a logger name and source
"""

from typing import Any, Dict, List, Optional

from loguru import logger

from ...enums import LogEmoji, LoggerName, LogLevel, LogSource
from .constants import (
    CONSOLE_CONTEXT_INDENTATION,
    CONSOLE_MAX_CONTEXT_ITEMS,
    DEFAULT_RECORD_EXTRA,
)
from .handlers.console_handler import ConsoleHandler
from .handlers.file_handler import FileHandler


def format_context(extra_context: Optional[Dict[str, Any]]) -> str:
    """Render context items as indented lines appended to the message."""
    if not extra_context:
        return ""

    lines = []
    for index, (key, value) in enumerate(extra_context.items()):
        if index >= CONSOLE_MAX_CONTEXT_ITEMS:
            remaining = len(extra_context) - CONSOLE_MAX_CONTEXT_ITEMS
            lines.append(f"{CONSOLE_CONTEXT_INDENTATION}... {remaining} more")
            break
        lines.append(f"{CONSOLE_CONTEXT_INDENTATION}{key}: {value}")
    return "\n" + "\n".join(lines)


class LoggerService:
    """
    Centralized logging service used by every application component.

    Usage:
        log = LoggerService(min_level=LogLevel.INFO, log_file="logs/api.log")
        log.configure()
        log.info(
            message="Thumbnails generated",
            source=LogSource.PIPELINE,
            logger_name=LoggerName.THUMBNAIL_PIPELINE,
            extra_context={"count": 3},
        )
    """

    def __init__(
        self,
        min_level: LogLevel = LogLevel.INFO,
        enable_console: bool = True,
        log_file: Optional[str] = None,
    ):
        """
        Args:
            min_level: Minimum level written by the installed sinks
            enable_console: Install the stdout sink
            log_file: Optional path for the rotating file sink
        """
        self.min_level = min_level
        self.enable_console = enable_console
        self.log_file = log_file
        self.handlers: List[Any] = []
        self.configured = False

    def configure(self) -> None:
        """Replace loguru's default sink with this service's handlers."""
        logger.remove()
        logger.configure(extra=DEFAULT_RECORD_EXTRA)

        if self.enable_console:
            self.handlers.append(ConsoleHandler(min_level=self.min_level))
        if self.log_file:
            self.handlers.append(FileHandler(self.log_file, min_level=self.min_level))

        for handler in self.handlers:
            handler.install()
        self.configured = True

    async def shutdown(self) -> None:
        """Flush queued records and detach all sinks."""
        await logger.complete()
        for handler in self.handlers:
            handler.remove()
        self.handlers = []
        self.configured = False

    def log(
        self,
        level: LogLevel,
        message: str,
        source: LogSource = LogSource.SYSTEM,
        logger_name: LoggerName = LoggerName.SYSTEM,
        emoji: Optional[LogEmoji] = None,
        extra_context: Optional[Dict[str, Any]] = None,
        exception: Optional[BaseException] = None,
    ) -> None:
        text = f"{emoji.value} {message}" if emoji else message
        bound = logger.bind(
            source=source.value,
            logger_name=logger_name.value,
            context=format_context(extra_context),
            extra_context=extra_context or {},
        )
        bound.opt(exception=exception).log(level.value, text)

    def error(self, message: str, exception: Optional[BaseException] = None, **kwargs):
        self.log(LogLevel.ERROR, message, exception=exception, **kwargs)

    def warning(self, message: str, **kwargs):
        self.log(LogLevel.WARNING, message, **kwargs)

    def info(self, message: str, **kwargs):
        self.log(LogLevel.INFO, message, **kwargs)

    def debug(self, message: str, **kwargs):
        self.log(LogLevel.DEBUG, message, **kwargs)


_global_logger: Optional[LoggerService] = None


def initialize_global_logger(
    min_level: LogLevel = LogLevel.INFO,
    enable_console: bool = True,
    log_file: Optional[str] = None,
) -> LoggerService:
    """
    Create and configure the process-wide logger service.

    Called once from the application lifespan. Until then, service loggers
    write through loguru's default stderr sink.
    """
    global _global_logger
    _global_logger = LoggerService(
        min_level=min_level, enable_console=enable_console, log_file=log_file
    )
    _global_logger.configure()
    return _global_logger


def log() -> LoggerService:
    """Return the global logger service, creating an unconfigured one if needed."""
    global _global_logger
    if _global_logger is None:
        _global_logger = LoggerService()
    return _global_logger


def get_service_logger(
    logger_name: LoggerName,
    source: LogSource = LogSource.SYSTEM,
    default_emoji: Optional[LogEmoji] = None,
):
    """
    Factory function to create a pre-configured logger for a specific service.

    Returns a logger with simplified methods that automatically include
    the correct source and logger_name parameters.

    Emoji priority system (highest to lowest):
    1. Direct: Emoji passed directly to log method call
    2. Instance-set: Default emoji set when creating the service logger
    3. Fallback: Default emoji based on log level (ERROR, WARNING, INFO, DEBUG)

    Example:
        logger = get_service_logger(LoggerName.THUMBNAIL_PIPELINE, LogSource.PIPELINE)
        logger.error("Something went wrong")  # Uses LogEmoji.ERROR (fallback)
        logger.info("Done", emoji=LogEmoji.SUCCESS)  # Uses LogEmoji.SUCCESS (direct)
    """

    def _resolve_emoji(
        method_emoji: Optional[LogEmoji], fallback_emoji: LogEmoji
    ) -> LogEmoji:
        if method_emoji is not None:
            return method_emoji
        if default_emoji is not None:
            return default_emoji
        return fallback_emoji

    class ServiceLogger:
        name = logger_name
        log_source = source

        @staticmethod
        def error(
            message: str,
            exception: Optional[BaseException] = None,
            extra_context: Optional[Dict[str, Any]] = None,
            emoji: Optional[LogEmoji] = None,
        ):
            """Log an error with emoji priority system."""
            return log().error(
                message=message,
                exception=exception,
                extra_context=extra_context,
                source=source,
                logger_name=logger_name,
                emoji=_resolve_emoji(emoji, LogEmoji.ERROR),
            )

        @staticmethod
        def warning(
            message: str,
            extra_context: Optional[Dict[str, Any]] = None,
            emoji: Optional[LogEmoji] = None,
        ):
            """Log a warning with emoji priority system."""
            return log().warning(
                message=message,
                extra_context=extra_context,
                source=source,
                logger_name=logger_name,
                emoji=_resolve_emoji(emoji, LogEmoji.WARNING),
            )

        @staticmethod
        def info(
            message: str,
            extra_context: Optional[Dict[str, Any]] = None,
            emoji: Optional[LogEmoji] = None,
        ):
            """Log an info message with emoji priority system."""
            return log().info(
                message=message,
                extra_context=extra_context,
                source=source,
                logger_name=logger_name,
                emoji=_resolve_emoji(emoji, LogEmoji.INFO),
            )

        @staticmethod
        def debug(
            message: str,
            extra_context: Optional[Dict[str, Any]] = None,
            emoji: Optional[LogEmoji] = None,
        ):
            """Log a debug message with emoji priority system."""
            return log().debug(
                message=message,
                extra_context=extra_context,
                source=source,
                logger_name=logger_name,
                emoji=_resolve_emoji(emoji, LogEmoji.DEBUG),
            )

    return ServiceLogger()
