"""
Console Handler for the Logger Service.

Installs a loguru stdout sink with level-based colouring. Colours are only
emitted when stdout is a TTY so container logs stay plain.
"""

import sys
from typing import Optional

from loguru import logger

from ....enums import LogLevel
from ..constants import CONSOLE_FORMAT


class ConsoleHandler:
    """
    Console handler that outputs logs to stdout.

    Features:
    - Colour-coded log levels (TTY only)
    - Emoji-prefixed messages
    - Level-based filtering
    """

    def __init__(self, min_level: LogLevel = LogLevel.DEBUG, use_colors: bool = True):
        self.min_level = min_level
        self.use_colors = use_colors and sys.stdout.isatty()
        self.sink_id: Optional[int] = None

    def install(self) -> int:
        """Register the stdout sink with loguru and return its id."""
        self.sink_id = logger.add(
            sys.stdout,
            level=self.min_level.value,
            format=CONSOLE_FORMAT,
            colorize=self.use_colors,
            backtrace=False,
            diagnose=False,
        )
        return self.sink_id

    def remove(self) -> None:
        if self.sink_id is not None:
            logger.remove(self.sink_id)
            self.sink_id = None
