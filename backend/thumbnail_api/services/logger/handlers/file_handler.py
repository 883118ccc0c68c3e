"""
File Handler for the Logger Service.

Writes logs to rotating files with compression and retention, delegating
the rotation mechanics to loguru.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from ....enums import LogLevel
from ..constants import (
    FILE_FORMAT,
    LOG_FILE_COMPRESSION,
    LOG_FILE_RETENTION,
    LOG_FILE_ROTATION,
)


class FileHandler:
    """
    File handler that writes logs to rotating files with compression and retention.

    Writes are queued (enqueue=True) so worker threads never block on disk.
    """

    def __init__(
        self,
        log_file: str,
        min_level: LogLevel = LogLevel.INFO,
        rotation: str = LOG_FILE_ROTATION,
        retention: str = LOG_FILE_RETENTION,
        compression: str = LOG_FILE_COMPRESSION,
    ):
        self.log_file = Path(log_file)
        self.min_level = min_level
        self.rotation = rotation
        self.retention = retention
        self.compression = compression
        self.sink_id: Optional[int] = None

    def install(self) -> int:
        """Register the file sink with loguru and return its id."""
        self.log_file.parent.mkdir(parents=True, exist_ok=True)
        self.sink_id = logger.add(
            str(self.log_file),
            level=self.min_level.value,
            format=FILE_FORMAT,
            rotation=self.rotation,
            retention=self.retention,
            compression=self.compression,
            enqueue=True,
            encoding="utf-8",
        )
        return self.sink_id

    def remove(self) -> None:
        if self.sink_id is not None:
            logger.remove(self.sink_id)
            self.sink_id = None
