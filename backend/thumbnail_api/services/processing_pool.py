# backend/thumbnail_api/services/processing_pool.py
"""
Bounded worker pool for CPU-bound thumbnail work.

Request handlers run on the event loop; decode/resize/encode is blocking, so
each pipeline call is handed to a fixed-size thread pool instead.
"""

import asyncio
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import Any, Callable, Optional

from ..constants import DEFAULT_PROCESSING_WORKERS, PROCESSING_THREAD_PREFIX
from ..enums import LogEmoji, LoggerName, LogSource
from .logger import get_service_logger

logger = get_service_logger(LoggerName.PROCESSING_POOL, LogSource.SYSTEM)


class ProcessingPool:
    """Thin async facade over a ThreadPoolExecutor."""

    def __init__(self, max_workers: int = DEFAULT_PROCESSING_WORKERS):
        self.max_workers = max_workers
        self._executor: Optional[ThreadPoolExecutor] = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix=PROCESSING_THREAD_PREFIX
        )
        logger.info(
            f"Processing pool started with {max_workers} workers",
            emoji=LogEmoji.STARTUP,
        )

    @property
    def is_running(self) -> bool:
        return self._executor is not None

    async def run(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        """
        Run a blocking callable on the pool and await its result.

        Exceptions raised by func propagate to the awaiting caller unchanged.

        Raises:
            RuntimeError: If the pool has been shut down
        """
        if self._executor is None:
            raise RuntimeError("Processing pool has been shut down")

        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self._executor, partial(func, *args, **kwargs))

    def shutdown(self, wait: bool = True) -> None:
        """Stop accepting work and release worker threads."""
        if self._executor is None:
            return
        self._executor.shutdown(wait=wait)
        self._executor = None
        logger.info("Processing pool shut down", emoji=LogEmoji.SHUTDOWN)
