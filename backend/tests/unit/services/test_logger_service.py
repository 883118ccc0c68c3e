#!/usr/bin/env python3
"""
Unit tests for the loguru-backed logger service.
"""

import pytest
from loguru import logger as loguru_logger

from thumbnail_api.enums import LogEmoji, LoggerName, LogLevel, LogSource
from thumbnail_api.services import logger as logger_package
from thumbnail_api.services.logger import (
    LoggerService,
    format_context,
    get_service_logger,
)


@pytest.fixture
def captured_records():
    """Collect loguru records emitted during a test."""
    records = []
    sink_id = loguru_logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    loguru_logger.remove(sink_id)


@pytest.mark.unit
class TestFormatContext:
    def test_empty_context(self):
        assert format_context(None) == ""
        assert format_context({}) == ""

    def test_context_rendered_as_indented_lines(self):
        rendered = format_context({"format": "PNG", "count": 3})
        assert rendered == "\n  ↳ format: PNG\n  ↳ count: 3"

    def test_context_truncated_after_five_items(self):
        rendered = format_context({f"k{i}": i for i in range(8)})
        lines = rendered.strip("\n").split("\n")

        assert len(lines) == 6
        assert lines[-1].endswith("... 3 more")


@pytest.mark.unit
class TestServiceLogger:
    def test_records_are_bound_with_source_and_name(self, captured_records):
        service_logger = get_service_logger(LoggerName.THUMBNAIL_PIPELINE, LogSource.PIPELINE)

        service_logger.info("Generated thumbnails", extra_context={"count": 2})

        record = captured_records[-1]
        assert record["extra"]["source"] == "pipeline"
        assert record["extra"]["logger_name"] == "thumbnail_pipeline"
        assert record["extra"]["extra_context"] == {"count": 2}
        assert record["level"].name == "INFO"

    def test_level_fallback_emoji(self, captured_records):
        get_service_logger(LoggerName.API, LogSource.API).warning("careful")
        assert captured_records[-1]["message"] == f"{LogEmoji.WARNING.value} careful"

    def test_instance_default_emoji(self, captured_records):
        service_logger = get_service_logger(
            LoggerName.API, LogSource.API, default_emoji=LogEmoji.THUMBNAIL
        )
        service_logger.debug("resized")
        assert captured_records[-1]["message"].startswith(LogEmoji.THUMBNAIL.value)

    def test_direct_emoji_wins(self, captured_records):
        service_logger = get_service_logger(
            LoggerName.API, LogSource.API, default_emoji=LogEmoji.THUMBNAIL
        )
        service_logger.info("done", emoji=LogEmoji.SUCCESS)
        assert captured_records[-1]["message"] == f"{LogEmoji.SUCCESS.value} done"

    def test_error_carries_exception(self, captured_records):
        service_logger = get_service_logger(LoggerName.SYSTEM)

        try:
            raise ValueError("bad value")
        except ValueError as e:
            service_logger.error("operation failed", exception=e)

        record = captured_records[-1]
        assert record["level"].name == "ERROR"
        assert record["exception"] is not None
        assert record["exception"].type is ValueError


@pytest.mark.unit
class TestLoggerService:
    @pytest.mark.asyncio
    async def test_file_sink_written(self, tmp_path):
        log_file = tmp_path / "api.log"
        service = LoggerService(
            min_level=LogLevel.DEBUG, enable_console=False, log_file=str(log_file)
        )
        service.configure()
        try:
            service.info("hello file", source=LogSource.SYSTEM, extra_context={"a": 1})
        finally:
            await service.shutdown()

        contents = log_file.read_text(encoding="utf-8")
        assert "hello file" in contents
        assert "system:system" in contents
        assert "a: 1" in contents
        assert service.configured is False


@pytest.mark.unit
class TestLoggerPackageExports:
    def test_every_export_resolves(self):
        for name in logger_package.__all__:
            assert hasattr(logger_package, name), name

    def test_exports_have_no_aliases(self):
        exported = [getattr(logger_package, name) for name in logger_package.__all__]
        classes = [obj for obj in exported if isinstance(obj, type)]

        assert len(classes) == len(set(classes))
