# backend/thumbnail_api/services/thumbnail_pipeline/intake_pipeline.py
"""
Main Intake Pipeline Class

Single caller-facing surface of the thumbnail core. One call per upload:

    validate -> detect format + read native dimensions -> parse sizes -> generate

Component failures propagate unchanged; the pipeline adds no failure kinds
of its own and never returns a partial result.
"""

from typing import Optional

from ...enums import LogEmoji, LoggerName, LogSource
from ...models.thumbnail_model import IntakeResult, RawUpload
from ...services.logger import get_service_logger
from ...utils.log_utils import sanitize_for_log
from .generators import ThumbnailGenerator
from .utils import ContentValidator, DimensionParser, FormatDetector, IntakeConfig

logger = get_service_logger(LoggerName.THUMBNAIL_PIPELINE, LogSource.PIPELINE)


class IntakePipeline:
    """
    Orchestrates validation, detection, parsing and generation for one upload.

    Holds only immutable configuration and stateless components, so a single
    instance is shared across concurrent requests.
    """

    def __init__(
        self,
        config: Optional[IntakeConfig] = None,
        detector: Optional[FormatDetector] = None,
        validator: Optional[ContentValidator] = None,
        parser: Optional[DimensionParser] = None,
        generator: Optional[ThumbnailGenerator] = None,
    ):
        """
        Initialize the pipeline with its components.

        Args:
            config: Shared intake configuration (defaults from constants)
            detector: Format detector
            validator: Upload content validator
            parser: Size specification parser
            generator: Thumbnail generator
        """
        self.config = config or IntakeConfig()
        self.detector = detector or FormatDetector()
        self.validator = validator or ContentValidator(self.config)
        self.parser = parser or DimensionParser(self.config)
        self.generator = generator or ThumbnailGenerator(self.config)

    def process(self, upload: RawUpload, size_spec: Optional[str] = None) -> IntakeResult:
        """
        Run one upload through the whole pipeline.

        Args:
            upload: Raw upload bytes plus declared metadata
            size_spec: Optional comma-separated size list

        Returns:
            IntakeResult describing the original and every generated thumbnail

        Raises:
            IntakeError: Any failure from a pipeline component
        """
        self.validator.validate(upload)

        source_format = self.detector.detect(upload.content)
        native = self.detector.read_native_dimensions(upload.content)

        targets = self.parser.parse(size_spec)
        thumbnails = self.generator.generate(upload.content, source_format, targets)

        logger.info(
            f"Generated {len(thumbnails)} thumbnails for {sanitize_for_log(upload.filename)}",
            emoji=LogEmoji.SUCCESS,
            extra_context={
                "format": source_format.value,
                "original_size": f"{native.width}x{native.height}",
                "sizes": ",".join(t.size for t in thumbnails),
            },
        )

        return IntakeResult(
            original_filename=upload.filename,
            original_format=source_format,
            original_width=native.width,
            original_height=native.height,
            original_file_size_bytes=upload.size_bytes,
            thumbnails=thumbnails,
        )


def create_intake_pipeline(settings=None) -> IntakePipeline:
    """
    Factory function to create an intake pipeline instance.

    Args:
        settings: Application Settings; component defaults are used when omitted

    Returns:
        Configured IntakePipeline instance
    """
    config = IntakeConfig.from_settings(settings) if settings else IntakeConfig()
    return IntakePipeline(config=config)
