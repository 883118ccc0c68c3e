# backend/thumbnail_api/services/thumbnail_pipeline/utils/dimension_parser.py
"""
Thumbnail Size Specification Parser

Grammar (comma-separated, whitespace around tokens ignored):

    spec   := token ("," token)*
    token  := "small" | "medium" | "large"      (case-insensitive)
            | DIGITS "x" DIGITS                  (lowercase x, no inner spaces)

An absent or blank spec selects all presets.
"""

import re
from typing import Dict, List, Optional, Tuple

from ....constants import CUSTOM_DIMENSION_SEPARATOR, SIZE_SPEC_SEPARATOR
from ....enums import LoggerName, LogSource, PresetSize
from ....exceptions import (
    DimensionOutOfRangeError,
    EmptyDimensionTokenError,
    MalformedDimensionError,
    NonNumericDimensionError,
    TooManySizesError,
)
from ....models.thumbnail_model import TargetDimension
from ....services.logger import get_service_logger
from ....utils.log_utils import sanitize_for_log
from .intake_config import IntakeConfig

logger = get_service_logger(LoggerName.THUMBNAIL_PIPELINE, LogSource.PIPELINE)

DIMENSION_PATTERN = re.compile(r"^\d+x\d+$")


class DimensionParser:
    """
    Parses and validates requested thumbnail dimensions.

    Supports preset sizes (small, medium, large) and custom dimensions
    (e.g. 500x500). Results are de-duplicated by (width, height), keeping
    the first occurrence and its position.
    """

    def __init__(self, config: Optional[IntakeConfig] = None):
        self.config = config or IntakeConfig()
        self._preset_labels: Dict[Tuple[int, int], str] = {
            size: preset.value for preset, size in self.config.presets.items()
        }

    def parse(self, size_spec: Optional[str]) -> List[TargetDimension]:
        """
        Parse a size specification into an ordered list of unique targets.

        Args:
            size_spec: Comma-separated sizes, or None for the defaults

        Returns:
            Target dimensions in first-seen order

        Raises:
            TooManySizesError: More tokens than max_thumbnail_sizes
            EmptyDimensionTokenError: A token is empty after trimming
            MalformedDimensionError: Token is neither preset nor WIDTHxHEIGHT
            NonNumericDimensionError: WIDTHxHEIGHT parts are not integers
            DimensionOutOfRangeError: Width or height outside the allowed range
        """
        if size_spec is None or not size_spec.strip():
            logger.debug("No sizes parameter provided, using defaults")
            return self.default_dimensions()

        tokens = size_spec.split(SIZE_SPEC_SEPARATOR)
        if len(tokens) > self.config.max_thumbnail_sizes:
            logger.warning(
                "Rejected size spec with too many entries",
                extra_context={
                    "requested": len(tokens),
                    "limit": self.config.max_thumbnail_sizes,
                },
            )
            raise TooManySizesError(len(tokens), self.config.max_thumbnail_sizes)

        unique: Dict[Tuple[int, int], TargetDimension] = {}
        for token in tokens:
            width, height = self._parse_token(token.strip())
            if (width, height) not in unique:
                unique[(width, height)] = self._build_target(width, height)

        dimensions = list(unique.values())
        logger.debug(
            f"Parsed dimensions: {[d.label for d in dimensions]}",
            extra_context={"size_spec": sanitize_for_log(size_spec)},
        )
        return dimensions

    def default_dimensions(self) -> List[TargetDimension]:
        """All presets, in small/medium/large order."""
        return [
            TargetDimension(width=width, height=height, label=preset.value)
            for preset, (width, height) in self.config.presets.items()
        ]

    def _parse_token(self, token: str) -> Tuple[int, int]:
        if not token:
            raise EmptyDimensionTokenError()

        try:
            preset = PresetSize(token.lower())
        except ValueError:
            return self._parse_custom(token)
        return self.config.presets[preset]

    def _parse_custom(self, token: str) -> Tuple[int, int]:
        """Parse a WIDTHxHEIGHT literal and range-check both parts."""
        if not DIMENSION_PATTERN.match(token):
            raise MalformedDimensionError(token)

        width_text, height_text = token.split(CUSTOM_DIMENSION_SEPARATOR)
        # \d also matches non-ASCII digits; only plain decimal values are accepted
        if not (width_text.isascii() and height_text.isascii()):
            raise NonNumericDimensionError(token)
        try:
            width = int(width_text)
            height = int(height_text)
        except ValueError as e:
            raise NonNumericDimensionError(token) from e

        self._validate_range("width", width)
        self._validate_range("height", height)
        return width, height

    def _validate_range(self, dimension: str, value: int) -> None:
        if not self.config.min_dimension <= value <= self.config.max_dimension:
            raise DimensionOutOfRangeError(
                dimension, value, self.config.min_dimension, self.config.max_dimension
            )

    def _build_target(self, width: int, height: int) -> TargetDimension:
        # A custom token equal to a preset's size takes the preset's name
        label = self._preset_labels.get(
            (width, height), f"{width}{CUSTOM_DIMENSION_SEPARATOR}{height}"
        )
        return TargetDimension(width=width, height=height, label=label)
