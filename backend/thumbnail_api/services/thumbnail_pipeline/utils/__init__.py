"""
Thumbnail pipeline utilities: detection, validation, parsing and
image helpers shared by the generator.
"""

from .content_validator import ContentValidator
from .dimension_parser import DimensionParser
from .format_detector import FormatDetector, signature_format
from .intake_config import IntakeConfig

__all__ = [
    "ContentValidator",
    "DimensionParser",
    "FormatDetector",
    "IntakeConfig",
    "signature_format",
]
