"""
Thumbnail Pipeline Generators
"""

from .thumbnail_generator import ThumbnailGenerator

__all__ = ["ThumbnailGenerator"]
