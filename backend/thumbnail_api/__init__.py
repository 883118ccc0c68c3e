# backend/thumbnail_api/__init__.py
"""
Thumbnail API - image intake and thumbnail generation service.
"""

__version__ = "1.0.0"
