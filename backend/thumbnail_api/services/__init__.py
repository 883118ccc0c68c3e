# backend/thumbnail_api/services/__init__.py
"""
Services module for the Thumbnail API.

Business logic lives here: the thumbnail intake pipeline and the centralized
logger service it reports through.
"""
