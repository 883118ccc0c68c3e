# backend/thumbnail_api/routers/__init__.py
from .thumbnail_routers import router as thumbnail_router

__all__ = ["thumbnail_router"]
