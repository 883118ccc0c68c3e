# backend/thumbnail_api/main.py
"""
FastAPI application entry point for the Thumbnail API.

This file only wires the HTTP layer together: logging, middleware, routers
and the lifespan that tears down the processing pool.
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .constants import SERVICE_DESCRIPTION, SERVICE_NAME, SERVICE_VERSION
from .dependencies import shutdown_processing_pool
from .enums import LogEmoji, LoggerName, LogSource
from .middleware import (
    ErrorHandlerMiddleware,
    RequestLoggerMiddleware,
    request_validation_exception_handler,
)
from .routers import thumbnail_router
from .services.logger import get_service_logger, initialize_global_logger

logger = get_service_logger(LoggerName.SYSTEM, LogSource.SYSTEM)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Handle application startup and shutdown"""
    # Initialize the global logger first
    _app.state.logger_service = initialize_global_logger(
        min_level=settings.log_level,
        enable_console=True,
        log_file=settings.log_file,
    )

    logger.info(
        "Starting FastAPI application",
        emoji=LogEmoji.STARTUP,
        extra_context={
            "environment": settings.environment,
            "api_host": settings.api_host,
            "api_port": settings.api_port,
            "processing_workers": settings.processing_workers,
            "resize_mode": settings.resize_mode.value,
        },
    )

    yield

    # Shutdown
    logger.info(
        "Shutting down FastAPI application",
        emoji=LogEmoji.SHUTDOWN,
        extra_context={"environment": settings.environment},
    )

    shutdown_processing_pool()

    # Flush queued records before the process exits
    await _app.state.logger_service.shutdown()


app = FastAPI(
    title=SERVICE_NAME,
    description=SERVICE_DESCRIPTION,
    version=SERVICE_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

# Add middleware stack (last added = outermost)
# 1. Request logging (innermost - sees the trace id and any escaping error)
app.add_middleware(RequestLoggerMiddleware)
# 2. Error handling (assigns trace id, turns exceptions into error bodies)
app.add_middleware(ErrorHandlerMiddleware)
# 3. CORS (outermost - error responses get CORS headers too)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
    max_age=3600,
)

# Malformed requests get the same error body as intake failures
app.add_exception_handler(RequestValidationError, request_validation_exception_handler)

app.include_router(thumbnail_router)


@app.get("/")
async def root():
    """Root endpoint"""
    return {"message": SERVICE_NAME, "version": SERVICE_VERSION, "docs": "/docs"}


def run() -> None:
    """Serve the application with uvicorn using configured host and port."""
    uvicorn.run(
        "thumbnail_api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.value.lower(),
    )


if __name__ == "__main__":
    run()
