# backend/thumbnail_api/routers/thumbnail_routers.py
"""
Thumbnail HTTP endpoints.

Role: Upload intake HTTP endpoints
Responsibilities: Accept multipart uploads, hand them to the intake pipeline
on the processing pool, expose health and service info
Interactions: Uses IntakePipeline for all image logic; failures are mapped
to HTTP responses by ErrorHandlerMiddleware
"""

from typing import Optional

from fastapi import APIRouter, File, Form, UploadFile
from fastapi.responses import PlainTextResponse

from ..constants import (
    SERVICE_DESCRIPTION,
    SERVICE_NAME,
    SERVICE_VERSION,
    THUMBNAILS_PATH,
)
from ..dependencies import IntakePipelineDep, ProcessingPoolDep
from ..enums import LoggerName, LogSource
from ..models.thumbnail_model import ApiInfo, IntakeResult
from ..services.logger import get_service_logger
from ..utils.log_utils import sanitize_for_log
from ..utils.router_helpers import handle_intake_exceptions, read_upload

logger = get_service_logger(LoggerName.API, LogSource.API)

router = APIRouter(prefix=THUMBNAILS_PATH, tags=["thumbnails"])


@router.post("", response_model=IntakeResult)
@handle_intake_exceptions("generate thumbnails")
async def create_thumbnails(
    pipeline: IntakePipelineDep,
    pool: ProcessingPoolDep,
    file: Optional[UploadFile] = File(None, description="Image to thumbnail"),
    sizes: Optional[str] = Form(
        None,
        description="Comma-separated sizes: small, medium, large or WIDTHxHEIGHT",
    ),
):
    """
    Generate thumbnails for an uploaded image.

    Returns:
        IntakeResult with original image metadata and one entry per thumbnail
    """
    upload = await read_upload(file, pipeline.config.max_file_size_bytes)

    logger.info(
        f"Received thumbnail request for {sanitize_for_log(upload.filename)}",
        extra_context={
            "size_bytes": upload.size_bytes,
            "sizes": sanitize_for_log(sizes),
        },
    )

    return await pool.run(pipeline.process, upload, sizes)


@router.get("/health", response_class=PlainTextResponse)
async def health() -> str:
    """Liveness probe."""
    return "OK"


@router.get("/info", response_model=ApiInfo)
async def info() -> ApiInfo:
    return ApiInfo(
        name=SERVICE_NAME,
        version=SERVICE_VERSION,
        description=SERVICE_DESCRIPTION,
        main_endpoint=f"POST {THUMBNAILS_PATH}",
    )
