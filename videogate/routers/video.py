"""Video router for generation, status, compliance and editing endpoints."""

import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from videogate.config import Settings, get_settings
from videogate.dependencies import get_video_generator
from videogate.models.requests import (
    ComplianceRequest,
    VideoEditOptions,
    VideoEditRequest,
    VideoGenerateRequest,
)
from videogate.models.responses import ComplianceResponse, ErrorResponse, VideoEditResponse
from videogate.services import video_processor
from videogate.services.video_generator import VideoGenerator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/video", tags=["video"])

UPSTREAM_ERRORS = {
    400: {"model": ErrorResponse, "description": "Missing or invalid fields"},
    502: {"model": ErrorResponse, "description": "Upstream request failed"},
    503: {"model": ErrorResponse, "description": "Provider API key not configured"},
}


@router.post("/generate", responses=UPSTREAM_ERRORS)
async def generate_video(
    request: VideoGenerateRequest,
    generator: VideoGenerator = Depends(get_video_generator),
) -> Any:
    """
    Submit a video generation job to the provider.

    The provider's response is returned unmodified; it carries the task ID
    to poll via `/api/video/status`.
    """
    params = request.params.model_dump(exclude_unset=True) if request.params else None
    return await generator.generate(request.prompt, request.type, params)


@router.get("/status", responses=UPSTREAM_ERRORS)
async def get_video_status(
    task_id: Optional[str] = Query(default=None, alias="taskId"),
    generator: VideoGenerator = Depends(get_video_generator),
) -> Any:
    """Get the provider's status for a generation task."""
    if not task_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing taskId parameter",
        )
    return await generator.get_task(task_id)


@router.post(
    "/compliance",
    response_model=ComplianceResponse,
    responses={400: {"model": ErrorResponse, "description": "Missing videoPath"}},
)
async def check_compliance(request: ComplianceRequest) -> ComplianceResponse:
    """Check a video against YouTube upload limits (simulated analysis)."""
    result = video_processor.check_youtube_compliance(request.video_path)
    return ComplianceResponse(**result)


@router.post(
    "/edit",
    response_model=VideoEditResponse,
    responses={400: {"model": ErrorResponse, "description": "Missing inputPath or outputPath"}},
)
async def edit_video(
    request: VideoEditRequest,
    settings: Settings = Depends(get_settings),
) -> VideoEditResponse:
    """Apply edit options to a video (simulated, returns after a fixed delay)."""
    operations = await video_processor.process_video(
        request.input_path,
        request.output_path,
        request.options or VideoEditOptions(),
        delay_seconds=settings.edit_delay_seconds,
    )
    return VideoEditResponse(
        success=True,
        message="Video processed successfully",
        operations=operations,
    )
