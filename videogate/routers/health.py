"""Health check router."""

import logging

from fastapi import APIRouter, Depends

from videogate.config import Settings, get_settings
from videogate.models.responses import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={
        200: {"description": "Health status"},
    },
)
async def health_check(settings: Settings = Depends(get_settings)) -> HealthResponse:
    """
    Check the health status of the service.

    Returns information about:
    - Video provider credentials
    - LLM provider credentials
    """
    dashscope_configured = bool(settings.dashscope_api_key)
    llm_configured = bool(settings.llm_api_key())

    if dashscope_configured and llm_configured:
        status = "healthy"
    elif dashscope_configured or llm_configured:
        status = "degraded"
    else:
        status = "unhealthy"

    return HealthResponse(
        status=status,
        dashscope_configured=dashscope_configured,
        llm_configured=llm_configured,
        version=settings.api_version,
    )
