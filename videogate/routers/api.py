"""API index router."""

from fastapi import APIRouter, Depends

from videogate.config import Settings, get_settings

router = APIRouter(prefix="/api", tags=["api"])

ENDPOINTS = [
    "/api/video/generate - Generate video from text/image/reference",
    "/api/video/status - Check generation status",
    "/api/video/compliance - Validate YouTube compliance",
    "/api/video/edit - Edit and process videos",
    "/api/llm/chat - Chat completion with the configured LLM",
    "/api/llm/VideoPrompt - Write a detailed video generation prompt",
    "/api/llm/enhance - Enhance a prompt with suggestions and keywords",
    "/api/llm/info - LLM provider information",
]


@router.get("")
async def api_index(settings: Settings = Depends(get_settings)):
    """List the gateway endpoints."""
    return {
        "name": settings.api_title,
        "version": settings.api_version,
        "endpoints": ENDPOINTS,
    }
