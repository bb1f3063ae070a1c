"""LLM router for chat and prompt tooling endpoints."""

import logging
from typing import Any

from fastapi import APIRouter, Depends

from videogate.dependencies import get_llm_service
from videogate.models.requests import ChatRequest, EnhanceRequest, VideoPromptRequest
from videogate.models.responses import (
    EnhanceResponse,
    ErrorResponse,
    ProviderInfo,
    VideoPromptResponse,
)
from videogate.services.llm_service import LLMService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/llm", tags=["llm"])

LLM_ERRORS = {
    400: {"model": ErrorResponse, "description": "Missing or invalid fields"},
    502: {"model": ErrorResponse, "description": "LLM provider request failed"},
    503: {"model": ErrorResponse, "description": "LLM API key not configured"},
}


@router.post("/chat", responses=LLM_ERRORS)
async def chat(
    request: ChatRequest,
    llm: LLMService = Depends(get_llm_service),
) -> Any:
    """Proxy a chat completion to the configured provider."""
    config = request.config
    return await llm.chat(
        [message.model_dump() for message in request.messages],
        temperature=config.temperature if config else None,
        max_tokens=config.max_tokens if config else None,
        reasoning_effort=config.reasoning_effort if config else None,
    )


@router.post("/VideoPrompt", response_model=VideoPromptResponse, responses=LLM_ERRORS)
async def generate_video_prompt(
    request: VideoPromptRequest,
    llm: LLMService = Depends(get_llm_service),
) -> VideoPromptResponse:
    """Expand a short description into a detailed video generation prompt."""
    context = request.context.model_dump() if request.context else None
    prompt = await llm.generate_video_prompt(request.prompt, context)
    return VideoPromptResponse(prompt=prompt)


@router.post("/enhance", response_model=EnhanceResponse, responses=LLM_ERRORS)
async def enhance_prompt(
    request: EnhanceRequest,
    llm: LLMService = Depends(get_llm_service),
) -> EnhanceResponse:
    """Enhance a prompt and extract suggestions and keywords."""
    result = await llm.enhance_prompt(request.prompt)
    return EnhanceResponse(**result)


@router.get("/info", response_model=ProviderInfo)
async def provider_info(llm: LLMService = Depends(get_llm_service)) -> ProviderInfo:
    """Describe the active LLM provider."""
    return ProviderInfo(**llm.provider_info())
