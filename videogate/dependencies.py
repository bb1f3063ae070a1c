"""FastAPI dependency providers for the gateway services."""

import httpx
from fastapi import Depends

from videogate.config import Settings, get_settings
from videogate.services.http import get_http_client
from videogate.services.llm_service import LLMService
from videogate.services.video_generator import VideoGenerator


def get_video_generator(
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
) -> VideoGenerator:
    return VideoGenerator(settings, client)


def get_llm_service(
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
) -> LLMService:
    return LLMService(settings, client)
