"""Application services."""

from videogate.services.http import close_http_client, get_http_client
from videogate.services.llm_service import LLMService
from videogate.services.video_generator import VideoGenerator, build_generation_payload

__all__ = [
    "VideoGenerator",
    "build_generation_payload",
    "LLMService",
    "get_http_client",
    "close_http_client",
]
