"""Pydantic models for API requests and responses."""

from videogate.models.requests import (
    ChatRequest,
    ComplianceRequest,
    EnhanceRequest,
    VideoEditOptions,
    VideoEditRequest,
    VideoGenerateParams,
    VideoGenerateRequest,
    VideoPromptRequest,
)
from videogate.models.responses import (
    ComplianceResponse,
    EnhanceResponse,
    ErrorResponse,
    HealthResponse,
    ProviderInfo,
    TaskStatus,
    VideoEditResponse,
    VideoPromptResponse,
)

__all__ = [
    "VideoGenerateParams",
    "VideoGenerateRequest",
    "ComplianceRequest",
    "VideoEditOptions",
    "VideoEditRequest",
    "ChatRequest",
    "VideoPromptRequest",
    "EnhanceRequest",
    "TaskStatus",
    "ComplianceResponse",
    "VideoEditResponse",
    "VideoPromptResponse",
    "EnhanceResponse",
    "ProviderInfo",
    "HealthResponse",
    "ErrorResponse",
]
