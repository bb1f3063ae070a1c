"""Pydantic models for API responses."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class TaskStatus(str, Enum):
    """Task statuses reported by the video provider or the gateway."""
    PENDING = "pending"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    COMPLETED = "completed"
    FAILED = "failed"
    CANCELED = "canceled"
    CANCELLED = "cancelled"
    UNKNOWN = "unknown"

    @property
    def is_terminal(self) -> bool:
        return self not in (TaskStatus.PENDING, TaskStatus.RUNNING)


class ComplianceResponse(BaseModel):
    """Response model for a compliance check."""

    compliant: bool = Field(
        ...,
        description="True when no issues were found"
    )

    issues: List[str] = Field(
        default_factory=list,
        description="Blocking problems"
    )

    recommendations: List[str] = Field(
        default_factory=list,
        description="Non-blocking suggestions"
    )


class VideoEditResponse(BaseModel):
    """Response model for an edit request."""

    success: bool
    message: str
    operations: List[str] = Field(
        default_factory=list,
        description="Edit steps requested by the options"
    )


class VideoPromptResponse(BaseModel):
    """Response model for video prompt generation."""

    prompt: str


class EnhanceResponse(BaseModel):
    """Response model for prompt enhancement."""

    model_config = ConfigDict(populate_by_name=True)

    enhanced_prompt: str = Field(..., alias="enhancedPrompt")
    suggestions: List[str] = Field(default_factory=list)
    keywords: List[str] = Field(default_factory=list)


class ProviderInfo(BaseModel):
    """Response model for LLM provider information."""

    model_config = ConfigDict(populate_by_name=True)

    provider: str
    model: str
    base_url: str = Field(..., alias="baseUrl")
    status: str = Field(
        ...,
        description="configured or not_configured"
    )
    message: Optional[str] = None


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str = Field(
        default="healthy",
        description="Service health status"
    )

    dashscope_configured: bool = Field(
        ...,
        description="Whether the video provider key is set"
    )

    llm_configured: bool = Field(
        ...,
        description="Whether the active LLM provider key is set"
    )

    version: str = Field(
        ...,
        description="API version"
    )


class ErrorResponse(BaseModel):
    """Response model for errors."""

    error: str = Field(
        ...,
        description="Error message"
    )
