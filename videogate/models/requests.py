"""Pydantic models for API requests."""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class VideoGenerateParams(BaseModel):
    """Extra upstream parameters; unknown keys are forwarded as-is."""

    model_config = ConfigDict(extra="allow")

    image_url: Optional[str] = Field(default=None, description="Source image for i2v")
    reference_url: Optional[str] = Field(default=None, description="Reference video or image for r2v")
    video_cfg: Optional[Dict[str, Any]] = Field(
        default=None, description="Overrides for duration, width, height, ..."
    )


class VideoGenerateRequest(BaseModel):
    """Request model for video generation."""

    prompt: str = Field(
        ...,
        min_length=1,
        description="Text description of the video to generate",
        examples=["A paper boat drifting down a rainy street at dusk"],
    )

    type: Literal["t2v", "i2v", "r2v"] = Field(
        ...,
        description="Generation mode: text-, image- or reference-to-video",
    )

    params: Optional[VideoGenerateParams] = Field(
        default=None,
        description="Extra upstream parameters (image_url, reference_url, video_cfg, ...)",
    )

    @field_validator("prompt")
    @classmethod
    def validate_prompt(cls, v: str) -> str:
        """Reject whitespace-only prompts."""
        v = v.strip()
        if not v:
            raise ValueError("Prompt cannot be empty")
        return v


class ComplianceRequest(BaseModel):
    """Request model for a YouTube compliance check."""

    model_config = ConfigDict(populate_by_name=True)

    video_path: str = Field(..., alias="videoPath", min_length=1)


class VideoEditOptions(BaseModel):
    """Editing options; unknown keys are kept and ignored."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    remove_audio: bool = Field(default=False, alias="removeAudio")
    add_subtitles: bool = Field(default=False, alias="addSubtitles")
    watermark_path: Optional[str] = Field(default=None, alias="watermarkPath")
    watermark_position: str = Field(default="bottom-right", alias="watermarkPosition")
    target_resolution: Optional[str] = Field(
        default=None, alias="targetResolution", description="e.g. 1080p, 720p"
    )
    target_frame_rate: Optional[int] = Field(default=None, alias="targetFrameRate", gt=0)
    duration_limit: Optional[int] = Field(
        default=None, alias="durationLimit", gt=0, description="Seconds"
    )


class VideoEditRequest(BaseModel):
    """Request model for video editing."""

    model_config = ConfigDict(populate_by_name=True)

    input_path: str = Field(..., alias="inputPath", min_length=1)
    output_path: str = Field(..., alias="outputPath", min_length=1)
    options: Optional[VideoEditOptions] = None


class ChatMessage(BaseModel):
    """A single chat message."""

    role: Literal["system", "user", "assistant"]
    content: str


class ChatConfig(BaseModel):
    """Per-request overrides for a chat completion."""

    model_config = ConfigDict(populate_by_name=True)

    temperature: Optional[float] = Field(default=None, ge=0.0, le=2.0)
    max_tokens: Optional[int] = Field(default=None, alias="maxTokens", gt=0)
    reasoning_effort: Optional[Literal["low", "medium", "high"]] = Field(
        default=None, alias="reasoningEffort"
    )


class ChatRequest(BaseModel):
    """Request model for a chat completion."""

    messages: List[ChatMessage] = Field(..., min_length=1)
    config: Optional[ChatConfig] = None


class VideoPromptContext(BaseModel):
    """Target specification folded into the video-prompt system prompt."""

    model_config = ConfigDict(populate_by_name=True)

    video_duration: Optional[int] = Field(default=None, alias="videoDuration")
    resolution: Optional[str] = None
    style: Optional[str] = None


class VideoPromptRequest(BaseModel):
    """Request model for video prompt generation."""

    prompt: str = Field(..., min_length=1)
    context: Optional[VideoPromptContext] = None


class EnhanceRequest(BaseModel):
    """Request model for prompt enhancement."""

    prompt: str = Field(..., min_length=1)
