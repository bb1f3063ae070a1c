"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings


# Generation mode -> (endpoint path under the DashScope base URL, model name)
VIDEO_GENERATION_MODES = {
    "t2v": ("/services/aigc/text2video/video-generation", "wanx-video-v2"),
    "i2v": ("/services/aigc/image2video/video-generation", "wanx-image-video"),
    "r2v": ("/services/aigc/ref2video/video-generation", "wanx-ref-video"),
}

DEFAULT_VIDEO_CFG = {
    "duration": 5,  # seconds
    "width": 1080,
    "height": 1920,
}

LLM_PROVIDER_DEFAULTS = {
    "dashscope": {
        "base_url": "https://dashscope.aliyuncs.com/api/v1",
        "model": "qwen-plus",
        "api_key_env": "DASHSCOPE_API_KEY",
    },
    "deepseek": {
        "base_url": "https://api.deepseek.com/v1",
        "model": "deepseek-chat",
        "api_key_env": "DEEPSEEK_API_KEY",
    },
    "openai": {
        "base_url": "https://api.openai.com/v1",
        "model": "gpt-4",
        "api_key_env": "OPENAI_API_KEY",
    },
    "zhipu": {
        "base_url": "https://open.bigmodel.cn/api/paas/v4",
        "model": "glm-4",
        "api_key_env": "ZHIPU_API_KEY",
    },
}


def _key_field(name: str):
    return Field(
        default=None,
        validation_alias=AliasChoices(f"VIDEOGATE_{name}", name),
    )


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Upstream credentials (plain names are accepted for compatibility)
    dashscope_api_key: Optional[str] = _key_field("DASHSCOPE_API_KEY")
    deepseek_api_key: Optional[str] = _key_field("DEEPSEEK_API_KEY")
    openai_api_key: Optional[str] = _key_field("OPENAI_API_KEY")
    zhipu_api_key: Optional[str] = _key_field("ZHIPU_API_KEY")

    # Video generation settings
    dashscope_base_url: str = "https://dashscope.aliyuncs.com/api/v1"
    upstream_timeout_seconds: float = 30.0

    # LLM settings (None falls back to the provider defaults)
    llm_provider: str = "deepseek"
    llm_model: Optional[str] = None
    llm_base_url: Optional[str] = None
    llm_temperature: float = 0.7
    llm_max_tokens: int = 4096
    llm_timeout_seconds: float = 30.0
    llm_reasoning_effort: Optional[str] = None  # low, medium or high

    # Simulated editing
    edit_delay_seconds: float = 2.0

    # Client polling defaults
    poll_interval_seconds: float = 5.0
    poll_max_attempts: int = 24  # 2 minutes at the default interval

    # API settings
    api_title: str = "Video Generation Gateway"
    api_version: str = "1.0.0"
    api_description: str = "Gateway for text/image/reference-to-video generation and LLM prompt tooling"

    @field_validator("llm_provider")
    @classmethod
    def normalize_provider(cls, v: str) -> str:
        """Provider names are matched case-insensitively."""
        return v.strip().lower()

    class Config:
        env_prefix = "VIDEOGATE_"
        case_sensitive = False
        populate_by_name = True

    def llm_api_key(self, provider: Optional[str] = None) -> Optional[str]:
        """Return the API key for an LLM provider, if configured."""
        provider = (provider or self.llm_provider).strip().lower()
        return getattr(self, f"{provider}_api_key", None)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
