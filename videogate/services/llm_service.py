"""OpenAI-compatible chat client used for prompt writing and enhancement."""

import json
import logging
from typing import Any, Dict, List, Optional

import httpx

from videogate.config import LLM_PROVIDER_DEFAULTS, Settings
from videogate.exceptions import GatewayError, MissingCredentialsError
from videogate.services.http import send_json

logger = logging.getLogger(__name__)

VIDEO_PROMPT_SYSTEM = (
    "You are an expert at creating detailed video generation prompts. "
    "Your task is to transform user descriptions into detailed, structured prompts "
    "optimized for AI video generation. "
    "Include specific visual details, camera movements, lighting, style, and composition."
)

ENHANCE_SYSTEM = """You are an expert prompt engineer for AI video generation.
Analyze the given prompt and provide:
1. An enhanced version with more visual details
2. Suggestions for improvement
3. Important keywords extracted

Respond in the following JSON format:
{
  "enhancedPrompt": "detailed enhanced prompt",
  "suggestions": ["suggestion 1", "suggestion 2"],
  "keywords": ["keyword1", "keyword2"]
}"""


def build_video_prompt_system(context: Optional[Dict[str, Any]] = None) -> str:
    """Build the system prompt, appending any target specifications."""
    system_prompt = VIDEO_PROMPT_SYSTEM
    if not context:
        return system_prompt

    details = []
    if context.get("video_duration"):
        details.append(f"Duration: {context['video_duration']} seconds")
    if context.get("resolution"):
        details.append(f"Resolution: {context['resolution']}")
    if context.get("style"):
        details.append(f"Style: {context['style']}")

    if details:
        system_prompt += "\n\nTarget specifications:\n" + "\n".join(details)
    return system_prompt


def first_choice_content(response: Dict[str, Any]) -> str:
    """Return the text of the first completion choice, or an empty string."""
    choices = response.get("choices") or []
    if not choices:
        return ""
    message = choices[0].get("message") or {}
    return message.get("content") or ""


def _string_list(value: Any) -> List[str]:
    """Keep only the string items of a list; anything else becomes empty."""
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]


def parse_enhancement(content: str, original_prompt: str) -> Dict[str, Any]:
    """Parse the model's JSON reply; fall back to the original prompt."""
    try:
        parsed = json.loads(content)
    except ValueError:
        logger.warning("Enhancement reply was not valid JSON, returning original prompt")
        parsed = {}
    if not isinstance(parsed, dict):
        parsed = {}

    enhanced = parsed.get("enhancedPrompt")
    return {
        "enhanced_prompt": enhanced if isinstance(enhanced, str) and enhanced else original_prompt,
        "suggestions": _string_list(parsed.get("suggestions")),
        "keywords": _string_list(parsed.get("keywords")),
    }


class LLMService:
    """Chat completion client for the configured LLM provider."""

    def __init__(self, settings: Settings, client: httpx.AsyncClient):
        self._settings = settings
        self._client = client
        provider = settings.llm_provider.lower()
        if provider not in LLM_PROVIDER_DEFAULTS:
            raise GatewayError(f"Unknown LLM provider: {settings.llm_provider}")
        self.provider = provider
        self._defaults = LLM_PROVIDER_DEFAULTS[provider]

    @property
    def base_url(self) -> str:
        return (self._settings.llm_base_url or self._defaults["base_url"]).rstrip("/")

    @property
    def model(self) -> str:
        return self._settings.llm_model or self._defaults["model"]

    @property
    def api_key(self) -> Optional[str]:
        return self._settings.llm_api_key(self.provider)

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key and self.base_url and self.model)

    async def chat(
        self,
        messages: List[Dict[str, str]],
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        reasoning_effort: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Create a chat completion.

        Args:
            messages: Chat messages as role/content dicts
            temperature: Overrides the configured temperature
            max_tokens: Overrides the configured token limit
            reasoning_effort: Sent only for deepseek models

        Returns:
            The provider's completion response, unmodified
        """
        if not self.api_key:
            raise MissingCredentialsError(self._defaults["api_key_env"], provider=self.provider)

        settings = self._settings
        body: Dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "temperature": temperature if temperature is not None else settings.llm_temperature,
            "max_tokens": max_tokens or settings.llm_max_tokens,
            "stream": False,
        }

        effort = reasoning_effort or settings.llm_reasoning_effort
        if effort and "deepseek" in self.model:
            body["reasoning_effort"] = effort

        logger.info(f"Chat completion via {self.provider} ({self.model}), {len(messages)} messages")
        return await send_json(
            self._client,
            "POST",
            f"{self.base_url}/chat/completions",
            self.api_key,
            label=f"{self.provider} API request",
            payload=body,
            timeout_seconds=settings.llm_timeout_seconds,
        )

    async def generate_video_prompt(
        self,
        prompt: str,
        context: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Turn a short description into a detailed video generation prompt."""
        messages = [
            {"role": "system", "content": build_video_prompt_system(context)},
            {"role": "user", "content": f"Generate a detailed video generation prompt: {prompt}"},
        ]
        response = await self.chat(messages)
        return first_choice_content(response)

    async def enhance_prompt(self, prompt: str) -> Dict[str, Any]:
        """Ask the model for an enhanced prompt, suggestions and keywords."""
        messages = [
            {"role": "system", "content": ENHANCE_SYSTEM},
            {"role": "user", "content": prompt},
        ]
        response = await self.chat(messages)
        return parse_enhancement(first_choice_content(response) or "{}", prompt)

    def provider_info(self) -> Dict[str, Any]:
        """Describe the active provider without contacting it."""
        info = {
            "provider": self.provider,
            "model": self.model,
            "base_url": self.base_url,
            "status": "configured" if self.is_configured else "not_configured",
        }
        if not self.is_configured:
            info["message"] = f"Set {self._defaults['api_key_env']} to enable {self.provider}"
        return info
