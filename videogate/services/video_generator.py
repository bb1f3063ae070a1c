"""DashScope video generation client (text, image and reference to video)."""

import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx

from videogate.config import DEFAULT_VIDEO_CFG, VIDEO_GENERATION_MODES, Settings
from videogate.exceptions import MissingCredentialsError, UnsupportedGenerationTypeError
from videogate.services.http import send_json

logger = logging.getLogger(__name__)

# params key copied into the upstream `input` block, per mode
_MODE_INPUT_KEYS = {
    "i2v": ("image", "image_url"),
    "r2v": ("reference", "reference_url"),
}


def build_generation_payload(
    prompt: str,
    generation_type: str,
    params: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Build the upstream request body for a generation mode.

    All caller params are forwarded as `parameters`; `video_cfg` is the
    default 5s 1080x1920 config overlaid with the caller's `video_cfg`.
    """
    if generation_type not in VIDEO_GENERATION_MODES:
        raise UnsupportedGenerationTypeError(generation_type)

    params = dict(params or {})
    _, model = VIDEO_GENERATION_MODES[generation_type]

    input_block: Dict[str, Any] = {"prompt": prompt}
    if generation_type in _MODE_INPUT_KEYS:
        input_key, params_key = _MODE_INPUT_KEYS[generation_type]
        if params_key in params:
            input_block[input_key] = params[params_key]

    video_cfg = dict(DEFAULT_VIDEO_CFG)
    video_cfg.update(params.get("video_cfg") or {})

    return {
        "model": model,
        "input": input_block,
        "parameters": {**params, "video_cfg": video_cfg},
    }


class VideoGenerator:
    """Forwards generation and task-status requests to DashScope."""

    def __init__(self, settings: Settings, client: httpx.AsyncClient):
        self._settings = settings
        self._client = client

    @property
    def is_configured(self) -> bool:
        return bool(self._settings.dashscope_api_key)

    def _api_key(self) -> str:
        if not self._settings.dashscope_api_key:
            raise MissingCredentialsError("DASHSCOPE_API_KEY")
        return self._settings.dashscope_api_key

    def _url(self, path: str) -> str:
        return self._settings.dashscope_base_url.rstrip("/") + path

    async def generate(
        self,
        prompt: str,
        generation_type: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Submit a generation request and return the upstream response unmodified."""
        api_key = self._api_key()
        payload = build_generation_payload(prompt, generation_type, params)
        path, _ = VIDEO_GENERATION_MODES[generation_type]

        logger.info(f"Submitting {generation_type} generation with model {payload['model']}")
        result = await send_json(
            self._client,
            "POST",
            self._url(path),
            api_key,
            label="API request",
            payload=payload,
        )

        task_id = (result.get("output") or {}).get("task_id") if isinstance(result, dict) else None
        if task_id:
            logger.info(f"Generation task created: {task_id}")
        return result

    async def get_task(self, task_id: str) -> Any:
        """Fetch a task's status from the provider, unmodified."""
        api_key = self._api_key()
        return await send_json(
            self._client,
            "GET",
            self._url(f"/tasks/{quote(task_id, safe='')}"),
            api_key,
            label="Polling request",
        )
