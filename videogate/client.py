"""Async client for the gateway API, including task polling."""

import asyncio
import logging
from typing import Any, Dict, List, Optional

import httpx

from videogate.config import get_settings
from videogate.exceptions import GatewayRequestError, PollTimeoutError
from videogate.models.responses import TaskStatus
from videogate.services.http import build_async_client

logger = logging.getLogger(__name__)


def extract_task_status(response: Dict[str, Any]) -> Optional[str]:
    """Read the task status from a status response.

    Accepts a top-level `status` or the provider's `output.task_status`.
    """
    value = response.get("status")
    if not value:
        value = (response.get("output") or {}).get("task_status")
    return str(value).lower() if value else None


def is_terminal_status(value: Optional[str]) -> bool:
    """True when a status string means the task will not change again."""
    if not value:
        return False
    try:
        return TaskStatus(value.lower()).is_terminal
    except ValueError:
        return False


class GatewayClient:
    """Client for the gateway endpoints.

    Usage:
        async with GatewayClient("http://localhost:8000") as client:
            task = await client.generate_video("a cat surfing", "t2v")
            result = await client.poll_for_completion(task["output"]["task_id"])
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        timeout_seconds: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self._owns_client = client is None
        self._client = client or build_async_client(timeout_seconds, base_url=base_url)

    async def __aenter__(self) -> "GatewayClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def _request(self, method: str, path: str, **kwargs) -> Any:
        response = await self._client.request(method, path, **kwargs)
        if response.is_error:
            try:
                data = response.json()
            except ValueError:
                data = None
            message = data.get("error") if isinstance(data, dict) else None
            raise GatewayRequestError(
                message or f"HTTP error! status: {response.status_code}",
                status_code=response.status_code,
            )
        return response.json()

    # Video endpoints

    async def generate_video(
        self,
        prompt: str,
        generation_type: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        body: Dict[str, Any] = {"prompt": prompt, "type": generation_type}
        if params:
            body["params"] = params
        return await self._request("POST", "/api/video/generate", json=body)

    async def get_video_status(self, task_id: str) -> Dict[str, Any]:
        return await self._request("GET", "/api/video/status", params={"taskId": task_id})

    async def edit_video(
        self,
        input_path: str,
        output_path: str,
        options: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        body = {"inputPath": input_path, "outputPath": output_path, "options": options or {}}
        return await self._request("POST", "/api/video/edit", json=body)

    async def check_compliance(self, video_path: str) -> Dict[str, Any]:
        return await self._request("POST", "/api/video/compliance", json={"videoPath": video_path})

    async def poll_for_completion(
        self,
        task_id: str,
        interval_seconds: Optional[float] = None,
        max_attempts: Optional[int] = None,
    ) -> Dict[str, Any]:
        """
        Poll a generation task until it reaches a terminal status.

        Args:
            task_id: Task ID returned by the provider
            interval_seconds: Wait between polls (default from settings, 5s)
            max_attempts: Number of status requests before giving up (default 24)

        Returns:
            The first status response with a terminal status

        Raises:
            PollTimeoutError: if the attempt budget is exhausted
        """
        settings = get_settings()
        if interval_seconds is None:
            interval_seconds = settings.poll_interval_seconds
        if max_attempts is None:
            max_attempts = settings.poll_max_attempts

        for attempt in range(1, max_attempts + 1):
            result = await self.get_video_status(task_id)
            task_status = extract_task_status(result)
            logger.info(f"Task {task_id} attempt {attempt}/{max_attempts}: {task_status}")

            if is_terminal_status(task_status):
                return result

            await asyncio.sleep(interval_seconds)

        raise PollTimeoutError(task_id, max_attempts, interval_seconds)

    # LLM endpoints

    async def chat(
        self,
        messages: List[Dict[str, str]],
        config: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        body: Dict[str, Any] = {"messages": messages}
        if config:
            body["config"] = config
        return await self._request("POST", "/api/llm/chat", json=body)

    async def generate_video_prompt(
        self,
        prompt: str,
        context: Optional[Dict[str, Any]] = None,
    ) -> str:
        body: Dict[str, Any] = {"prompt": prompt}
        if context:
            body["context"] = context
        result = await self._request("POST", "/api/llm/VideoPrompt", json=body)
        return result["prompt"]

    async def enhance_prompt(self, prompt: str) -> Dict[str, Any]:
        return await self._request("POST", "/api/llm/enhance", json={"prompt": prompt})

    async def provider_info(self) -> Dict[str, Any]:
        return await self._request("GET", "/api/llm/info")

    async def simple_chat(self, message: str, system_prompt: Optional[str] = None) -> str:
        """Send one message and return the reply text."""
        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": message})

        response = await self.chat(messages)
        choices = response.get("choices") or []
        if not choices:
            return ""
        return (choices[0].get("message") or {}).get("content") or ""
