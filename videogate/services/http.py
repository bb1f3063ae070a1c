"""Shared httpx client for upstream calls."""

import logging
from typing import Optional

import httpx

from videogate.config import get_settings
from videogate.exceptions import UpstreamError

logger = logging.getLogger(__name__)


def build_async_client(timeout_seconds: float, **kwargs) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with the gateway's default headers."""
    headers = {"Content-Type": "application/json"}
    headers.update(kwargs.pop("headers", {}))
    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout_seconds),
        headers=headers,
        **kwargs,
    )


# Global instance
_http_client: Optional[httpx.AsyncClient] = None


def get_http_client() -> httpx.AsyncClient:
    """Get the global upstream HTTP client."""
    global _http_client
    if _http_client is None or _http_client.is_closed:
        settings = get_settings()
        _http_client = build_async_client(settings.upstream_timeout_seconds)
        logger.info("Upstream HTTP client created")
    return _http_client


async def close_http_client() -> None:
    """Close the global upstream HTTP client."""
    global _http_client
    if _http_client is not None:
        await _http_client.aclose()
        _http_client = None
        logger.info("Upstream HTTP client closed")


async def send_json(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    api_key: str,
    label: str,
    payload: Optional[dict] = None,
    timeout_seconds: Optional[float] = None,
):
    """Send an authenticated JSON request upstream and return the decoded body.

    Raises:
        UpstreamError: on transport failure, a non-2xx status or a non-JSON body
    """
    kwargs = {"headers": {"Authorization": f"Bearer {api_key}"}}
    if payload is not None:
        kwargs["json"] = payload
    if timeout_seconds is not None:
        kwargs["timeout"] = httpx.Timeout(timeout_seconds)

    try:
        response = await client.request(method, url, **kwargs)
    except httpx.HTTPError as e:
        logger.error(f"{label} to {url} failed: {e}")
        raise UpstreamError(f"{label} failed: {e}") from e

    logger.info(f"{method} {url} -> {response.status_code}")

    if response.is_error:
        raise UpstreamError(
            f"{label} failed: {response.status_code} {response.text}",
            status_code=response.status_code,
            body=response.text,
        )

    try:
        return response.json()
    except ValueError as e:
        raise UpstreamError(
            f"{label} returned a non-JSON body",
            status_code=response.status_code,
            body=response.text,
        ) from e
