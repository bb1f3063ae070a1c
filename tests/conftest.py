"""Shared fixtures: a gateway app wired to fake upstream APIs."""

import json

import httpx
import pytest
from fastapi.testclient import TestClient

from videogate.config import Settings, get_settings
from videogate.main import create_app
from videogate.services.http import get_http_client


class FakeUpstream:
    """Records upstream requests and answers from a route table."""

    def __init__(self):
        self.requests = []
        self.routes = {}

    def add(self, method, url, status_code=200, json_body=None, text=None):
        self.routes[(method, url)] = (status_code, json_body, text)

    def last_json(self):
        return json.loads(self.requests[-1].content)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, str(request.url))
        if key not in self.routes:
            return httpx.Response(404, json={"message": "no route"})
        status_code, json_body, text = self.routes[key]
        if text is not None:
            return httpx.Response(status_code, text=text)
        return httpx.Response(status_code, json=json_body)


@pytest.fixture
def upstream():
    """Fake upstream provider."""
    return FakeUpstream()


@pytest.fixture
def settings():
    """Settings with both providers configured and no edit delay."""
    return Settings(
        dashscope_api_key="ds-test-key",
        deepseek_api_key="deepseek-test-key",
        dashscope_base_url="https://dashscope.test/api/v1",
        llm_provider="deepseek",
        llm_model=None,
        llm_base_url=None,
        llm_reasoning_effort=None,
        edit_delay_seconds=0,
    )


@pytest.fixture
def app(settings, upstream):
    """Gateway app with settings and the upstream HTTP client overridden."""
    app = create_app()
    upstream_client = httpx.AsyncClient(transport=httpx.MockTransport(upstream))

    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_http_client] = lambda: upstream_client
    return app


@pytest.fixture
def client(app):
    """Test client for the FastAPI app."""
    return TestClient(app)
