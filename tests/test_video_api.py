"""
Tests for the video API endpoints.

Covers:
- Payload construction and pass-through of provider responses
- Required-field validation (400)
- Missing credentials (503) and upstream failures (502)
- Simulated compliance and editing endpoints
"""

from fastapi.testclient import TestClient

from videogate.config import Settings, get_settings
from videogate.dependencies import get_video_generator

T2V_URL = "https://dashscope.test/api/v1/services/aigc/text2video/video-generation"
I2V_URL = "https://dashscope.test/api/v1/services/aigc/image2video/video-generation"
TASK_URL = "https://dashscope.test/api/v1/tasks/task-123"

CREATED = {"output": {"task_id": "task-123", "task_status": "PENDING"}, "request_id": "req-1"}


class TestGenerate:
    """Test POST /api/video/generate."""

    def test_text_to_video_is_forwarded(self, client, upstream):
        upstream.add("POST", T2V_URL, json_body=CREATED)

        response = client.post("/api/video/generate", json={"prompt": "a red kite", "type": "t2v"})

        assert response.status_code == 200
        assert response.json() == CREATED

        sent = upstream.requests[-1]
        assert sent.headers["Authorization"] == "Bearer ds-test-key"
        assert upstream.last_json() == {
            "model": "wanx-video-v2",
            "input": {"prompt": "a red kite"},
            "parameters": {"video_cfg": {"duration": 5, "width": 1080, "height": 1920}},
        }

    def test_image_to_video_merges_params(self, client, upstream):
        upstream.add("POST", I2V_URL, json_body=CREATED)

        response = client.post(
            "/api/video/generate",
            json={
                "prompt": "make it move",
                "type": "i2v",
                "params": {"image_url": "https://img.test/a.png", "video_cfg": {"duration": 10}},
            },
        )

        assert response.status_code == 200
        body = upstream.last_json()
        assert body["model"] == "wanx-image-video"
        assert body["input"] == {"prompt": "make it move", "image": "https://img.test/a.png"}
        assert body["parameters"]["video_cfg"] == {"duration": 10, "width": 1080, "height": 1920}

    def test_extra_params_are_forwarded(self, client, upstream):
        upstream.add("POST", T2V_URL, json_body=CREATED)

        client.post(
            "/api/video/generate",
            json={"prompt": "x", "type": "t2v", "params": {"seed": 7, "watermark": False}},
        )

        parameters = upstream.last_json()["parameters"]
        assert parameters["seed"] == 7
        assert parameters["watermark"] is False
        assert "image_url" not in parameters
        assert "reference_url" not in parameters

    def test_non_mapping_video_cfg_returns_400(self, client, upstream):
        response = client.post(
            "/api/video/generate",
            json={"prompt": "x", "type": "t2v", "params": {"video_cfg": "hd"}},
        )

        assert response.status_code == 400
        assert "params.video_cfg" in response.json()["error"]
        assert upstream.requests == []

    def test_missing_fields_return_400(self, client, upstream):
        response = client.post("/api/video/generate", json={})

        assert response.status_code == 400
        assert response.json() == {"error": "Missing required fields: prompt, type"}
        assert upstream.requests == []

    def test_empty_prompt_returns_400(self, client):
        response = client.post("/api/video/generate", json={"prompt": "", "type": "t2v"})

        assert response.status_code == 400
        assert "prompt" in response.json()["error"]

    def test_unknown_type_returns_400(self, client, upstream):
        response = client.post("/api/video/generate", json={"prompt": "x", "type": "v2v"})

        assert response.status_code == 400
        assert "type" in response.json()["error"]
        assert upstream.requests == []

    def test_missing_api_key_returns_503(self, client, settings, upstream):
        settings.dashscope_api_key = None

        response = client.post("/api/video/generate", json={"prompt": "x", "type": "t2v"})

        assert response.status_code == 503
        assert response.json() == {"error": "DASHSCOPE_API_KEY is not configured"}
        assert upstream.requests == []

    def test_upstream_failure_returns_502(self, client, upstream):
        upstream.add("POST", T2V_URL, status_code=401, text="InvalidApiKey")

        response = client.post("/api/video/generate", json={"prompt": "x", "type": "t2v"})

        assert response.status_code == 502
        assert response.json() == {"error": "API request failed: 401 InvalidApiKey"}


class TestStatus:
    """Test GET /api/video/status."""

    def test_status_is_forwarded(self, client, upstream):
        task = {"output": {"task_id": "task-123", "task_status": "SUCCEEDED", "video_url": "https://v.test/1.mp4"}}
        upstream.add("GET", TASK_URL, json_body=task)

        response = client.get("/api/video/status", params={"taskId": "task-123"})

        assert response.status_code == 200
        assert response.json() == task

    def test_missing_task_id_returns_400(self, client):
        response = client.get("/api/video/status")

        assert response.status_code == 400
        assert response.json() == {"error": "Missing taskId parameter"}

    def test_missing_api_key_returns_503(self, client, settings):
        settings.dashscope_api_key = ""

        response = client.get("/api/video/status", params={"taskId": "task-123"})

        assert response.status_code == 503


class TestCompliance:
    """Test POST /api/video/compliance."""

    def test_mock_video_is_compliant(self, client):
        response = client.post("/api/video/compliance", json={"videoPath": "/videos/clip.mp4"})

        assert response.status_code == 200
        assert response.json() == {"compliant": True, "issues": [], "recommendations": []}

    def test_missing_video_path_returns_400(self, client):
        response = client.post("/api/video/compliance", json={})

        assert response.status_code == 400
        assert response.json() == {"error": "Missing required fields: videoPath"}


class TestEdit:
    """Test POST /api/video/edit."""

    def test_edit_reports_success(self, client):
        response = client.post(
            "/api/video/edit",
            json={
                "inputPath": "in.mp4",
                "outputPath": "out.mp4",
                "options": {"removeAudio": True, "targetResolution": "720p"},
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["message"] == "Video processed successfully"
        assert data["operations"] == ["remove audio", "resize to 720p"]

    def test_null_options_are_accepted(self, client):
        response = client.post(
            "/api/video/edit",
            json={"inputPath": "in.mp4", "outputPath": "out.mp4", "options": None},
        )

        assert response.status_code == 200
        assert response.json()["success"] is True
        assert response.json()["operations"] == []

    def test_missing_paths_return_400(self, client):
        response = client.post("/api/video/edit", json={"inputPath": "in.mp4"})

        assert response.status_code == 400
        assert response.json() == {"error": "Missing required fields: outputPath"}


class TestHttpBehaviour:
    """Test CORS, routing errors and the index endpoints."""

    def test_cors_preflight(self, client):
        response = client.options(
            "/api/video/generate",
            headers={
                "Origin": "https://ui.test",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "Content-Type",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"

    def test_wrong_method_returns_405(self, client):
        response = client.get("/api/video/generate")

        assert response.status_code == 405
        assert response.json() == {"error": "Method Not Allowed"}

    def test_unknown_path_returns_404(self, client):
        response = client.get("/api/video/unknown")

        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}

    def test_api_index_lists_endpoints(self, client):
        response = client.get("/api")

        assert response.status_code == 200
        assert any(e.startswith("/api/video/generate") for e in response.json()["endpoints"])

    def test_health_reports_configuration(self, client, settings):
        assert client.get("/health").json()["status"] == "healthy"

        settings.deepseek_api_key = None
        data = client.get("/health").json()
        assert data["status"] == "degraded"
        assert data["llm_configured"] is False
        assert data["dashscope_configured"] is True

    def test_unexpected_error_keeps_cors_headers(self, app):
        class BrokenGenerator:
            async def generate(self, prompt, generation_type, params=None):
                raise RuntimeError("boom")

        app.dependency_overrides[get_video_generator] = lambda: BrokenGenerator()
        client = TestClient(app)

        response = client.post(
            "/api/video/generate",
            json={"prompt": "x", "type": "t2v"},
            headers={"Origin": "https://ui.test"},
        )

        assert response.status_code == 500
        assert response.json() == {"error": "An error occurred"}
        assert response.headers["access-control-allow-origin"] == "*"

    def test_provider_name_is_case_insensitive(self, app):
        settings = Settings(
            llm_provider="DeepSeek",
            deepseek_api_key="k",
            dashscope_api_key="d",
        )
        app.dependency_overrides[get_settings] = lambda: settings
        client = TestClient(app)

        assert settings.llm_provider == "deepseek"
        health = client.get("/health").json()
        assert health["status"] == "healthy"
        assert health["llm_configured"] is True
        assert client.get("/api/llm/info").json()["status"] == "configured"
