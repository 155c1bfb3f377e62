# /tests/test_generate_router.py

import pytest
from unittest.mock import AsyncMock, MagicMock, patch
from google.api_core import exceptions as google_exceptions

from qa_suite.services import gemini_service


@pytest.fixture
def mock_generate():
    with patch.object(gemini_service, "generate_ai_response", new=AsyncMock(return_value="Hi!")) as mocked:
        yield mocked


def test_say_hi_with_empty_input_returns_response(client, mock_generate):
    response = client.post("/api/generate", json={"prompt": "Say hi", "input": ""})

    assert response.status_code == 200
    assert response.json() == {"response": "Hi!", "result": "Hi!"}
    # Empty input must still reach the upstream API.
    mock_generate.assert_awaited_once_with("Say hi", "")


def test_missing_input_is_treated_as_empty(client, mock_generate):
    response = client.post("/api/generate", json={"prompt": "Say hi"})
    assert response.status_code == 200
    mock_generate.assert_awaited_once_with("Say hi", "")


@pytest.mark.parametrize("body", [{}, {"prompt": ""}, {"prompt": None, "input": "x"}])
def test_missing_prompt_returns_400_without_upstream_call(client, mock_generate, body):
    response = client.post("/api/generate", json=body)

    assert response.status_code == 400
    assert response.json() == {"error": "Prompt is required"}
    mock_generate.assert_not_awaited()


def test_malformed_json_returns_400(client, mock_generate):
    response = client.post(
        "/api/generate",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid JSON body"}
    mock_generate.assert_not_awaited()


def test_non_object_json_returns_400(client, mock_generate):
    response = client.post("/api/generate", json=["Say hi"])
    assert response.status_code == 400
    mock_generate.assert_not_awaited()


def test_missing_api_key_returns_500(client, monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    response = client.post("/api/generate", json={"prompt": "Say hi", "input": ""})

    assert response.status_code == 500
    assert response.json() == {"error": "GEMINI_API_KEY is not configured"}


def test_upstream_non_2xx_returns_500_with_upstream_text(client, monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "bad-key")
    fake_genai = MagicMock()
    fake_genai.GenerativeModel.return_value.generate_content_async = AsyncMock(
        side_effect=google_exceptions.BadRequest("API key not valid. Please pass a valid API key.")
    )
    with patch.object(gemini_service, "genai", fake_genai):
        response = client.post("/api/generate", json={"prompt": "Say hi", "input": ""})

    assert response.status_code == 500
    assert "API key not valid" in response.json()["error"]


def test_connection_check_endpoint(client):
    with patch.object(gemini_service, "check_connection", new=AsyncMock(return_value="Hello friend!")):
        ok = client.get("/api/test")
    assert ok.status_code == 200
    assert ok.json()["success"] is True
    assert ok.json()["message"] == "Hello friend!"

    failing = AsyncMock(side_effect=gemini_service.MissingAPIKeyError("GEMINI_API_KEY is not configured"))
    with patch.object(gemini_service, "check_connection", new=failing):
        broken = client.get("/api/test")
    assert broken.status_code == 500
    assert broken.json() == {"success": False, "error": "GEMINI_API_KEY is not configured"}


def test_health_check(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["version"] == "1.0.0"
