"""Tests for Gemini summarisation."""

import httpx
import pytest
from unittest.mock import Mock

from domains.news.services import gemini
from domains.news.services.gemini import summarize


@pytest.fixture(autouse=True)
def api_key(monkeypatch):
    monkeypatch.setattr(gemini, "GEMINI_API_KEY", "test-key")
    monkeypatch.setattr(gemini, "GEMINI_MODEL", "gemini-test")


def _response(payload) -> Mock:
    response = Mock()
    response.json.return_value = payload
    return response


def _candidate(text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


@pytest.mark.asyncio
async def test_returns_trimmed_summary(mock_httpx_client):
    """The first candidate's text is returned without surrounding whitespace."""
    mock_httpx_client.post.return_value = _response(_candidate("  Two sentences. Exactly two.\n"))

    assert await summarize("Long article text") == "Two sentences. Exactly two."


@pytest.mark.asyncio
async def test_request_body(mock_httpx_client):
    """Prompt and generation parameters are sent as JSON."""
    mock_httpx_client.post.return_value = _response(_candidate("Summary."))

    await summarize("Article body")

    call = mock_httpx_client.post.call_args
    assert call.args[0].endswith("/gemini-test:generateContent")
    assert call.kwargs["params"] == {"key": "test-key"}

    body = call.kwargs["json"]
    assert body["contents"][0]["parts"][0]["text"] == "Summarize in 2 sentences:\nArticle body"
    assert body["generationConfig"] == {
        "temperature": 0.7,
        "candidateCount": 1,
        "maxOutputTokens": 256,
        "topP": 0.95,
        "topK": 40,
    }


@pytest.mark.asyncio
async def test_auth_error_returns_none(mock_httpx_client):
    """A rejected key degrades to no summary."""
    request = httpx.Request("POST", "https://generativelanguage.googleapis.com")
    response = _response({})
    response.raise_for_status.side_effect = httpx.HTTPStatusError(
        "403 Forbidden",
        request=request,
        response=httpx.Response(403, text="API key not valid", request=request),
    )
    mock_httpx_client.post.return_value = response

    assert await summarize("text") is None


@pytest.mark.asyncio
async def test_network_error_returns_none(mock_httpx_client):
    """Connection failures degrade to no summary."""
    mock_httpx_client.post.side_effect = httpx.ConnectError("connection refused")

    assert await summarize("text") is None


@pytest.mark.asyncio
async def test_invalid_json_returns_none(mock_httpx_client):
    """A non-JSON body degrades to no summary."""
    response = Mock()
    response.json.side_effect = ValueError("Expecting value")
    mock_httpx_client.post.return_value = response

    assert await summarize("text") is None


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [
    {},
    {"candidates": []},
    {"candidates": [{"content": {}}]},
    {"candidates": [{"content": {"parts": []}}]},
    {"candidates": [{"content": {"parts": [{"text": "   "}]}}]},
    {"promptFeedback": {"blockReason": "SAFETY"}},
])
async def test_malformed_response_returns_none(mock_httpx_client, payload):
    """Missing or blank candidate text degrades to no summary."""
    mock_httpx_client.post.return_value = _response(payload)

    assert await summarize("text") is None


@pytest.mark.asyncio
async def test_missing_key_skips_request(monkeypatch, mock_httpx_client):
    """Without a key no request is made."""
    monkeypatch.setattr(gemini, "GEMINI_API_KEY", None)

    assert await summarize("text") is None
    mock_httpx_client.post.assert_not_called()


@pytest.mark.asyncio
async def test_empty_text_skips_request(mock_httpx_client):
    """Nothing to summarise, nothing to send."""
    assert await summarize("   ") is None
    mock_httpx_client.post.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize("text", [12345, None, ["a", "b"]])
async def test_non_string_input_returns_none(mock_httpx_client, text):
    """Anything that is not text yields no summary and no request."""
    assert await summarize(text) is None
    mock_httpx_client.post.assert_not_called()
