"""Error handling tests: SDK failures map to ProviderRequestError, nothing is retried."""

from __future__ import annotations

import logging
from unittest.mock import AsyncMock, MagicMock, Mock, patch

import pytest
from anthropic import APIError as AnthropicAPIError
from google.api_core import exceptions as google_exceptions
from openai import APIError as OpenAIAPIError

from gitscribe.llm.claude import ClaudeProvider
from gitscribe.llm.gemini import GeminiProvider
from gitscribe.llm.models import GitscribeError, LLMError, ProviderRequestError
from gitscribe.llm.openai_adapter import OpenAIProvider


@pytest.mark.asyncio
async def test_claude_provider_wraps_api_error(claude_config):
    """Claude adapter wraps APIError in ProviderRequestError."""
    provider = ClaudeProvider(claude_config)
    create = AsyncMock(
        side_effect=AnthropicAPIError(message="overloaded_error", request=Mock(), body=None)
    )

    with patch.object(provider._client.messages, "create", new=create):
        with pytest.raises(ProviderRequestError) as exc_info:
            await provider.generate("diff --git a/x b/x")

    assert exc_info.value.provider == "claude"
    assert exc_info.value.operation == "generate"
    assert "overloaded_error" in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, AnthropicAPIError)
    assert create.await_count == 1


@pytest.mark.asyncio
async def test_openai_provider_wraps_api_error(openai_config):
    """OpenAI adapter wraps APIError in ProviderRequestError."""
    provider = OpenAIProvider(openai_config)
    create = AsyncMock(
        side_effect=OpenAIAPIError(message="model_not_found", request=Mock(), body=None)
    )

    with patch.object(provider._client.chat.completions, "create", new=create):
        with pytest.raises(ProviderRequestError) as exc_info:
            await provider.generate("diff --git a/x b/x")

    assert exc_info.value.provider == "openai"
    assert "model_not_found" in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, OpenAIAPIError)
    assert create.await_count == 1


@pytest.mark.asyncio
@patch("gitscribe.llm.gemini.genai")
async def test_gemini_provider_wraps_api_error(mock_genai, gemini_config):
    """Gemini adapter wraps GoogleAPIError in ProviderRequestError."""
    mock_model = MagicMock()
    mock_model.generate_content_async = AsyncMock(
        side_effect=google_exceptions.ResourceExhausted("quota exceeded")
    )
    mock_genai.GenerativeModel.return_value = mock_model
    provider = GeminiProvider(gemini_config)

    with pytest.raises(ProviderRequestError) as exc_info:
        await provider.generate("diff --git a/x b/x")

    assert exc_info.value.provider == "gemini"
    assert "quota exceeded" in str(exc_info.value)
    assert mock_model.generate_content_async.await_count == 1


def test_provider_request_error_hierarchy():
    err = ProviderRequestError("claude", "generate", RuntimeError("boom"))
    assert isinstance(err, LLMError)
    assert isinstance(err, GitscribeError)
    assert str(err) == "claude generate failed: boom"


@pytest.mark.asyncio
async def test_api_key_never_logged(claude_config, caplog):
    provider = ClaudeProvider(claude_config)
    create = AsyncMock(side_effect=AnthropicAPIError(message="denied", request=Mock(), body=None))

    with caplog.at_level(logging.DEBUG):
        with patch.object(provider._client.messages, "create", new=create):
            with pytest.raises(ProviderRequestError):
                await provider.generate("diff --git a/x b/x")

    assert "denied" in caplog.text
    assert claude_config.api_key not in caplog.text
