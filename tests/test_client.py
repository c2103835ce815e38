"""
Tests for nutshell/client.py

Run with: pytest tests/test_client.py
"""

from unittest.mock import MagicMock, patch

import anthropic
import httpx
import pytest

from nutshell.client import CompletionClient
from nutshell.errors import ConfigurationError, ServiceError
from nutshell.prompts import SYSTEM_PROMPT, build_messages


def make_settings(**overrides):
    """Return a minimal Settings-like object for testing."""
    settings = MagicMock()
    settings.anthropic_api_key = "test-key"
    settings.configured = True
    settings.model = "claude-haiku-4-5"
    settings.temperature = 0.4
    settings.max_output_tokens = 1500
    for k, v in overrides.items():
        setattr(settings, k, v)
    return settings


def make_response(*texts: str) -> MagicMock:
    blocks = []
    for text in texts:
        block = MagicMock()
        block.type = "text"
        block.text = text
        blocks.append(block)
    response = MagicMock()
    response.content = blocks
    return response


class TestComplete:
    @patch("nutshell.client.anthropic.Anthropic")
    def test_returns_first_text_block(self, mock_cls):
        mock_client = MagicMock()
        mock_client.messages.create.return_value = make_response("first", "second")
        mock_cls.return_value = mock_client

        result = CompletionClient(make_settings()).complete(build_messages("Bitcoin"))

        assert result == "first"

    @patch("nutshell.client.anthropic.Anthropic")
    def test_sends_configured_request(self, mock_cls):
        mock_client = MagicMock()
        mock_client.messages.create.return_value = make_response("text")
        mock_cls.return_value = mock_client

        CompletionClient(make_settings(temperature=0.2)).complete(build_messages("Bitcoin"))

        mock_cls.assert_called_once_with(api_key="test-key", max_retries=0)
        kwargs = mock_client.messages.create.call_args.kwargs
        assert kwargs["model"] == "claude-haiku-4-5"
        assert kwargs["temperature"] == 0.2
        assert kwargs["max_tokens"] == 1500
        assert kwargs["system"] == SYSTEM_PROMPT
        assert kwargs["messages"] == [{"role": "user", "content": "Bitcoin"}]

    @patch("nutshell.client.anthropic.Anthropic")
    def test_sdk_client_built_once(self, mock_cls):
        mock_cls.return_value.messages.create.return_value = make_response("text")
        client = CompletionClient(make_settings())

        client.complete(build_messages("a"))
        client.complete(build_messages("b"))

        assert mock_cls.call_count == 1

    @patch("nutshell.client.anthropic.Anthropic")
    def test_skips_non_text_blocks(self, mock_cls):
        thinking = MagicMock()
        thinking.type = "thinking"
        response = make_response("answer")
        response.content.insert(0, thinking)
        mock_cls.return_value.messages.create.return_value = response

        assert CompletionClient(make_settings()).complete(build_messages("x")) == "answer"


class TestFailures:
    @patch("nutshell.client.anthropic.Anthropic")
    def test_missing_key_raises_without_calling(self, mock_cls):
        client = CompletionClient(make_settings(anthropic_api_key="", configured=False))

        with pytest.raises(ConfigurationError):
            client.complete(build_messages("Bitcoin"))

        mock_cls.assert_not_called()

    @patch("nutshell.client.anthropic.Anthropic")
    def test_empty_content_raises(self, mock_cls):
        mock_cls.return_value.messages.create.return_value = make_response()

        with pytest.raises(ServiceError, match="No content"):
            CompletionClient(make_settings()).complete(build_messages("Bitcoin"))

    @patch("nutshell.client.anthropic.Anthropic")
    def test_blank_text_raises(self, mock_cls):
        mock_cls.return_value.messages.create.return_value = make_response("   \n")

        with pytest.raises(ServiceError):
            CompletionClient(make_settings()).complete(build_messages("Bitcoin"))

    @patch("nutshell.client.anthropic.Anthropic")
    def test_api_error_is_wrapped(self, mock_cls):
        request = httpx.Request("POST", "https://api.anthropic.com/v1/messages")
        error = anthropic.APIConnectionError(request=request)
        mock_cls.return_value.messages.create.side_effect = error

        with pytest.raises(ServiceError) as excinfo:
            CompletionClient(make_settings()).complete(build_messages("Bitcoin"))

        assert excinfo.value.__cause__ is error
