from unittest.mock import MagicMock, patch

import httpx
import openai
import pytest

from docextract.invocation.exceptions import InvocationError, InvocationNetworkError
from docextract.invocation.models import TokenUsage
from docextract.invocation.openai_client_adapter import OpenAIClientAdapter

IMAGE_URL = "data:image/png;base64,AAAA"


def _make_mock_response(content: str | None, usage: object | None = None) -> MagicMock:
    choice = MagicMock()
    choice.message.content = content
    response = MagicMock()
    response.choices = [choice]
    response.usage = usage
    return response


def _complete(mock_client: MagicMock) -> object:
    with patch(
        "docextract.invocation.openai_client_adapter.openai.OpenAI",
        return_value=mock_client,
    ):
        adapter = OpenAIClientAdapter(api_key="k", timeout_seconds=30, base_url=None)
        return adapter.create_vision_completion(
            model="gpt-4o",
            instruction="extract",
            image_url=IMAGE_URL,
            max_tokens=1000,
        )


class TestOpenAIClientAdapter:
    def test_returns_content_and_usage(self) -> None:
        usage = MagicMock(prompt_tokens=120, completion_tokens=30, total_tokens=150)
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response(
            '{"ok": true}', usage
        )

        completion = _complete(mock_client)

        assert completion.content == '{"ok": true}'
        assert completion.usage == TokenUsage(
            prompt_tokens=120, completion_tokens=30, total_tokens=150
        )

    def test_missing_usage_defaults_to_zero(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response("{}", None)

        completion = _complete(mock_client)

        assert completion.usage == TokenUsage()

    def test_partial_usage_defaults_missing_counters(self) -> None:
        usage = MagicMock(prompt_tokens=7, completion_tokens=None, total_tokens=None)
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response("{}", usage)

        completion = _complete(mock_client)

        assert completion.usage == TokenUsage(prompt_tokens=7)

    def test_sends_instruction_and_inline_image(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response("{}")

        _complete(mock_client)

        kwargs = mock_client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "gpt-4o"
        assert kwargs["max_tokens"] == 1000
        assert kwargs["response_format"] == {"type": "json_object"}
        content = kwargs["messages"][0]["content"]
        assert content[0] == {"type": "text", "text": "extract"}
        assert content[1] == {"type": "image_url", "image_url": {"url": IMAGE_URL}}

    def test_raises_error_for_empty_content(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response(None)
        with pytest.raises(InvocationError, match="empty response"):
            _complete(mock_client)

    def test_raises_error_for_no_choices(self) -> None:
        response = MagicMock()
        response.choices = []
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = response
        with pytest.raises(InvocationError, match="no choices"):
            _complete(mock_client)

    def test_raises_network_error_on_connection_failure(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = openai.APIConnectionError(
            request=MagicMock()
        )
        with pytest.raises(InvocationNetworkError, match="network error"):
            _complete(mock_client)

    def test_raises_network_error_on_timeout(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = httpx.TimeoutException("timeout")
        with pytest.raises(InvocationNetworkError, match="network error"):
            _complete(mock_client)

    def test_raises_network_error_on_api_error(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = openai.APIError(
            message="model not found",
            request=MagicMock(),
            body=None,
        )
        with pytest.raises(InvocationNetworkError, match="API error"):
            _complete(mock_client)
