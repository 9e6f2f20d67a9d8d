"""
Tests for the OpenAI request wrapper and JSON parsing.
"""

import pytest
from openai import OpenAIError

from pdf_digest.errors import LLMTransportError, SummaryDecodeError
from pdf_digest.models.llm_client import LLMConfig, call_llm, parse_json_or_throw
from tests.conftest import fake_client


class TestCallLLM:
    """Test request building and transport failures."""

    def test_returns_message_content(self):
        """The first choice's content is returned verbatim."""
        client = fake_client("  reply text ")
        out = call_llm("sys", "user", LLMConfig(model="gpt-4o"), client=client)
        assert out == "  reply text "

    def test_request_payload(self):
        """Messages, temperature and JSON mode are sent."""
        client = fake_client("{}")
        call_llm("sys", "user", LLMConfig(model="gpt-4o", temperature=0.3), json_mode=True, client=client)

        request = client.chat.completions.create.call_args.kwargs
        assert request["model"] == "gpt-4o"
        assert request["messages"] == [
            {"role": "system", "content": "sys"},
            {"role": "user", "content": "user"},
        ]
        assert request["temperature"] == 0.3
        assert request["response_format"] == {"type": "json_object"}
        assert "seed" not in request
        assert "max_completion_tokens" not in request

    def test_plain_mode_has_no_response_format(self):
        """Free-text calls do not request JSON."""
        client = fake_client("text")
        call_llm("sys", "user", LLMConfig(model="gpt-4o"), client=client)
        assert "response_format" not in client.chat.completions.create.call_args.kwargs

    def test_api_error_wrapped(self):
        """Client errors become LLMTransportError."""
        client = fake_client(OpenAIError("connection reset"))
        with pytest.raises(LLMTransportError, match="connection reset"):
            call_llm("sys", "user", LLMConfig(model="gpt-4o"), client=client)

    def test_empty_message_is_transport_error(self):
        """A missing message body is treated as a transport failure."""
        client = fake_client(None)
        with pytest.raises(LLMTransportError):
            call_llm("sys", "user", LLMConfig(model="gpt-4o"), client=client)


class TestParseJson:
    """Test strict JSON parsing."""

    def test_object(self):
        assert parse_json_or_throw('{"title": "x"}') == {"title": "x"}

    @pytest.mark.parametrize("text", ["not json", "```json\n{}\n```", "[1, 2]", ""])
    def test_rejects_non_objects(self, text):
        """Anything but a bare JSON object raises SummaryDecodeError."""
        with pytest.raises(SummaryDecodeError):
            parse_json_or_throw(text)
