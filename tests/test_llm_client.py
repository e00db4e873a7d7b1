"""Tests for the LLM client and coach advisor."""

import asyncio
import json
import sys
import os

import httpx
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from tacticboard.config import Settings
from tacticboard.services.llm import (
    CoachAdvisor,
    LLMClient,
    LLMNotConfiguredError,
    LLMRequestError,
    SYSTEM_PROMPTS,
    build_advisory_prompt,
    fallback_remark,
)


def make_client(handler, **overrides):
    settings = Settings(openrouter_key="test-key", llm_provider="openrouter", **overrides)
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return LLMClient(settings=settings, http_client=http_client)


def completion(text):
    return {"choices": [{"message": {"role": "assistant", "content": text}}]}


class TestOpenAICompatible:
    """Requests against an OpenAI-compatible endpoint."""

    def test_payload_and_headers(self):
        """Test payload and headers."""
        seen = {}

        def handler(request):
            seen["url"] = str(request.url)
            seen["auth"] = request.headers["Authorization"]
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json=completion("  Mister here.  "))

        client = make_client(handler)
        text = asyncio.run(client.complete(
            messages=[{"role": "user", "content": "hello"}],
            system="persona",
            max_tokens=80,
            temperature=0.8,
        ))

        assert text == "Mister here."
        assert seen["url"] == "https://openrouter.ai/api/v1/chat/completions"
        assert seen["auth"] == "Bearer test-key"
        assert seen["body"]["model"] == "gpt-4o-mini"
        assert seen["body"]["max_tokens"] == 80
        assert seen["body"]["messages"] == [
            {"role": "system", "content": "persona"},
            {"role": "user", "content": "hello"},
        ]

    def test_http_error_raises_request_error(self):
        """Test http error raises request error."""
        client = make_client(lambda request: httpx.Response(503, json={"error": "down"}))
        with pytest.raises(LLMRequestError):
            asyncio.run(client.complete(messages=[{"role": "user", "content": "hi"}]))

    def test_transport_error_raises_request_error(self):
        """Test transport error raises request error."""
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        client = make_client(handler)
        with pytest.raises(LLMRequestError):
            asyncio.run(client.complete(messages=[{"role": "user", "content": "hi"}]))

    def test_unexpected_payload_is_empty(self):
        """Test unexpected payload is empty."""
        client = make_client(lambda request: httpx.Response(200, json={"choices": []}))
        assert asyncio.run(client.complete(messages=[])) == ""

    def test_missing_key(self):
        """Test missing key."""
        client = LLMClient(settings=Settings(openrouter_key="", llm_provider="openrouter"))
        assert not client.is_configured
        with pytest.raises(LLMNotConfiguredError, match="OPENROUTER_KEY"):
            asyncio.run(client.complete(messages=[]))

    def test_anthropic_key_name(self):
        """Test anthropic key name."""
        client = LLMClient(settings=Settings(anthropic_api_key="", llm_provider="anthropic"))
        with pytest.raises(LLMNotConfiguredError, match="ANTHROPIC_API_KEY"):
            asyncio.run(client.complete(messages=[]))


class TestCoachAdvisor:
    """Remarks and chat replies."""

    def test_remark_uses_advisor_prompt(self):
        """Test remark uses advisor prompt."""
        seen = {}

        def handler(request):
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json=completion("Close the middle."))

        client = make_client(handler)
        advisor = CoachAdvisor(client, client.settings)
        text = asyncio.run(advisor.remark("4-4-2", "defense"))

        assert text == "Close the middle."
        assert seen["body"]["messages"][0] == {"role": "system", "content": SYSTEM_PROMPTS["advisor"]}
        assert seen["body"]["messages"][1]["content"] == build_advisory_prompt("4-4-2", "defense")
        assert seen["body"]["max_tokens"] == 80

    def test_remark_falls_back_on_failure(self):
        """Test remark falls back on failure."""
        client = make_client(lambda request: httpx.Response(500))
        advisor = CoachAdvisor(client, client.settings)
        assert asyncio.run(advisor.remark("3-5-2", "attack")) == fallback_remark("3-5-2", "attack")

    def test_remark_falls_back_on_empty_text(self):
        """Test remark falls back on empty text."""
        client = make_client(lambda request: httpx.Response(200, json=completion("")))
        advisor = CoachAdvisor(client, client.settings)
        assert asyncio.run(advisor.remark("4-3-3", "neutral")) == fallback_remark("4-3-3", "neutral")

    def test_reply_propagates_missing_key(self):
        """Test reply propagates missing key."""
        settings = Settings(openrouter_key="", llm_provider="openrouter")
        advisor = CoachAdvisor(LLMClient(settings=settings), settings)
        with pytest.raises(LLMNotConfiguredError):
            asyncio.run(advisor.reply("hi"))


class TestPrompts:
    def test_advisory_prompt_describes_shape(self):
        """Test advisory prompt describes shape."""
        assert "pushed up" in build_advisory_prompt("4-3-3", "defense")
        assert "sitting deep" in build_advisory_prompt("4-3-3", "attack")
        assert "4-3-3" in build_advisory_prompt("4-3-3", "neutral")
