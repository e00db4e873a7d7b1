"""LLM client supporting multiple providers (OpenRouter, Anthropic)."""

from typing import Optional
from functools import lru_cache
import logging

import httpx

from ...config import Settings, get_settings

logger = logging.getLogger(__name__)


class LLMError(Exception):
    """Base error for completion API failures."""


class LLMNotConfiguredError(LLMError):
    """No credential is configured for the selected provider."""


class LLMRequestError(LLMError):
    """The completion call failed or returned an unusable payload."""


class LLMClient:
    """Unified async LLM client supporting multiple providers."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.settings = settings or get_settings()
        self.provider = self.settings.llm_provider
        self.model = self.settings.llm_model
        self.api_base = self.settings.llm_api_base.rstrip("/")
        self._http_client = http_client
        self._anthropic = None

    @property
    def api_key(self) -> str:
        if self.provider == "anthropic":
            return self.settings.anthropic_api_key
        return self.settings.openrouter_key

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    @property
    def key_name(self) -> str:
        return "ANTHROPIC_API_KEY" if self.provider == "anthropic" else "OPENROUTER_KEY"

    async def complete(
        self,
        messages: list[dict],
        system: str = "",
        max_tokens: int = 200,
        temperature: float = 0.7,
    ) -> str:
        """Send a chat completion and return the stripped reply text.

        Raises:
            LLMNotConfiguredError: no API key for the provider.
            LLMRequestError: transport, status or payload failure.
        """
        if not self.is_configured:
            raise LLMNotConfiguredError(f"{self.key_name} is not configured")

        if self.provider == "anthropic":
            return await self._anthropic_complete(messages, system, max_tokens, temperature)
        return await self._openai_compatible_complete(messages, system, max_tokens, temperature)

    async def _anthropic_complete(
        self,
        messages: list[dict],
        system: str,
        max_tokens: int,
        temperature: float,
    ) -> str:
        """Anthropic Claude API call."""
        import anthropic

        if self._anthropic is None:
            self._anthropic = anthropic.AsyncAnthropic(
                api_key=self.api_key,
                timeout=self.settings.llm_timeout,
            )

        kwargs = {
            "model": self.model,
            "max_tokens": max_tokens,
            "temperature": temperature,
            "messages": messages,
        }
        if system:
            kwargs["system"] = system

        try:
            response = await self._anthropic.messages.create(**kwargs)
        except anthropic.APIError as e:
            raise LLMRequestError(f"Anthropic request failed: {e}") from e

        text = "".join(
            block.text for block in response.content if getattr(block, "type", None) == "text"
        )
        return text.strip()

    async def _openai_compatible_complete(
        self,
        messages: list[dict],
        system: str,
        max_tokens: int,
        temperature: float,
    ) -> str:
        """OpenAI-compatible API call (OpenRouter, etc.)."""
        all_messages = []
        if system:
            all_messages.append({"role": "system", "content": system})
        all_messages.extend(messages)

        payload = {
            "model": self.model,
            "messages": all_messages,
            "max_tokens": max_tokens,
            "temperature": temperature,
        }

        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=self.settings.llm_timeout)

        try:
            response = await self._http_client.post(
                f"{self.api_base}/chat/completions",
                json=payload,
                headers={
                    "Authorization": f"Bearer {self.api_key}",
                    "Content-Type": "application/json",
                },
            )
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise LLMRequestError(f"Completion request failed: {e}") from e

        try:
            content = data["choices"][0]["message"].get("content") or ""
        except (KeyError, IndexError, TypeError, AttributeError):
            logger.warning(f"Unexpected completion payload: {str(data)[:200]}")
            return ""
        return content.strip()

    async def close(self):
        """Close the client."""
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
        if self._anthropic is not None:
            await self._anthropic.close()
            self._anthropic = None


@lru_cache()
def get_llm_client() -> LLMClient:
    """Get cached LLM client instance."""
    return LLMClient()
