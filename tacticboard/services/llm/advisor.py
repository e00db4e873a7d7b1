"""Coach remarks and chat replies backed by the LLM client."""

import logging
from typing import Optional

from ...config import Settings, get_settings
from .client import LLMClient, LLMError, LLMRequestError, get_llm_client
from .prompts import SYSTEM_PROMPTS, build_advisory_prompt

logger = logging.getLogger(__name__)

CHAT_EMPTY_REPLY = "The boss has no time for small talk."
CHAT_FAILURE_REPLY = "The boss did not answer... probably arguing with the referee again."


def fallback_remark(formation: str, phase: str) -> str:
    """Deterministic remark used whenever the LLM cannot be reached."""
    return f"The opponent plays a {formation} and we are in the {phase} phase."


class CoachAdvisor:
    """Generates the coach's natural-language comments."""

    def __init__(self, client: LLMClient, settings: Optional[Settings] = None):
        self.client = client
        self.settings = settings or get_settings()

    async def remark(self, formation: str, phase: str) -> str:
        """One-line tactical remark; never raises."""
        fallback = fallback_remark(formation, phase)
        if not self.client.is_configured:
            return fallback

        try:
            text = await self.client.complete(
                messages=[{"role": "user", "content": build_advisory_prompt(formation, phase)}],
                system=SYSTEM_PROMPTS["advisor"],
                max_tokens=self.settings.advisor_max_tokens,
                temperature=self.settings.advisor_temperature,
            )
        except LLMError as e:
            logger.warning(f"Advisory remark failed, using fallback: {e}")
            return fallback
        return text or fallback

    async def reply(self, message: str) -> str:
        """Answer a chat message in the coach persona.

        Raises LLMNotConfiguredError when no credential is set; request
        failures return a canned reply.
        """
        try:
            text = await self.client.complete(
                messages=[{"role": "user", "content": message}],
                system=SYSTEM_PROMPTS["chat"],
                max_tokens=self.settings.chat_max_tokens,
                temperature=self.settings.chat_temperature,
            )
        except LLMRequestError as e:
            logger.error(f"Chat completion failed: {e}")
            return CHAT_FAILURE_REPLY
        return text or CHAT_EMPTY_REPLY


def get_coach_advisor() -> CoachAdvisor:
    """FastAPI dependency for the shared advisor."""
    return CoachAdvisor(get_llm_client())
