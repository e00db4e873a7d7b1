"""LLM service module for coach remarks and chat."""

from .client import (
    LLMClient,
    LLMError,
    LLMNotConfiguredError,
    LLMRequestError,
    get_llm_client,
)
from .prompts import SYSTEM_PROMPTS, build_advisory_prompt
from .advisor import CoachAdvisor, fallback_remark, get_coach_advisor

__all__ = [
    "LLMClient",
    "LLMError",
    "LLMNotConfiguredError",
    "LLMRequestError",
    "get_llm_client",
    "SYSTEM_PROMPTS",
    "build_advisory_prompt",
    "CoachAdvisor",
    "fallback_remark",
    "get_coach_advisor",
]
