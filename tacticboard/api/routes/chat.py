"""Chat with the coach persona."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ...schemas import ChatRequest, ChatResponse
from ...services.llm import CoachAdvisor, LLMNotConfiguredError, get_coach_advisor

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/chat", response_model=ChatResponse)
async def chat(
    request: ChatRequest,
    advisor: CoachAdvisor = Depends(get_coach_advisor),
):
    """Forward a message to the completion API and return its reply."""
    try:
        reply = await advisor.reply(request.message)
    except LLMNotConfiguredError as e:
        logger.error(f"Chat unavailable: {e}")
        return JSONResponse(
            status_code=500,
            content={"reply": f"Internal error: {e}."},
        )
    return ChatResponse(reply=reply)
