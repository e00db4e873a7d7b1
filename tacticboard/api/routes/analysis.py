"""Tactical analysis routes for board snapshots."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ...schemas import AnalyzeRequest, AnalyzeResponse
from ...services.tactical_engine import analyze_snapshot
from ...services.llm import CoachAdvisor, get_coach_advisor

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/analyze", response_model=AnalyzeResponse)
@router.post("/analyze-tactical", response_model=AnalyzeResponse)
async def analyze(
    request: AnalyzeRequest,
    advisor: CoachAdvisor = Depends(get_coach_advisor),
):
    """Detect the opponent's shape and suggest red and green positions."""
    logger.info(
        f"Analyze request: green={len(request.green)} black={len(request.black)} "
        f"ball={'yes' if request.ball else 'no'}"
    )

    try:
        analysis = analyze_snapshot(
            ball=request.ball_point(),
            green=request.green_points(),
            black=request.black_points(),
        )
        comment = await advisor.remark(analysis.detected_formation, analysis.phase)
    except Exception as e:
        logger.exception(f"Tactical analysis failed: {e}")
        return JSONResponse(status_code=500, content={"error": "Tactical analysis failed"})

    return {**analysis.to_dict(), "coachComment": comment}
