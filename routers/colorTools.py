"""
Color analysis endpoint. Parses a color in any supported notation and returns
every projection plus WCAG contrast metrics.
"""

import logging

from fastapi import APIRouter, HTTPException

from engine import ColorParseError, analyze_color
from schemas.requests import ColorAnalyzeRequest
from schemas.responses import ErrorResponse, SuccessResponse

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post(
    "/analyze_color",
    response_model=SuccessResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}},
    operation_id="analyze_color",
    description="Takes a color (hex, rgb/rgba, hsl/hsla, hwb, lab, lch, oklab, oklch or a basic name) and returns conversions plus accessibility analysis",
)
async def analyze(request: ColorAnalyzeRequest):
    """Analyze a color string."""
    try:
        report = analyze_color(request.color_input)
    except ColorParseError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    logger.debug("analyzed %r -> %s", report.original_input, report.formats.hex)
    return SuccessResponse(success=True, result=report)
