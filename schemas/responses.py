from pydantic import BaseModel, Field

from engine.models import ColorReport

class SuccessResponse(BaseModel):
    success: bool = True
    result: ColorReport = Field(..., description="Every projection of the color plus accessibility metrics")

class ErrorResponse(BaseModel):
    success: bool = False
    detail: str = Field(..., description="Human-readable reason the request failed")
