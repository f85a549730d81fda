from .requests import ColorAnalyzeRequest
from .responses import SuccessResponse, ErrorResponse

__all__ = ["ColorAnalyzeRequest", "SuccessResponse", "ErrorResponse"]
