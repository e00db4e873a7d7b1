from .tactics import PointSchema, AnalyzeRequest, AnalyzeResponse
from .chat import ChatRequest, ChatResponse

__all__ = [
    "PointSchema", "AnalyzeRequest", "AnalyzeResponse",
    "ChatRequest", "ChatResponse",
]
