"""Pydantic schemas package."""

from api.schemas.analysis import ActionsPayload, AnalysisResponse, ErrorResponse

__all__ = [
    "ActionsPayload",
    "AnalysisResponse",
    "ErrorResponse",
]
