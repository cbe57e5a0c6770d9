"""
HTTP interface for TechMatch.

Exposes the candidate matching handler as a FastAPI application.
"""

from .app import MATCHING_PATH, app, get_candidate_store
from .schemas import ErrorResponse, MatchingRequest, MatchingResponse

__all__ = [
    "MATCHING_PATH",
    "app",
    "get_candidate_store",
    "ErrorResponse",
    "MatchingRequest",
    "MatchingResponse",
]
