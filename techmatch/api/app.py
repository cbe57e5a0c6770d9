"""
HTTP handler for candidate matching.

Called from a browser on another origin, so every response carries the
cross-origin headers and the pre-flight request is answered directly.
Each request ends in exactly one JSON response: the matches, a 400 for an
unusable request, or a 500 carrying the failure's message.
"""

import json
from typing import Any

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse, Response
from pydantic import ValidationError as PydanticValidationError

from techmatch import __version__
from techmatch.core.exceptions import TechMatchError, ValidationError
from techmatch.core.matching import match_candidates
from techmatch.data.repositories import CandidateStore, get_profile_repository
from techmatch.utils.config import get_settings
from techmatch.utils.constants import APP_DISPLAY_NAME, CORS_ALLOW_HEADERS
from techmatch.utils.logger import get_logger

from .schemas import ErrorResponse, MatchingRequest, MatchingResponse

logger = get_logger(__name__)

MATCHING_PATH = "/ai-candidate-matching"

app = FastAPI(
    title=APP_DISPLAY_NAME,
    description="Ranks candidate profiles against a job's required skills",
    version=__version__,
)


def get_candidate_store() -> CandidateStore:
    """Candidate store dependency; overridden in tests."""
    return get_profile_repository()


def _cors_headers() -> dict[str, str]:
    try:
        return get_settings().api.cors_headers
    except PydanticValidationError:
        # Unreadable settings must not strip the headers from the error reply
        logger.exception("Could not load API settings; using default CORS headers")
        return {
            "Access-Control-Allow-Origin": "*",
            "Access-Control-Allow-Headers": ", ".join(CORS_ALLOW_HEADERS),
        }


def _json_response(content: dict[str, Any], status_code: int = 200) -> JSONResponse:
    return JSONResponse(content=content, status_code=status_code, headers=_cors_headers())


def _error_response(message: str, status_code: int) -> JSONResponse:
    return _json_response(ErrorResponse(error=message).model_dump(), status_code)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Reply with JSON for failures outside the handler body.

    Covers errors raised while resolving dependencies, such as building
    the candidate store from bad database settings.
    """
    logger.opt(exception=exc).error(f"Error in candidate matching: {exc}")
    return _error_response(str(exc), 500)


@app.options(MATCHING_PATH)
async def matching_preflight() -> Response:
    """Answer the browser's pre-flight request."""
    return Response(status_code=200, headers=_cors_headers())


@app.post(MATCHING_PATH)
async def match_candidates_endpoint(
    request: Request,
    store: CandidateStore = Depends(get_candidate_store),
) -> JSONResponse:
    """Rank candidates for the job described in the request body."""
    try:
        try:
            payload = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ValidationError("Request body must be valid JSON") from e

        matching_request = MatchingRequest.from_payload(payload)
        matches = await match_candidates(
            matching_request.to_requirement(),
            store,
            get_settings().matching,
        )
        return _json_response(MatchingResponse(matches=matches).model_dump(mode="json"))

    except ValidationError as e:
        logger.warning(f"Rejected matching request: {e.message}")
        return _error_response(e.message, e.status_code)
    except TechMatchError as e:
        logger.exception(f"Error in candidate matching: {e.message}")
        return _error_response(e.message, e.status_code)
    except Exception as e:
        logger.exception(f"Error in candidate matching: {e}")
        return _error_response(str(e), 500)
