"""
Error types raised by TechMatch matching operations.

Each error carries the HTTP status the request handler answers with.
"""


class TechMatchError(Exception):
    """Base class for matching errors reported to callers."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(TechMatchError):
    """The caller supplied an unusable request; never retried."""

    status_code = 400


class UpstreamFetchError(TechMatchError):
    """Reading from the external store failed; no partial results."""

    status_code = 500
