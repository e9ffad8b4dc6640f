"""Management API exceptions for error handling."""
from __future__ import annotations
from typing import Optional


class ManagementError(Exception):
    """Base exception for all Management API operations."""
    pass


class APIError(ManagementError):
    """HTTP error returned by the Management API.

    Attributes:
        status_code: HTTP status code
        error: Short error code from the response body (e.g. ``invalid_body``)
        description: Human-readable message from the response body
        endpoint: URL that failed
    """

    def __init__(self, status_code: int, error: Optional[str], description: str, endpoint: str):
        self.status_code = status_code
        self.error = error
        self.description = description
        self.endpoint = endpoint
        super().__init__(f"[{status_code}] {endpoint}: {description}")


class RateLimitError(APIError):
    """The request was rejected with 429 Too Many Requests.

    Attributes:
        limit: Value of ``X-RateLimit-Limit`` or -1 when absent
        remaining: Value of ``X-RateLimit-Remaining`` or -1 when absent
        reset: Epoch seconds from ``X-RateLimit-Reset`` or -1 when absent
    """

    def __init__(self, limit: int, remaining: int, reset: int, description: str, endpoint: str):
        self.limit = limit
        self.remaining = remaining
        self.reset = reset
        super().__init__(429, "too_many_requests", description, endpoint)


class ResponseParseError(ManagementError):
    """A successful response carried a body that is not valid JSON."""

    def __init__(self, endpoint: str, body: str):
        self.endpoint = endpoint
        self.body = body
        super().__init__(f"Failed to parse JSON response from {endpoint}")
