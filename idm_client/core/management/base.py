"""Common plumbing shared by every Management API sub-client.

Builds URLs, attaches the bearer token, executes requests through the
shared HTTP client and maps error responses to typed exceptions.
"""
from __future__ import annotations
import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests

from ...net import HttpClient
from .exceptions import APIError, RateLimitError, ResponseParseError

logger = logging.getLogger(__name__)

API_PREFIX = "api/v2/"


class BaseEntity:
    """Base class for resource sub-clients.

    A sub-client captures the token current when it was created. Updating
    the token on the facade does not affect instances already handed out.

    Attributes:
        client: Shared HTTP client
        base_url: Normalized tenant base URL (ends with ``/``)
        api_token: Bearer token snapshot
    """

    def __init__(self, client: HttpClient, base_url: str, api_token: str):
        self.client = client
        self.base_url = base_url
        self.api_token = api_token

    def _url(self, *segments: str) -> str:
        """Build ``<base_url>api/v2/<segments>`` with each segment quoted."""
        path = "/".join(quote(str(segment), safe="") for segment in segments)
        return f"{self.base_url}{API_PREFIX}{path}"

    def _request(
        self,
        method: str,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        json: Any = None,
        data: Any = None,
        files: Any = None,
    ) -> Any:
        """Execute a request and return the parsed JSON body.

        Args:
            method: HTTP method
            url: Absolute URL built with ``_url``
            params: Query parameters; ``None`` values are dropped
            json: JSON payload
            data: Form fields (multipart uploads)
            files: Files for multipart uploads

        Returns:
            Parsed JSON, or None when the response has no body

        Raises:
            APIError: On HTTP error
            RateLimitError: On 429 Too Many Requests
            ResponseParseError: If a successful body is not JSON
        """
        headers = {"Authorization": f"Bearer {self.api_token}"}
        query = {key: _query_value(value) for key, value in (params or {}).items() if value is not None}

        resp = self.client.request(
            method,
            url,
            params=query or None,
            json=json,
            data=data,
            files=files,
            headers=headers,
        )
        self._handle_error(resp)

        if resp.status_code == 204 or not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as exc:
            raise ResponseParseError(url, resp.text) from exc

    def _handle_error(self, resp: requests.Response) -> None:
        """Centralized error handling for HTTP responses.

        Raises:
            APIError: If response status indicates error
        """
        if resp.status_code < 400:
            return

        endpoint = resp.url or ""
        error, description = _error_details(resp)
        logger.debug("Request to %s failed with %s: %s", endpoint, resp.status_code, description)

        if resp.status_code == 429:
            raise RateLimitError(
                _int_header(resp, "X-RateLimit-Limit"),
                _int_header(resp, "X-RateLimit-Remaining"),
                _int_header(resp, "X-RateLimit-Reset"),
                description,
                endpoint,
            )
        raise APIError(resp.status_code, error, description, endpoint)


def page_params(
    page: Optional[int] = None,
    per_page: Optional[int] = None,
    include_totals: Optional[bool] = None,
    fields: Optional[str] = None,
    include_fields: Optional[bool] = None,
) -> Dict[str, Any]:
    """Common paging and field-selection query parameters."""
    return {
        "page": page,
        "per_page": per_page,
        "include_totals": include_totals,
        "fields": fields,
        "include_fields": include_fields,
    }


def _query_value(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


def _error_details(resp: requests.Response):
    try:
        body = resp.json()
    except ValueError:
        return None, resp.text or f"Request failed with status code {resp.status_code}"

    if not isinstance(body, dict):
        return None, resp.text
    error = body.get("errorCode") or body.get("error")
    description = (
        body.get("message")
        or body.get("description")
        or body.get("error_description")
        or body.get("error")
        or resp.text
    )
    return error, description


def _int_header(resp: requests.Response, name: str) -> int:
    try:
        return int(resp.headers.get(name, -1))
    except (TypeError, ValueError):
        return -1
