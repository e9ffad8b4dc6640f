"""Pytest shared fixtures for the Management API client tests."""
import json
import pathlib
import sys
from typing import Any, Dict, List, Optional

# Add project root to Python path
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest
import requests
from requests.adapters import HTTPAdapter
from requests.structures import CaseInsensitiveDict

from idm_client.core.management import ManagementAPI

API_TOKEN = "apiToken"


def build_response(
    request: requests.PreparedRequest,
    status_code: int = 200,
    body: Any = None,
    headers: Optional[Dict[str, str]] = None,
) -> requests.Response:
    """Build a fully-read ``requests.Response`` answering ``request``."""
    if body is None:
        content = b""
    elif isinstance(body, bytes):
        content = body
    elif isinstance(body, str):
        content = body.encode("utf-8")
    else:
        content = json.dumps(body).encode("utf-8")

    response = requests.Response()
    response.status_code = status_code
    response._content = content
    response._content_consumed = True
    response.headers = CaseInsensitiveDict(headers or {})
    if content and "Content-Type" not in response.headers:
        response.headers["Content-Type"] = "application/json"
    response.encoding = "utf-8"
    response.url = request.url
    response.request = request
    return response


class MockServer:
    """Answers requests sent through the transport adapter with queued responses.

    Every request is recorded with the keyword arguments the adapter got
    (``proxies``, ``timeout``...). When the queue is empty the default
    response is used.
    """

    base_url = "https://tenant.example.com/"

    def __init__(self):
        self.requests: List[requests.PreparedRequest] = []
        self.send_kwargs: List[Dict[str, Any]] = []
        self._queue: List[Dict[str, Any]] = []
        self.default: Dict[str, Any] = {"status_code": 200, "body": {}}

    def enqueue(self, status_code: int = 200, body: Any = None, headers: Optional[Dict[str, str]] = None):
        self._queue.append({"status_code": status_code, "body": body, "headers": headers})

    def send(self, adapter, request, **kwargs):
        self.requests.append(request)
        self.send_kwargs.append(kwargs)
        queued = self._queue.pop(0) if self._queue else self.default
        return build_response(request, **queued)

    @property
    def last_request(self) -> requests.PreparedRequest:
        return self.requests[-1]


# ─────────────────────────────────────────────────────────────────────────────
# Network Guard Rails
# ─────────────────────────────────────────────────────────────────────────────
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "socket: talks to a local socket server instead of the mocked transport"
    )


@pytest.fixture(autouse=True)
def _block_network(monkeypatch, request):
    """Prevent unit tests from opening real connections.

    Tests marked with @pytest.mark.socket only reach servers they start on
    127.0.0.1 and skip this guard.
    """
    if request.node.get_closest_marker("socket"):
        return

    def _refuse(self, request, **kwargs):
        raise RuntimeError(f"Unexpected network access in tests: {request.method} {request.url}")

    monkeypatch.setattr(HTTPAdapter, "send", _refuse)


@pytest.fixture()
def server(monkeypatch):
    """Mock server answering every request sent by the shared HTTP client."""
    mock = MockServer()

    def _send(self, request, **kwargs):
        return mock.send(self, request, **kwargs)

    monkeypatch.setattr(HTTPAdapter, "send", _send)
    return mock


@pytest.fixture()
def api(server):
    """Facade pointed at the mock server."""
    return ManagementAPI(server.base_url, API_TOKEN)
