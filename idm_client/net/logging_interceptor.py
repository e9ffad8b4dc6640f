"""Request/response logging interceptor.

Verbosity follows four levels:

- ``NONE``: nothing is written
- ``BASIC``: request line and response status with elapsed time
- ``HEADERS``: BASIC plus request and response headers
- ``BODY``: HEADERS plus request and response bodies

Credentials in ``Authorization`` and ``Proxy-Authorization`` are redacted.
"""
from __future__ import annotations
import enum
import logging
import threading
import time
from typing import Optional

import requests

REDACTED_HEADERS = {"authorization", "proxy-authorization"}

logger = logging.getLogger("idm_client.net.http")


class Level(enum.IntEnum):
    NONE = 0
    BASIC = 1
    HEADERS = 2
    BODY = 3


class LoggingInterceptor:
    """Log HTTP traffic through the standard ``logging`` module."""

    def __init__(self, level: Level = Level.NONE, log: Optional[logging.Logger] = None):
        self._level = Level(level)
        self._lock = threading.Lock()
        self.logger = log or logger

    @property
    def level(self) -> Level:
        with self._lock:
            return self._level

    @level.setter
    def level(self, value: Level) -> None:
        with self._lock:
            self._level = Level(value)

    def intercept(self, request: requests.PreparedRequest, chain) -> requests.Response:
        level = self.level
        if level == Level.NONE:
            return chain.proceed(request)

        self.logger.info("--> %s %s", request.method, request.url)
        if level >= Level.HEADERS:
            self._log_headers(request.headers)
        if level >= Level.BODY and request.body:
            self.logger.info("%s", _as_text(request.body))
            self.logger.info("--> END %s", request.method)

        started = time.monotonic()
        try:
            response = chain.proceed(request)
        except requests.RequestException as exc:
            self.logger.info("<-- HTTP FAILED: %s", exc)
            raise
        elapsed_ms = int((time.monotonic() - started) * 1000)

        self.logger.info("<-- %s %s (%dms)", response.status_code, response.url or request.url, elapsed_ms)
        if level >= Level.HEADERS:
            self._log_headers(response.headers)
        if level >= Level.BODY and response.content:
            self.logger.info("%s", response.text)
            self.logger.info("<-- END HTTP (%d-byte body)", len(response.content))
        return response

    def _log_headers(self, headers) -> None:
        for name, value in headers.items():
            if name.lower() in REDACTED_HEADERS:
                value = "██"
            self.logger.info("%s: %s", name, value)

    def __repr__(self) -> str:
        return f"LoggingInterceptor(level={self.level.name})"


def _as_text(body) -> str:
    if isinstance(body, bytes):
        try:
            return body.decode("utf-8")
        except UnicodeDecodeError:
            return f"<binary {len(body)}-byte body omitted>"
    return str(body)
