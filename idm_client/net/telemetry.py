"""Telemetry interceptor tagging every request with client metadata."""
from __future__ import annotations
import base64
import json
import platform
import threading
from typing import Dict, Optional

import requests

TELEMETRY_HEADER = "Idm-Client"


class TelemetryInterceptor:
    """Add the ``Idm-Client`` header describing this library to each request.

    The header value is the URL-safe base64 (unpadded) encoding of a JSON
    object with the client name, version and runtime environment.
    """

    def __init__(self, name: str, version: str, env: Optional[Dict[str, str]] = None):
        self.name = name
        self.version = version
        self.env = env if env is not None else {"python": platform.python_version()}
        self._enabled = True
        self._lock = threading.Lock()
        self._value = self._encode()

    def _encode(self) -> str:
        payload = {"name": self.name, "version": self.version, "env": self.env}
        raw = json.dumps(payload, separators=(",", ":")).encode("utf-8")
        return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")

    @property
    def value(self) -> str:
        return self._value

    def is_enabled(self) -> bool:
        with self._lock:
            return self._enabled

    def enable(self) -> None:
        with self._lock:
            self._enabled = True

    def disable(self) -> None:
        with self._lock:
            self._enabled = False

    def intercept(self, request: requests.PreparedRequest, chain) -> requests.Response:
        if self.is_enabled():
            request.headers[TELEMETRY_HEADER] = self._value
        return chain.proceed(request)

    def __repr__(self) -> str:
        return f"TelemetryInterceptor(name={self.name!r}, version={self.version!r}, enabled={self.is_enabled()})"
