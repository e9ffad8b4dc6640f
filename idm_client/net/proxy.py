"""Proxy authentication for the shared HTTP client.

An authenticator is consulted when a proxy answers with
``407 Proxy Authentication Required``. It either returns a new request to
send in place of the challenged one, or ``None`` to give up and hand the
407 response back to the caller.
"""
from __future__ import annotations
import base64
from typing import NamedTuple, Optional

import requests

PROXY_AUTHORIZATION = "Proxy-Authorization"


class ProxyCredentials(NamedTuple):
    """Username/password pair used to answer a proxy challenge."""
    username: str
    password: str


def basic_credentials(credentials: ProxyCredentials) -> str:
    """Return the ``Basic`` header value for ``credentials`` (UTF-8, RFC 7617)."""
    raw = f"{credentials.username}:{credentials.password}".encode("utf-8")
    return "Basic " + base64.b64encode(raw).decode("ascii")


class NoProxyAuthenticator:
    """Authenticator that always declines the challenge."""

    def authenticate(self, response: requests.Response) -> Optional[requests.PreparedRequest]:
        return None

    def __repr__(self) -> str:
        return "NoProxyAuthenticator()"


NO_AUTHENTICATOR = NoProxyAuthenticator()


class BasicProxyAuthenticator:
    """Answer a proxy challenge once with basic credentials.

    If the challenged request already carried ``Proxy-Authorization`` the
    credentials were rejected, so ``None`` is returned instead of retrying.
    """

    def __init__(self, credentials: ProxyCredentials):
        self.credentials = credentials

    def authenticate(self, response: requests.Response) -> Optional[requests.PreparedRequest]:
        request = response.request
        if request is None or request.headers.get(PROXY_AUTHORIZATION) is not None:
            return None

        retry = request.copy()
        retry.headers[PROXY_AUTHORIZATION] = basic_credentials(self.credentials)
        return retry

    def __repr__(self) -> str:
        return f"BasicProxyAuthenticator(username={self.credentials.username!r})"


def construct_authenticator(credentials: ProxyCredentials) -> BasicProxyAuthenticator:
    """Build the authenticator used when proxy credentials are supplied."""
    if credentials is None:
        raise ValueError("'credentials' cannot be null!")
    return BasicProxyAuthenticator(ProxyCredentials(*credentials))
