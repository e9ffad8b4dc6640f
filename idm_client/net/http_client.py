"""Shared HTTP client with an ordered interceptor chain and proxy support.

Handles interceptors, proxy routing, and proxy authentication challenges on
top of a single ``requests.Session``.
"""
from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

import requests
from requests.adapters import HTTPAdapter

from .proxy import NO_AUTHENTICATOR, PROXY_AUTHORIZATION, basic_credentials

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10
MAX_FOLLOW_UPS = 20

ProxyAddress = Union[str, Tuple[str, int]]


class ProxyAuthenticationError(requests.exceptions.ProxyError):
    """The proxy kept challenging requests past the follow-up limit."""


class Chain:
    """One position in the interceptor chain.

    ``proceed`` hands the request to the next interceptor, or to the
    transport once every interceptor has run.
    """

    def __init__(self, interceptors: Sequence[Any], index: int, transport):
        self._interceptors = interceptors
        self._index = index
        self._transport = transport

    def proceed(self, request: requests.PreparedRequest) -> requests.Response:
        if self._index >= len(self._interceptors):
            return self._transport(request)
        interceptor = self._interceptors[self._index]
        return interceptor.intercept(request, Chain(self._interceptors, self._index + 1, self._transport))


class InterceptingAdapter(HTTPAdapter):
    """Transport adapter running the owning client's interceptors on every send."""

    def __init__(self, http_client: "HttpClient", **kwargs):
        self.http_client = http_client
        super().__init__(**kwargs)

    def send(self, request, **kwargs):
        def transport(prepared):
            return self._send_with_proxy_auth(prepared, **kwargs)

        return Chain(self.http_client.interceptors, 0, transport).proceed(request)

    def _send_with_proxy_auth(self, request, **kwargs):
        response = super().send(request, **kwargs)
        follow_ups = 0
        while response.status_code == 407:
            retry = self.http_client.authenticator.authenticate(response)
            if retry is None:
                return response
            follow_ups += 1
            if follow_ups > MAX_FOLLOW_UPS:
                raise ProxyAuthenticationError(
                    f"Too many proxy authentication follow-ups: {follow_ups}", response=response
                )
            logger.debug("Proxy challenged %s %s, retrying with credentials", request.method, request.url)
            response.close()
            response = super().send(retry, **kwargs)
        return response

    def proxy_headers(self, proxy):
        """Headers sent to the proxy itself, including on HTTPS CONNECT tunnels.

        A tunnel refused with 407 never yields a response for the
        authenticator to answer, so installed credentials are sent up front.
        """
        headers = super().proxy_headers(proxy)
        credentials = getattr(self.http_client.authenticator, "credentials", None)
        if credentials is not None and PROXY_AUTHORIZATION not in headers:
            headers[PROXY_AUTHORIZATION] = basic_credentials(credentials)
        return headers

    def reset_proxy_managers(self) -> None:
        """Drop pooled proxy connections built with the previous proxy headers."""
        for manager in self.proxy_manager.values():
            manager.clear()
        self.proxy_manager = {}


def _proxy_url(proxy: ProxyAddress) -> str:
    if isinstance(proxy, tuple):
        host, port = proxy
        return f"http://{host}:{port}"
    if "://" not in proxy:
        return f"http://{proxy}"
    return proxy


class HttpClient:
    """HTTP client shared by the facade and every sub-client it hands out.

    Usage:
        client = HttpClient([TelemetryInterceptor("idm-client", "1.0.0")])
        client.use_proxy("http://proxy.local:3128")
        response = client.request("GET", "https://tenant.example.com/api/v2/users")
    """

    def __init__(self, interceptors: Optional[Sequence[Any]] = None, timeout: float = DEFAULT_TIMEOUT):
        self._interceptors: List[Any] = list(interceptors or [])
        self.timeout = timeout
        self.authenticator = NO_AUTHENTICATOR
        self._proxy: Optional[str] = None

        self.session = requests.Session()
        adapter = InterceptingAdapter(self)
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)

    @property
    def interceptors(self) -> Tuple[Any, ...]:
        return tuple(self._interceptors)

    def add_interceptor(self, interceptor: Any) -> None:
        self._interceptors.append(interceptor)

    @property
    def proxy(self) -> Optional[str]:
        return self._proxy

    def use_proxy(self, proxy: ProxyAddress, authenticator=None) -> "HttpClient":
        """Route all traffic through ``proxy``.

        Args:
            proxy: Proxy URL (``http://host:port``), bare ``host:port`` or a
                ``(host, port)`` tuple
            authenticator: Answers ``407`` challenges; defaults to one that
                never retries

        Returns:
            This client, reconfigured
        """
        if proxy is None:
            raise ValueError("'proxy' cannot be null!")
        self._proxy = _proxy_url(proxy)
        self.session.proxies = {"http": self._proxy, "https": self._proxy}
        self.authenticator = authenticator or NO_AUTHENTICATOR
        for adapter in set(self.session.adapters.values()):
            if isinstance(adapter, InterceptingAdapter):
                adapter.reset_proxy_managers()
        logger.debug("HTTP client routed through proxy %s", self._proxy)
        return self

    def request(
        self,
        method: str,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        json: Any = None,
        data: Any = None,
        files: Any = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> requests.Response:
        """Execute a request through the interceptor chain.

        Raises:
            requests.RequestException: On transport failure
        """
        return self.session.request(
            method,
            url,
            params=params,
            json=json,
            data=data,
            files=files,
            headers=headers,
            # explicit proxy wins over HTTP(S)_PROXY from the environment
            proxies=dict(self.session.proxies) if self._proxy else None,
            timeout=self.timeout,
        )

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
