"""Network layer: shared HTTP client, interceptors and proxy authentication."""
from .http_client import (
    DEFAULT_TIMEOUT,
    Chain,
    HttpClient,
    InterceptingAdapter,
    ProxyAuthenticationError,
)
from .logging_interceptor import Level, LoggingInterceptor
from .proxy import (
    NO_AUTHENTICATOR,
    PROXY_AUTHORIZATION,
    BasicProxyAuthenticator,
    NoProxyAuthenticator,
    ProxyCredentials,
    basic_credentials,
    construct_authenticator,
)
from .telemetry import TELEMETRY_HEADER, TelemetryInterceptor

__all__ = [
    "DEFAULT_TIMEOUT",
    "Chain",
    "HttpClient",
    "InterceptingAdapter",
    "ProxyAuthenticationError",
    "Level",
    "LoggingInterceptor",
    "NO_AUTHENTICATOR",
    "PROXY_AUTHORIZATION",
    "BasicProxyAuthenticator",
    "NoProxyAuthenticator",
    "ProxyCredentials",
    "basic_credentials",
    "construct_authenticator",
    "TELEMETRY_HEADER",
    "TelemetryInterceptor",
]
