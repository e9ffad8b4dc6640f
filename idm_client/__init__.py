"""Python client for an identity-management (Management API v2) tenant."""
from .config import ClientSettings, load_settings
from .core.management import APIError, ManagementAPI, ManagementError, RateLimitError
from .net import Level, ProxyCredentials
from .version import __version__

__all__ = [
    "ManagementAPI",
    "ManagementError",
    "APIError",
    "RateLimitError",
    "ClientSettings",
    "load_settings",
    "Level",
    "ProxyCredentials",
    "__version__",
]
