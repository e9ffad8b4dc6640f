"""Input validation helpers for client configuration."""
from __future__ import annotations
import re
from typing import Any
from urllib.parse import urlsplit, urlunsplit

INVALID_DOMAIN = "The domain had an invalid format and couldn't be parsed as an URL."

_SCHEME = re.compile(r"^https?://", re.IGNORECASE)
_HOSTNAME = re.compile(r"^[A-Za-z0-9_](?:[A-Za-z0-9_\-.]*[A-Za-z0-9_])?$")


def require_not_none(value: Any, name: str) -> Any:
    """Return ``value`` unchanged.

    Raises:
        ValueError: If value is None
    """
    if value is None:
        raise ValueError(f"'{name}' cannot be null!")
    return value


def _ascii_host(host: str) -> str:
    """IDNA (punycode) form of ``host``, or ``""`` when it cannot be encoded."""
    try:
        return host.encode("idna").decode("ascii")
    except UnicodeError:
        return ""


def normalize_domain(domain: str) -> str:
    """Normalize a domain or URL into an absolute base URL.

    A bare host gets the ``https`` scheme; an explicit ``http://`` or
    ``https://`` prefix is kept. The result always ends with ``/``.

    Args:
        domain: Host name (``tenant.example.com``) or absolute URL

    Returns:
        Normalized base URL, e.g. ``https://tenant.example.com/``

    Raises:
        ValueError: If domain is None or cannot be parsed as a URL
    """
    require_not_none(domain, "domain")

    url = domain.strip()
    if not _SCHEME.match(url):
        url = f"https://{url}"

    try:
        parts = urlsplit(url)
        host = parts.hostname
        parts.port
    except ValueError as exc:
        raise ValueError(INVALID_DOMAIN) from exc

    if not host or parts.netloc.endswith(":"):
        raise ValueError(INVALID_DOMAIN)
    if "[" not in parts.netloc and not _HOSTNAME.match(_ascii_host(host)):
        raise ValueError(INVALID_DOMAIN)

    path = parts.path.rstrip("/") + "/"
    return urlunsplit((parts.scheme.lower(), parts.netloc, path, "", ""))
