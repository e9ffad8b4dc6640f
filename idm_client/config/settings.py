"""Settings loader with environment variable and Docker secrets integration."""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..net import DEFAULT_TIMEOUT, ProxyCredentials

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}


def _load_secret_from_file(secret_name: str, env_var: str | None = None) -> str | None:
    """
    Load secret from /run/secrets (Docker secrets pattern).

    Priority:
    1. /run/secrets/{secret_name} (Docker secrets mount)
    2. Environment variable (fallback)

    Args:
        secret_name: Name of the secret file in /run/secrets
        env_var: Optional environment variable name to check as fallback

    Returns:
        Secret value or None if not found
    """
    secret_file = Path("/run/secrets") / secret_name

    if secret_file.exists() and secret_file.is_file():
        try:
            secret_value = secret_file.read_text().strip()
            if secret_value:
                logger.debug("Loaded %s from /run/secrets", secret_name)
                return secret_value
        except OSError as e:
            logger.warning("Failed to read /run/secrets/%s: %s", secret_name, e)

    if env_var:
        secret_value = os.getenv(env_var)
        if secret_value:
            logger.debug("Loaded %s from environment", env_var)
            return secret_value

    return None


def _env_flag(var_name: str, default: bool) -> bool:
    value = os.environ.get(var_name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUTHY


@dataclass
class ClientSettings:
    """Management API client configuration container."""
    domain: str
    api_token: str
    telemetry_enabled: bool = True
    logging_enabled: bool = False
    proxy_url: Optional[str] = None
    proxy_username: Optional[str] = None
    proxy_password: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT

    @property
    def proxy_credentials(self) -> Optional[ProxyCredentials]:
        """Credentials for the proxy, or None when no username is configured."""
        if not self.proxy_username:
            return None
        return ProxyCredentials(self.proxy_username, self.proxy_password or "")


def load_settings() -> ClientSettings:
    """Load client settings from environment and /run/secrets.

    Raises:
        RuntimeError: If IDM_DOMAIN or the API token is missing
        ValueError: If IDM_TIMEOUT is not a number
    """
    domain = os.environ.get("IDM_DOMAIN", "").strip()
    if not domain:
        raise RuntimeError("Environment variable IDM_DOMAIN is required.")

    api_token = _load_secret_from_file("idm_api_token", "IDM_API_TOKEN")
    if not api_token:
        raise RuntimeError("IDM_API_TOKEN not found in /run/secrets or environment")

    raw_timeout = os.environ.get("IDM_TIMEOUT", "").strip()
    try:
        timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT
    except ValueError as exc:
        raise ValueError(f"IDM_TIMEOUT must be a number, got {raw_timeout!r}") from exc

    return ClientSettings(
        domain=domain,
        api_token=api_token,
        telemetry_enabled=_env_flag("IDM_TELEMETRY", True),
        logging_enabled=_env_flag("IDM_HTTP_LOGGING", False),
        proxy_url=os.environ.get("IDM_PROXY_URL") or None,
        proxy_username=os.environ.get("IDM_PROXY_USERNAME") or None,
        proxy_password=_load_secret_from_file("idm_proxy_password", "IDM_PROXY_PASSWORD"),
        timeout=timeout,
    )
