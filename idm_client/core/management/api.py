"""Management API entry point.

``ManagementAPI`` owns the configuration shared by every request (tenant
URL, bearer token, telemetry, HTTP logging and proxy) and hands out a new
resource sub-client on each accessor call.
"""
from __future__ import annotations
import logging
import threading
from typing import Optional

from ...config import ClientSettings
from ...net import (
    NO_AUTHENTICATOR,
    BasicProxyAuthenticator,
    HttpClient,
    Level,
    LoggingInterceptor,
    ProxyCredentials,
    TelemetryInterceptor,
    construct_authenticator,
)
from ...net.http_client import ProxyAddress
from ...version import CLIENT_NAME, __version__
from ..validators import normalize_domain, require_not_none
from .blacklists import BlacklistsEntity
from .client_grants import ClientGrantsEntity
from .clients import ClientsEntity
from .connections import ConnectionsEntity
from .device_credentials import DeviceCredentialsEntity
from .email_provider import EmailProviderEntity
from .email_templates import EmailTemplatesEntity
from .grants import GrantsEntity
from .guardian import GuardianEntity
from .jobs import JobsEntity
from .log_events import LogEventsEntity
from .resource_servers import ResourceServersEntity
from .rules import RulesEntity
from .stats import StatsEntity
from .tenants import TenantsEntity
from .tickets import TicketsEntity
from .user_blocks import UserBlocksEntity
from .users import UsersEntity

logger = logging.getLogger(__name__)


class ManagementAPI:
    """Facade over the Management API.

    Features:
    - Domain normalization (``https`` is assumed when no scheme is given)
    - One shared HTTP client with telemetry and logging interceptors
    - Optional proxy routing with basic proxy authentication
    - Runtime token replacement picked up by sub-clients created afterwards

    Usage:
        api = ManagementAPI("tenant.example.com", token)
        user = api.users().get("auth0|123")
        api.set_api_token(new_token)
    """

    def __init__(self, domain: str, api_token: str):
        """Initialize the facade.

        Args:
            domain: Tenant host (``tenant.example.com``) or absolute URL
            api_token: Management API bearer token

        Raises:
            ValueError: If domain is None or malformed, or api_token is None
        """
        self._base_url = normalize_domain(domain)
        self._api_token = require_not_none(api_token, "api token")
        self._lock = threading.Lock()

        self._telemetry = TelemetryInterceptor(CLIENT_NAME, __version__)
        self._logging = LoggingInterceptor(Level.NONE)
        self._client = HttpClient([self._telemetry, self._logging])
        logger.debug("Initialized ManagementAPI for %s", self._base_url)

    @classmethod
    def from_settings(cls, settings: ClientSettings) -> "ManagementAPI":
        """Build a facade from loaded settings, applying every option."""
        api = cls(settings.domain, settings.api_token)
        api.client.timeout = settings.timeout
        if not settings.telemetry_enabled:
            api.do_not_send_telemetry()
        api.set_logging_enabled(settings.logging_enabled)
        if settings.proxy_url:
            api.use_proxy(settings.proxy_url, settings.proxy_credentials)
        return api

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def client(self) -> HttpClient:
        return self._client

    @property
    def telemetry(self) -> TelemetryInterceptor:
        return self._telemetry

    @property
    def logging_interceptor(self) -> LoggingInterceptor:
        return self._logging

    @property
    def api_token(self) -> str:
        with self._lock:
            return self._api_token

    def set_api_token(self, api_token: str) -> None:
        """Replace the token used by sub-clients created from now on.

        Sub-clients already handed out keep the token they were created with.

        Raises:
            ValueError: If api_token is None
        """
        require_not_none(api_token, "api token")
        with self._lock:
            self._api_token = api_token

    def do_not_send_telemetry(self) -> None:
        """Stop sending the telemetry header on subsequent requests."""
        self._telemetry.disable()

    disable_telemetry = do_not_send_telemetry

    def set_logging_enabled(self, enabled: bool) -> None:
        """Log full requests and responses (True) or nothing (False)."""
        self._logging.level = Level.BODY if enabled else Level.NONE

    def use_proxy(self, proxy: ProxyAddress, credentials: Optional[ProxyCredentials] = None) -> HttpClient:
        """Route every request through a proxy.

        Args:
            proxy: Proxy URL, ``host:port`` or ``(host, port)``
            credentials: Username/password answering proxy challenges; when
                omitted the proxy is used without authentication

        Returns:
            The shared HTTP client, reconfigured
        """
        authenticator = self.construct_authenticator(credentials) if credentials is not None else NO_AUTHENTICATOR
        return self._client.use_proxy(proxy, authenticator)

    def construct_authenticator(self, credentials: ProxyCredentials) -> BasicProxyAuthenticator:
        return construct_authenticator(credentials)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "ManagementAPI":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ─────────────────────────────────────────────────────────────────────
    # Resource sub-clients
    # ─────────────────────────────────────────────────────────────────────
    def _entity(self, entity_class):
        return entity_class(self._client, self._base_url, self.api_token)

    def blacklists(self) -> BlacklistsEntity:
        return self._entity(BlacklistsEntity)

    def client_grants(self) -> ClientGrantsEntity:
        return self._entity(ClientGrantsEntity)

    def clients(self) -> ClientsEntity:
        return self._entity(ClientsEntity)

    def connections(self) -> ConnectionsEntity:
        return self._entity(ConnectionsEntity)

    def device_credentials(self) -> DeviceCredentialsEntity:
        return self._entity(DeviceCredentialsEntity)

    def email_provider(self) -> EmailProviderEntity:
        return self._entity(EmailProviderEntity)

    def email_templates(self) -> EmailTemplatesEntity:
        return self._entity(EmailTemplatesEntity)

    def grants(self) -> GrantsEntity:
        return self._entity(GrantsEntity)

    def guardian(self) -> GuardianEntity:
        return self._entity(GuardianEntity)

    def jobs(self) -> JobsEntity:
        return self._entity(JobsEntity)

    def log_events(self) -> LogEventsEntity:
        return self._entity(LogEventsEntity)

    def resource_servers(self) -> ResourceServersEntity:
        return self._entity(ResourceServersEntity)

    def rules(self) -> RulesEntity:
        return self._entity(RulesEntity)

    def stats(self) -> StatsEntity:
        return self._entity(StatsEntity)

    def tenants(self) -> TenantsEntity:
        return self._entity(TenantsEntity)

    def tickets(self) -> TicketsEntity:
        return self._entity(TicketsEntity)

    def user_blocks(self) -> UserBlocksEntity:
        return self._entity(UserBlocksEntity)

    def users(self) -> UsersEntity:
        return self._entity(UsersEntity)
