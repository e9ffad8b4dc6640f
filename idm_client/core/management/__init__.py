"""Management API client library.

This package provides the facade and one sub-client per API resource.

Architecture:
- api.py: ManagementAPI facade owning the token and the shared HTTP client
- base.py: Request building, bearer auth and error mapping for sub-clients
- exceptions.py: Typed exceptions for error handling
- one module per resource (users.py, clients.py, rules.py, ...)

Usage:
    from idm_client.core.management import ManagementAPI

    api = ManagementAPI("tenant.example.com", token)
    api.set_logging_enabled(True)
    users = api.users().list(q='email:"alice@example.com"')
"""
from .api import ManagementAPI
from .base import API_PREFIX, BaseEntity
from .blacklists import BlacklistsEntity
from .client_grants import ClientGrantsEntity
from .clients import ClientsEntity
from .connections import ConnectionsEntity
from .device_credentials import DeviceCredentialsEntity
from .email_provider import EmailProviderEntity
from .email_templates import EmailTemplatesEntity
from .exceptions import (
    APIError,
    ManagementError,
    RateLimitError,
    ResponseParseError,
)
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

__all__ = [
    # Facade
    "ManagementAPI",
    "API_PREFIX",
    "BaseEntity",

    # Exceptions
    "ManagementError",
    "APIError",
    "RateLimitError",
    "ResponseParseError",

    # Sub-clients
    "BlacklistsEntity",
    "ClientGrantsEntity",
    "ClientsEntity",
    "ConnectionsEntity",
    "DeviceCredentialsEntity",
    "EmailProviderEntity",
    "EmailTemplatesEntity",
    "GrantsEntity",
    "GuardianEntity",
    "JobsEntity",
    "LogEventsEntity",
    "ResourceServersEntity",
    "RulesEntity",
    "StatsEntity",
    "TenantsEntity",
    "TicketsEntity",
    "UserBlocksEntity",
    "UsersEntity",
]
