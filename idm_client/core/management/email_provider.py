"""Email provider operations."""
from __future__ import annotations
from typing import Optional

from ..validators import require_not_none
from .base import BaseEntity, page_params


class EmailProviderEntity(BaseEntity):
    """Service for the tenant's single email provider configuration."""

    def get(self, fields: Optional[str] = None, include_fields: Optional[bool] = None) -> dict:
        params = page_params(fields=fields, include_fields=include_fields)
        return self._request("GET", self._url("emails", "provider"), params=params)

    def setup(self, body: dict) -> dict:
        """Configure the email provider (``name``, ``credentials``, ``enabled``...)."""
        require_not_none(body, "email provider")
        return self._request("POST", self._url("emails", "provider"), json=body)

    def update(self, body: dict) -> dict:
        require_not_none(body, "email provider")
        return self._request("PATCH", self._url("emails", "provider"), json=body)

    def delete(self) -> None:
        self._request("DELETE", self._url("emails", "provider"))
