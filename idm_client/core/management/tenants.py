"""Tenant settings operations."""
from __future__ import annotations
from typing import Optional

from ..validators import require_not_none
from .base import BaseEntity, page_params


class TenantsEntity(BaseEntity):

    def get(self, fields: Optional[str] = None, include_fields: Optional[bool] = None) -> dict:
        params = page_params(fields=fields, include_fields=include_fields)
        return self._request("GET", self._url("tenants", "settings"), params=params)

    def update(self, body: dict) -> dict:
        require_not_none(body, "tenant")
        return self._request("PATCH", self._url("tenants", "settings"), json=body)
