"""Resource server (API) operations."""
from __future__ import annotations
from typing import Optional

from ..validators import require_not_none
from .base import BaseEntity, page_params


class ResourceServersEntity(BaseEntity):
    """Service for managing the APIs registered in the tenant."""

    def list(
        self,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
        include_totals: Optional[bool] = None,
    ):
        return self._request("GET", self._url("resource-servers"), params=page_params(page, per_page, include_totals))

    def get(self, resource_server_id: str) -> dict:
        """Return an API by id or by its audience identifier."""
        require_not_none(resource_server_id, "resource server id")
        return self._request("GET", self._url("resource-servers", resource_server_id))

    def create(self, body: dict) -> dict:
        require_not_none(body, "resource server")
        return self._request("POST", self._url("resource-servers"), json=body)

    def update(self, resource_server_id: str, body: dict) -> dict:
        require_not_none(resource_server_id, "resource server id")
        require_not_none(body, "resource server")
        return self._request("PATCH", self._url("resource-servers", resource_server_id), json=body)

    def delete(self, resource_server_id: str) -> None:
        require_not_none(resource_server_id, "resource server id")
        self._request("DELETE", self._url("resource-servers", resource_server_id))
