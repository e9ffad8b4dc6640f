"""Application (client) operations."""
from __future__ import annotations
from typing import Optional

from ..validators import require_not_none
from .base import BaseEntity, page_params


class ClientsEntity(BaseEntity):
    """Service for managing applications registered in the tenant."""

    def list(
        self,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
        include_totals: Optional[bool] = None,
        fields: Optional[str] = None,
        include_fields: Optional[bool] = None,
        is_global: Optional[bool] = None,
        is_first_party: Optional[bool] = None,
        app_type: Optional[str] = None,
    ):
        """List applications.

        Args:
            page: Zero-based page index
            per_page: Results per page
            include_totals: Wrap results with paging totals
            fields: Comma-separated fields to include or exclude
            include_fields: Whether ``fields`` lists fields to include
            is_global: Filter on the global client
            is_first_party: Filter on first-party clients
            app_type: Comma-separated application types

        Returns:
            List of clients, or a paged object when include_totals is set
        """
        params = page_params(page, per_page, include_totals, fields, include_fields)
        params.update({"is_global": is_global, "is_first_party": is_first_party, "app_type": app_type})
        return self._request("GET", self._url("clients"), params=params)

    def get(self, client_id: str, fields: Optional[str] = None, include_fields: Optional[bool] = None) -> dict:
        require_not_none(client_id, "client id")
        params = page_params(fields=fields, include_fields=include_fields)
        return self._request("GET", self._url("clients", client_id), params=params)

    def create(self, body: dict) -> dict:
        require_not_none(body, "client")
        return self._request("POST", self._url("clients"), json=body)

    def update(self, client_id: str, body: dict) -> dict:
        require_not_none(client_id, "client id")
        require_not_none(body, "client")
        return self._request("PATCH", self._url("clients", client_id), json=body)

    def delete(self, client_id: str) -> None:
        require_not_none(client_id, "client id")
        self._request("DELETE", self._url("clients", client_id))

    def rotate_secret(self, client_id: str) -> dict:
        """Generate a new client secret; the previous one stops working immediately."""
        require_not_none(client_id, "client id")
        return self._request("POST", self._url("clients", client_id, "rotate-secret"))
