"""Connection (identity provider) operations."""
from __future__ import annotations
from typing import Optional

from ..validators import require_not_none
from .base import BaseEntity, page_params


class ConnectionsEntity(BaseEntity):
    """Service for managing connections."""

    def list(
        self,
        strategy: Optional[str] = None,
        name: Optional[str] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
        include_totals: Optional[bool] = None,
        fields: Optional[str] = None,
        include_fields: Optional[bool] = None,
    ):
        """List connections, optionally filtered by strategy or name."""
        params = page_params(page, per_page, include_totals, fields, include_fields)
        params.update({"strategy": strategy, "name": name})
        return self._request("GET", self._url("connections"), params=params)

    def get(self, connection_id: str, fields: Optional[str] = None, include_fields: Optional[bool] = None) -> dict:
        require_not_none(connection_id, "connection id")
        params = page_params(fields=fields, include_fields=include_fields)
        return self._request("GET", self._url("connections", connection_id), params=params)

    def create(self, body: dict) -> dict:
        require_not_none(body, "connection")
        return self._request("POST", self._url("connections"), json=body)

    def update(self, connection_id: str, body: dict) -> dict:
        require_not_none(connection_id, "connection id")
        require_not_none(body, "connection")
        return self._request("PATCH", self._url("connections", connection_id), json=body)

    def delete(self, connection_id: str) -> None:
        require_not_none(connection_id, "connection id")
        self._request("DELETE", self._url("connections", connection_id))

    def delete_user(self, connection_id: str, email: str) -> None:
        """Delete a user from a database connection by email.

        Args:
            connection_id: Database connection id
            email: Email of the user to delete
        """
        require_not_none(connection_id, "connection id")
        require_not_none(email, "email")
        self._request("DELETE", self._url("connections", connection_id, "users"), params={"email": email})
