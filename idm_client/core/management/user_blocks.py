"""Brute-force protection block operations."""
from __future__ import annotations

from ..validators import require_not_none
from .base import BaseEntity


class UserBlocksEntity(BaseEntity):
    """Service for blocks placed by brute-force protection."""

    def get_by_identifier(self, identifier: str) -> dict:
        """Return blocks for a username, email or phone number."""
        require_not_none(identifier, "identifier")
        return self._request("GET", self._url("user-blocks"), params={"identifier": identifier})

    def delete_by_identifier(self, identifier: str) -> None:
        require_not_none(identifier, "identifier")
        self._request("DELETE", self._url("user-blocks"), params={"identifier": identifier})

    def get(self, user_id: str) -> dict:
        require_not_none(user_id, "user id")
        return self._request("GET", self._url("user-blocks", user_id))

    def delete(self, user_id: str) -> None:
        require_not_none(user_id, "user id")
        self._request("DELETE", self._url("user-blocks", user_id))
