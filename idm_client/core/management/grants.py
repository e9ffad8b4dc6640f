"""User grant operations."""
from __future__ import annotations
from typing import Optional

from ..validators import require_not_none
from .base import BaseEntity, page_params


class GrantsEntity(BaseEntity):
    """Service for the consent grants users gave to applications."""

    def list(
        self,
        user_id: str,
        client_id: Optional[str] = None,
        audience: Optional[str] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
        include_totals: Optional[bool] = None,
    ):
        """List grants given by a user.

        Args:
            user_id: User whose grants to list
            client_id: Filter by client
            audience: Filter by API audience
        """
        require_not_none(user_id, "user id")
        params = page_params(page, per_page, include_totals)
        params.update({"user_id": user_id, "client_id": client_id, "audience": audience})
        return self._request("GET", self._url("grants"), params=params)

    def delete(self, grant_id: str) -> None:
        require_not_none(grant_id, "grant id")
        self._request("DELETE", self._url("grants", grant_id))

    def delete_all(self, user_id: str) -> None:
        """Revoke every grant the user has given."""
        require_not_none(user_id, "user id")
        self._request("DELETE", self._url("grants"), params={"user_id": user_id})
