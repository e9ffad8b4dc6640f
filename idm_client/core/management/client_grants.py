"""Client grant operations."""
from __future__ import annotations
from typing import List, Optional

from ..validators import require_not_none
from .base import BaseEntity, page_params


class ClientGrantsEntity(BaseEntity):
    """Service for managing client grants (client ↔ API authorizations)."""

    def list(
        self,
        audience: Optional[str] = None,
        client_id: Optional[str] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
        include_totals: Optional[bool] = None,
    ):
        """List client grants, optionally filtered by audience or client."""
        params = page_params(page, per_page, include_totals)
        params.update({"audience": audience, "client_id": client_id})
        return self._request("GET", self._url("client-grants"), params=params)

    def create(self, client_id: str, audience: str, scope: List[str]) -> dict:
        """Authorize a client to call an API with the given scopes."""
        require_not_none(client_id, "client id")
        require_not_none(audience, "audience")
        require_not_none(scope, "scope")
        body = {"client_id": client_id, "audience": audience, "scope": list(scope)}
        return self._request("POST", self._url("client-grants"), json=body)

    def update(self, grant_id: str, scope: List[str]) -> dict:
        require_not_none(grant_id, "client grant id")
        require_not_none(scope, "scope")
        return self._request("PATCH", self._url("client-grants", grant_id), json={"scope": list(scope)})

    def delete(self, grant_id: str) -> None:
        require_not_none(grant_id, "client grant id")
        self._request("DELETE", self._url("client-grants", grant_id))
