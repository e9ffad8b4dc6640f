"""Device credential operations."""
from __future__ import annotations
from typing import Optional

from ..validators import require_not_none
from .base import BaseEntity, page_params


class DeviceCredentialsEntity(BaseEntity):

    def list(
        self,
        user_id: Optional[str] = None,
        client_id: Optional[str] = None,
        credential_type: Optional[str] = None,
        fields: Optional[str] = None,
        include_fields: Optional[bool] = None,
    ):
        """List device credentials (refresh tokens, public keys) for a user or client.

        Args:
            user_id: Filter by user
            client_id: Filter by client
            credential_type: ``public_key``, ``refresh_token`` or ``rotating_refresh_token``
        """
        params = page_params(fields=fields, include_fields=include_fields)
        params.update({"user_id": user_id, "client_id": client_id, "type": credential_type})
        return self._request("GET", self._url("device-credentials"), params=params)

    def create(self, body: dict) -> dict:
        require_not_none(body, "device credentials")
        return self._request("POST", self._url("device-credentials"), json=body)

    def delete(self, credential_id: str) -> None:
        require_not_none(credential_id, "device credentials id")
        self._request("DELETE", self._url("device-credentials", credential_id))
