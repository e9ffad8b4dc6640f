"""Blacklisted token operations."""
from __future__ import annotations
from typing import List, Optional

from ..validators import require_not_none
from .base import BaseEntity


class BlacklistsEntity(BaseEntity):
    """Service for managing blacklisted tokens."""

    def list(self, audience: str) -> List[dict]:
        """Return the JTIs blacklisted for an audience.

        Args:
            audience: Token audience (the API's client id)
        """
        require_not_none(audience, "audience")
        return self._request("GET", self._url("blacklists", "tokens"), params={"aud": audience})

    def blacklist(self, audience: Optional[str], jti: str) -> None:
        """Blacklist a token by its ``jti`` claim.

        Args:
            audience: Token audience, or None for the tenant default
            jti: Token id to revoke
        """
        require_not_none(jti, "jti")
        body = {"jti": jti}
        if audience is not None:
            body["aud"] = audience
        self._request("POST", self._url("blacklists", "tokens"), json=body)
