"""Ticket operations (verification and password-change links)."""
from __future__ import annotations

from ..validators import require_not_none
from .base import BaseEntity


class TicketsEntity(BaseEntity):

    def email_verification(self, body: dict) -> dict:
        """Create an email verification ticket.

        Args:
            body: ``user_id`` and optional ``result_url``, ``ttl_sec``

        Returns:
            Ticket with the ``ticket`` URL
        """
        require_not_none(body, "email verification ticket")
        return self._request("POST", self._url("tickets", "email-verification"), json=body)

    def password_change(self, body: dict) -> dict:
        """Create a password change ticket for ``user_id`` or ``email`` + ``connection_id``."""
        require_not_none(body, "password change ticket")
        return self._request("POST", self._url("tickets", "password-change"), json=body)
