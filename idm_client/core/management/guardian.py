"""Multi-factor (guardian) operations."""
from __future__ import annotations
from typing import List

from ..validators import require_not_none
from .base import BaseEntity


class GuardianEntity(BaseEntity):
    """Service for MFA factors, enrollments and SMS templates."""

    def list_factors(self) -> List[dict]:
        return self._request("GET", self._url("guardian", "factors"))

    def update_factor(self, name: str, enabled: bool) -> dict:
        """Enable or disable an MFA factor.

        Args:
            name: Factor name (``sms``, ``push-notification``, ``otp``...)
            enabled: Desired state
        """
        require_not_none(name, "name")
        require_not_none(enabled, "enabled")
        return self._request("PUT", self._url("guardian", "factors", name), json={"enabled": bool(enabled)})

    def get_enrollment(self, enrollment_id: str) -> dict:
        require_not_none(enrollment_id, "enrollment id")
        return self._request("GET", self._url("guardian", "enrollments", enrollment_id))

    def delete_enrollment(self, enrollment_id: str) -> None:
        require_not_none(enrollment_id, "enrollment id")
        self._request("DELETE", self._url("guardian", "enrollments", enrollment_id))

    def create_enrollment_ticket(self, body: dict) -> dict:
        """Create a ticket inviting a user to enroll an MFA factor.

        Args:
            body: Ticket request (``user_id``, optional ``email``, ``send_mail``)

        Returns:
            Ticket with ``ticket_id`` and ``ticket_url``
        """
        require_not_none(body, "enrollment ticket")
        return self._request("POST", self._url("guardian", "enrollments", "ticket"), json=body)

    def get_templates(self) -> dict:
        return self._request("GET", self._url("guardian", "factors", "sms", "templates"))

    def update_templates(self, body: dict) -> dict:
        require_not_none(body, "templates")
        return self._request("PUT", self._url("guardian", "factors", "sms", "templates"), json=body)
