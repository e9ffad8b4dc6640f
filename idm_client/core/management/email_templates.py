"""Email template operations."""
from __future__ import annotations

from ..validators import require_not_none
from .base import BaseEntity


class EmailTemplatesEntity(BaseEntity):
    """Service for managing email templates by name (e.g. ``verify_email``)."""

    def get(self, template_name: str) -> dict:
        require_not_none(template_name, "template name")
        return self._request("GET", self._url("email-templates", template_name))

    def create(self, body: dict) -> dict:
        require_not_none(body, "template")
        return self._request("POST", self._url("email-templates"), json=body)

    def update(self, template_name: str, body: dict) -> dict:
        require_not_none(template_name, "template name")
        require_not_none(body, "template")
        return self._request("PATCH", self._url("email-templates", template_name), json=body)
