"""Rule operations."""
from __future__ import annotations
from typing import Optional

from ..validators import require_not_none
from .base import BaseEntity, page_params


class RulesEntity(BaseEntity):
    """Service for managing rules executed during authentication."""

    def list(
        self,
        enabled: Optional[bool] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
        include_totals: Optional[bool] = None,
        fields: Optional[str] = None,
        include_fields: Optional[bool] = None,
    ):
        """List rules.

        Args:
            enabled: Only enabled (True) or disabled (False) rules
        """
        params = page_params(page, per_page, include_totals, fields, include_fields)
        params["enabled"] = enabled
        return self._request("GET", self._url("rules"), params=params)

    def get(self, rule_id: str, fields: Optional[str] = None, include_fields: Optional[bool] = None) -> dict:
        require_not_none(rule_id, "rule id")
        params = page_params(fields=fields, include_fields=include_fields)
        return self._request("GET", self._url("rules", rule_id), params=params)

    def create(self, body: dict) -> dict:
        require_not_none(body, "rule")
        return self._request("POST", self._url("rules"), json=body)

    def update(self, rule_id: str, body: dict) -> dict:
        require_not_none(rule_id, "rule id")
        require_not_none(body, "rule")
        return self._request("PATCH", self._url("rules", rule_id), json=body)

    def delete(self, rule_id: str) -> None:
        require_not_none(rule_id, "rule id")
        self._request("DELETE", self._url("rules", rule_id))
