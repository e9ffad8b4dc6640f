"""Tenant statistics."""
from __future__ import annotations
from datetime import date
from typing import List

from ..validators import require_not_none
from .base import BaseEntity


def _format_date(value: date) -> str:
    return value.strftime("%Y%m%d")


class StatsEntity(BaseEntity):
    """Service for tenant usage statistics."""

    def active_users(self) -> int:
        """Return the number of users that logged in during the last 30 days."""
        return self._request("GET", self._url("stats", "active-users"))

    def daily(self, date_from: date, date_to: date) -> List[dict]:
        """Return daily login and signup counts between two dates (inclusive).

        Args:
            date_from: First day
            date_to: Last day
        """
        require_not_none(date_from, "date from")
        require_not_none(date_to, "date to")
        params = {"from": _format_date(date_from), "to": _format_date(date_to)}
        return self._request("GET", self._url("stats", "daily"), params=params)
