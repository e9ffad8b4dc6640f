"""Tenant log event operations."""
from __future__ import annotations
from typing import Optional

from ..validators import require_not_none
from .base import BaseEntity, page_params


class LogEventsEntity(BaseEntity):

    def list(
        self,
        q: Optional[str] = None,
        sort: Optional[str] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
        include_totals: Optional[bool] = None,
        fields: Optional[str] = None,
        include_fields: Optional[bool] = None,
        from_id: Optional[str] = None,
        take: Optional[int] = None,
    ):
        """Search log events.

        Either page-based (``page``/``per_page``) or checkpoint-based
        (``from_id``/``take``) pagination may be used.

        Args:
            q: Lucene query string
            sort: ``field:1`` (ascending) or ``field:-1`` (descending)
            from_id: Log event id to start from
            take: Number of entries to retrieve after ``from_id``
        """
        params = page_params(page, per_page, include_totals, fields, include_fields)
        params.update({"q": q, "sort": sort, "from": from_id, "take": take})
        return self._request("GET", self._url("logs"), params=params)

    def get(self, log_event_id: str) -> dict:
        require_not_none(log_event_id, "log event id")
        return self._request("GET", self._url("logs", log_event_id))
