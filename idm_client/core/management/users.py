"""User management operations."""
from __future__ import annotations
from typing import List, Optional

from ..validators import require_not_none
from .base import BaseEntity, page_params


class UsersEntity(BaseEntity):
    """Service for managing users."""

    def list(
        self,
        q: Optional[str] = None,
        search_engine: Optional[str] = None,
        sort: Optional[str] = None,
        connection: Optional[str] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
        include_totals: Optional[bool] = None,
        fields: Optional[str] = None,
        include_fields: Optional[bool] = None,
    ):
        """Search users.

        Args:
            q: Lucene query string (e.g. ``email:"alice@example.com"``)
            search_engine: Search engine version (``v3``)
            sort: ``field:1`` (ascending) or ``field:-1`` (descending)
            connection: Restrict to a connection
            page: Zero-based page index
            per_page: Results per page
            include_totals: Wrap results with paging totals
            fields: Comma-separated fields to include or exclude
            include_fields: Whether ``fields`` lists fields to include

        Returns:
            List of users, or a paged object when include_totals is set
        """
        params = page_params(page, per_page, include_totals, fields, include_fields)
        params.update({"q": q, "search_engine": search_engine, "sort": sort, "connection": connection})
        return self._request("GET", self._url("users"), params=params)

    def list_by_email(
        self,
        email: str,
        fields: Optional[str] = None,
        include_fields: Optional[bool] = None,
    ) -> List[dict]:
        """Return every user (across connections) with the given email."""
        require_not_none(email, "email")
        params = page_params(fields=fields, include_fields=include_fields)
        params["email"] = email
        return self._request("GET", self._url("users-by-email"), params=params)

    def get(self, user_id: str, fields: Optional[str] = None, include_fields: Optional[bool] = None) -> dict:
        require_not_none(user_id, "user id")
        params = page_params(fields=fields, include_fields=include_fields)
        return self._request("GET", self._url("users", user_id), params=params)

    def create(self, body: dict) -> dict:
        """Create a user.

        Args:
            body: User representation; ``connection`` is required by the API

        Returns:
            Created user
        """
        require_not_none(body, "user")
        return self._request("POST", self._url("users"), json=body)

    def update(self, user_id: str, body: dict) -> dict:
        require_not_none(user_id, "user id")
        require_not_none(body, "user")
        return self._request("PATCH", self._url("users", user_id), json=body)

    def delete(self, user_id: str) -> None:
        require_not_none(user_id, "user id")
        self._request("DELETE", self._url("users", user_id))

    def get_enrollments(self, user_id: str) -> List[dict]:
        """Return the user's MFA enrollments."""
        require_not_none(user_id, "user id")
        return self._request("GET", self._url("users", user_id, "enrollments"))

    def get_log_events(
        self,
        user_id: str,
        sort: Optional[str] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
        include_totals: Optional[bool] = None,
    ):
        require_not_none(user_id, "user id")
        params = page_params(page, per_page, include_totals)
        params["sort"] = sort
        return self._request("GET", self._url("users", user_id, "logs"), params=params)

    def link_identity(self, primary_user_id: str, body: dict) -> List[dict]:
        """Link a secondary account to a primary user.

        Args:
            primary_user_id: User that keeps its profile
            body: ``provider`` + ``user_id`` (+ ``connection_id``), or ``link_with`` token

        Returns:
            Resulting identities of the primary user
        """
        require_not_none(primary_user_id, "primary user id")
        require_not_none(body, "identity")
        return self._request("POST", self._url("users", primary_user_id, "identities"), json=body)

    def unlink_identity(self, primary_user_id: str, provider: str, secondary_user_id: str) -> List[dict]:
        require_not_none(primary_user_id, "primary user id")
        require_not_none(provider, "provider")
        require_not_none(secondary_user_id, "secondary user id")
        url = self._url("users", primary_user_id, "identities", provider, secondary_user_id)
        return self._request("DELETE", url)

    def delete_multifactor_provider(self, user_id: str, provider: str) -> None:
        require_not_none(user_id, "user id")
        require_not_none(provider, "provider")
        self._request("DELETE", self._url("users", user_id, "multifactor", provider))

    def rotate_recovery_code(self, user_id: str) -> dict:
        """Invalidate the user's MFA recovery code and return a new one."""
        require_not_none(user_id, "user id")
        return self._request("POST", self._url("users", user_id, "recovery-code-regeneration"))
