"""Job operations: verification emails, user imports and exports."""
from __future__ import annotations
import os
from typing import BinaryIO, Optional, Union

from ..validators import require_not_none
from .base import BaseEntity


class JobsEntity(BaseEntity):
    """Service for long-running tenant jobs."""

    def get(self, job_id: str) -> dict:
        """Return a job's status.

        Args:
            job_id: Job ID

        Returns:
            Job representation (``status`` is ``pending``, ``completed``...)
        """
        require_not_none(job_id, "job id")
        return self._request("GET", self._url("jobs", job_id))

    def send_verification_email(self, user_id: str, client_id: Optional[str] = None) -> dict:
        """Queue a verification email for a user.

        Args:
            user_id: User to verify
            client_id: Application whose branding the email uses

        Returns:
            Created job
        """
        require_not_none(user_id, "user id")
        body = {"user_id": user_id}
        if client_id is not None:
            body["client_id"] = client_id
        return self._request("POST", self._url("jobs", "verification-email"), json=body)

    def export_users(self, body: dict) -> dict:
        """Start a users export job (``connection_id``, ``format``, ``fields``...)."""
        require_not_none(body, "users export")
        return self._request("POST", self._url("jobs", "users-exports"), json=body)

    def import_users(
        self,
        connection_id: str,
        users_file: Union[str, BinaryIO],
        upsert: bool = False,
        send_completion_email: bool = True,
        external_id: Optional[str] = None,
    ) -> dict:
        """Start a users import job from a JSON file.

        Args:
            connection_id: Database connection receiving the users
            users_file: Path or open binary file with the users JSON array
            upsert: Update users that already exist
            send_completion_email: Email tenant owners when the job finishes
            external_id: Caller-defined id to correlate the job

        Returns:
            Created job
        """
        require_not_none(connection_id, "connection id")
        require_not_none(users_file, "users file")

        data = {
            "connection_id": connection_id,
            "upsert": "true" if upsert else "false",
            "send_completion_email": "true" if send_completion_email else "false",
        }
        if external_id is not None:
            data["external_id"] = external_id

        url = self._url("jobs", "users-imports")
        if isinstance(users_file, (str, os.PathLike)):
            with open(users_file, "rb") as fh:
                files = {"users": (os.path.basename(users_file), fh, "text/json")}
                return self._request("POST", url, data=data, files=files)

        files = {"users": ("users.json", users_file, "text/json")}
        return self._request("POST", url, data=data, files=files)
