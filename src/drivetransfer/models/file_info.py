"""Data models for Drive items and their permissions."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass(slots=True)
class DriveFile:
    """
    A Drive file as reported by the files resource.

    Notes:
        - owner_emails keeps the API's order; the first entry is treated as
          the current owner.
    """

    file_id: str
    name: str
    mime_type: str = ""
    owner_emails: list[str] = field(default_factory=list)

    web_view_link: Optional[str] = None
    created_time: Optional[datetime] = None
    modified_time: Optional[datetime] = None

    @property
    def owner_email(self) -> Optional[str]:
        """Email of the first listed owner, if any."""
        return self.owner_emails[0] if self.owner_emails else None


@dataclass(slots=True)
class PermissionInfo:
    """A single entry of a file's permissions list."""

    permission_id: str
    role: str
    email_address: Optional[str] = None
    pending_owner: bool = False
