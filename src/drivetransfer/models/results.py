"""Response models returned by the session and gateway."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Optional

TransferStatus = Literal["pending_owner"]

PENDING_OWNER_NOTE: str = "Receiver needs to accept ownership in their Google Drive"


@dataclass(slots=True, frozen=True)
class SessionState:
    """Snapshot of the auth session."""

    authenticated: bool
    email: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {"authenticated": self.authenticated, "email": self.email}


@dataclass(slots=True)
class FileSummary:
    """One row of the document listing. Built per request; never cached."""

    id: str
    name: str
    type: str
    owner_email: Optional[str]
    view_url: Optional[str]
    created_date: Optional[str]
    modified_date: Optional[str]
    is_owned_by_current_user: bool

    def to_dict(self) -> dict[str, Any]:
        """JSON shape consumed by the front-end."""
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "owner": self.owner_email,
            "url": self.view_url,
            "created": self.created_date,
            "modified": self.modified_date,
            "isOwnedByMe": self.is_owned_by_current_user,
        }


@dataclass(slots=True)
class TransferResult:
    """Outcome of a successful ownership-transfer request."""

    file_name: str
    receiver_email: str
    status: TransferStatus = "pending_owner"
    note: str = PENDING_OWNER_NOTE

    def to_details(self) -> dict[str, Any]:
        return {
            "file": self.file_name,
            "receiver": self.receiver_email,
            "status": self.status,
            "note": self.note,
        }
