"""Public model exports for drivetransfer."""

from __future__ import annotations

from .file_info import DriveFile, PermissionInfo
from .results import (
    PENDING_OWNER_NOTE,
    FileSummary,
    SessionState,
    TransferResult,
    TransferStatus,
)

__all__ = [
    "DriveFile",
    "PermissionInfo",
    "FileSummary",
    "SessionState",
    "TransferResult",
    "TransferStatus",
    "PENDING_OWNER_NOTE",
]
