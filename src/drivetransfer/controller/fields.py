"""Field definitions for Google Drive API responses."""

from __future__ import annotations

OWNER_FIELDS: str = "owners(emailAddress,displayName)"

FILE_FIELDS: str = (
    "id,"
    "name,"
    "mimeType,"
    f"{OWNER_FIELDS},"
    "webViewLink,"
    "createdTime,"
    "modifiedTime"
)

LIST_FIELDS: str = f"files({FILE_FIELDS})"

OWNERSHIP_FIELDS: str = f"id,name,{OWNER_FIELDS}"

PERMISSION_FIELDS: str = "id,emailAddress,role,pendingOwner"

PERMISSION_LIST_FIELDS: str = f"permissions({PERMISSION_FIELDS})"

ABOUT_FIELDS: str = "user(emailAddress,displayName)"
