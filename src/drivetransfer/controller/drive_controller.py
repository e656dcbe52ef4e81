"""Google Drive API controller (internal use only)."""

from __future__ import annotations

import json
from typing import Any, Callable, Optional, TypeVar

from drivetransfer.errors import (
    ApiError,
    AuthError,
    DriveTransferError,
    HttpErrorInfo,
    NetworkError,
    map_http_error,
)
from drivetransfer.models import DriveFile, PermissionInfo
from drivetransfer.util.mime import GOOGLE_DOCUMENT_TYPES
from drivetransfer.util.time import parse_rfc3339_or_none

from .fields import (
    ABOUT_FIELDS,
    LIST_FIELDS,
    OWNERSHIP_FIELDS,
    PERMISSION_FIELDS,
    PERMISSION_LIST_FIELDS,
)

T = TypeVar("T")


class GoogleDriveController:
    """
    Drive API controller (internal only).

    Notes:
        - The Drive `service` object is NOT exposed.
        - Every request runs once; failures are mapped to drivetransfer errors
          and never retried.
    """

    def __init__(self, credentials: Any) -> None:
        try:
            from googleapiclient.discovery import build
        except Exception as exc:  # pragma: no cover
            raise AuthError(
                "google-api-python-client is not available",
                details={"hint": "Install google-api-python-client"},
                cause=exc,
            ) from exc

        try:
            self._service = build(
                "drive", "v3", credentials=credentials, cache_discovery=False
            )
        except Exception as exc:
            raise AuthError("Failed to build Drive service", cause=exc) from exc

    @classmethod
    def from_service(cls, service: Any) -> "GoogleDriveController":
        """Create controller from a pre-built Drive service (useful for tests)."""
        obj = cls.__new__(cls)
        obj._service = service
        return obj

    # ----------------------------
    # Public API
    # ----------------------------
    def get_user_email(self) -> Optional[str]:
        """Email address of the account the credentials belong to."""
        req = self._service.about().get(fields=ABOUT_FIELDS)
        data = self._execute(req.execute)
        user = data.get("user") or {}
        email = user.get("emailAddress")
        return email if isinstance(email, str) else None

    def list_documents(
        self,
        *,
        search: Optional[str] = None,
        page_size: int = 50,
    ) -> list[DriveFile]:
        """
        One page of Google-native documents, most recently modified first.

        Args:
            search: Optional substring matched against file names.
            page_size: Server-side page size; only the first page is read.
        """
        req = self._service.files().list(
            q=_build_documents_query(search),
            fields=LIST_FIELDS,
            orderBy="modifiedTime desc",
            pageSize=page_size,
        )
        data = self._execute(req.execute)
        return [_file_dict_to_drive_file(f) for f in data.get("files", []) or []]

    def get(self, file_id: str) -> DriveFile:
        """File id, name and owners."""
        req = self._service.files().get(fileId=file_id, fields=OWNERSHIP_FIELDS)
        data = self._execute(req.execute)
        return _file_dict_to_drive_file(data)

    def create_permission(
        self,
        file_id: str,
        email_address: str,
        *,
        role: str = "writer",
        send_notification_email: bool = True,
    ) -> PermissionInfo:
        body = {"type": "user", "role": role, "emailAddress": email_address}
        req = self._service.permissions().create(
            fileId=file_id,
            body=body,
            sendNotificationEmail=send_notification_email,
            fields=PERMISSION_FIELDS,
        )
        data = self._execute(req.execute)
        return _permission_dict_to_info(data)

    def list_permissions(self, file_id: str) -> list[PermissionInfo]:
        req = self._service.permissions().list(
            fileId=file_id,
            fields=PERMISSION_LIST_FIELDS,
        )
        data = self._execute(req.execute)
        return [
            _permission_dict_to_info(p) for p in data.get("permissions", []) or []
        ]

    def update_permission(
        self,
        file_id: str,
        permission_id: str,
        *,
        role: str,
        pending_owner: bool,
    ) -> PermissionInfo:
        """
        Update role and pendingOwner of an existing permission.

        Note:
            pendingOwner=True queues an ownership request the grantee must
            accept; it does not move ownership by itself.
        """
        body = {"role": role, "pendingOwner": pending_owner}
        req = self._service.permissions().update(
            fileId=file_id,
            permissionId=permission_id,
            body=body,
            fields=PERMISSION_FIELDS,
        )
        data = self._execute(req.execute)
        return _permission_dict_to_info(data)

    # ----------------------------
    # Internals
    # ----------------------------
    def _execute(self, func: Callable[[], T]) -> T:
        try:
            return func()
        except DriveTransferError:
            raise
        except Exception as exc:
            raise self._map_exception(exc) from exc

    def _map_exception(self, exc: Exception) -> DriveTransferError:
        try:
            from googleapiclient.errors import HttpError
        except Exception:  # pragma: no cover
            HttpError = None  # type: ignore[assignment]

        if HttpError is not None and isinstance(exc, HttpError):
            info = _http_error_to_info(exc)
            return map_http_error(info, cause=exc)

        if isinstance(exc, (OSError, TimeoutError)):
            return NetworkError(f"Network error: {exc}", cause=exc)

        return ApiError(f"Drive API error: {exc}", cause=exc)


def _escape_query_value(value: str) -> str:
    return value.replace("\\", "\\\\").replace("'", "\\'")


def _build_documents_query(search: Optional[str]) -> str:
    types = " or ".join(f"mimeType='{m}'" for m in GOOGLE_DOCUMENT_TYPES)
    q = f"({types}) and trashed=false"
    if search:
        q = f"{q} and name contains '{_escape_query_value(search)}'"
    return q


def _file_dict_to_drive_file(data: dict[str, Any]) -> DriveFile:
    file_id = data.get("id")
    name = data.get("name", "")
    mime_type = data.get("mimeType", "")
    link = data.get("webViewLink")

    owner_emails: list[str] = []
    for owner in data.get("owners", []) or []:
        if isinstance(owner, dict) and isinstance(owner.get("emailAddress"), str):
            owner_emails.append(owner["emailAddress"])

    return DriveFile(
        file_id=file_id if isinstance(file_id, str) else "",
        name=name if isinstance(name, str) else "",
        mime_type=mime_type if isinstance(mime_type, str) else "",
        owner_emails=owner_emails,
        web_view_link=link if isinstance(link, str) else None,
        created_time=parse_rfc3339_or_none(data.get("createdTime")),
        modified_time=parse_rfc3339_or_none(data.get("modifiedTime")),
    )


def _permission_dict_to_info(data: dict[str, Any]) -> PermissionInfo:
    permission_id = data.get("id")
    role = data.get("role")
    email = data.get("emailAddress")
    return PermissionInfo(
        permission_id=permission_id if isinstance(permission_id, str) else "",
        role=role if isinstance(role, str) else "",
        email_address=email if isinstance(email, str) else None,
        pending_owner=bool(data.get("pendingOwner", False)),
    )


def _http_error_to_info(exc: Any) -> HttpErrorInfo:
    status_code = getattr(getattr(exc, "resp", None), "status", None)
    reason = getattr(getattr(exc, "resp", None), "reason", None)

    message = None
    details: dict[str, Any] = {}

    content = getattr(exc, "content", None)
    if isinstance(content, (bytes, bytearray)):
        try:
            payload = json.loads(content.decode("utf-8"))
        except (UnicodeDecodeError, ValueError):
            payload = None
        err = payload.get("error") if isinstance(payload, dict) else None
        if isinstance(err, dict):
            message = err.get("message") or None
            errors = err.get("errors") or []
            if errors and isinstance(errors, list) and isinstance(errors[0], dict):
                details["domain"] = errors[0].get("domain")
                details["reason_detail"] = errors[0].get("reason")
                if isinstance(errors[0].get("reason"), str):
                    reason = errors[0]["reason"]

    if not isinstance(status_code, int):
        status_code = 0

    return HttpErrorInfo(
        status_code=status_code,
        reason=reason if isinstance(reason, str) else None,
        message=message,
        details=details or None,
    )
