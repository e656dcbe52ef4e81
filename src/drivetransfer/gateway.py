"""DriveGateway: document listing and ownership transfer over the auth session."""

from __future__ import annotations

import logging
from typing import Optional

from drivetransfer.auth import AuthSession
from drivetransfer.errors import (
    DriveTransferError,
    OwnershipError,
    PermissionLookupError,
    RetrievalError,
)
from drivetransfer.models import DriveFile, FileSummary, PermissionInfo, TransferResult
from drivetransfer.transfer import TransferAttempt, TransferState
from drivetransfer.util.mime import file_type_label, is_google_document
from drivetransfer.util.time import EPOCH_UTC, to_display_date

logger = logging.getLogger(__name__)

WRITER_ROLE = "writer"


class DriveGateway:
    """High-level Drive operations for the signed-in account."""

    LIST_PAGE_SIZE: int = 50
    RECENT_LIMIT: int = 5

    def __init__(self, session: AuthSession) -> None:
        self._session = session

    def list_own_documents(self, search: Optional[str] = None) -> list[FileSummary]:
        """
        The most recently modified Google-native documents.

        Args:
            search: Optional substring the file name must contain.

        Raises:
            NotAuthenticatedError: if nobody is signed in.
            RetrievalError: if the Drive listing fails.
        """
        controller = self._session.controller()
        email = self._session.current_user().email

        try:
            files = controller.list_documents(
                search=search or None,
                page_size=self.LIST_PAGE_SIZE,
            )
        except DriveTransferError as exc:
            raise RetrievalError(
                f"Failed to get files: {exc}",
                details={"search": search},
                cause=exc,
            ) from exc

        # The API already filters and orders; re-check both in case it drifts.
        files = [f for f in files if is_google_document(f.mime_type)]
        files.sort(key=lambda f: f.modified_time or EPOCH_UTC, reverse=True)
        return [_to_summary(f, email) for f in files[: self.RECENT_LIMIT]]

    def transfer_ownership(self, file_id: str, receiver_email: str) -> TransferResult:
        """
        Ask receiver_email to become the owner of file_id.

        Steps: verify the signed-in account owns the file, grant the receiver
        writer access (Drive emails them), find that permission, and mark it
        pendingOwner. Ownership moves only once the receiver accepts.

        A failed step stops the transfer. A writer permission granted before the
        failure is left in place; its id is in the error's
        details["granted_permission_id"].

        Raises:
            NotAuthenticatedError: if nobody is signed in.
            OwnershipError: if the signed-in account is not the file's owner.
            PermissionLookupError: if the granted permission cannot be found.
            DriveTransferError: for Drive API failures at any step.
        """
        controller = self._session.controller()
        email = self._session.current_user().email
        attempt = TransferAttempt(file_id=file_id, receiver_email=receiver_email)
        logger.info("Starting transfer: %s -> %s", file_id, receiver_email)

        try:
            info = controller.get(file_id)
            attempt.file_name = info.name
            current_owner = info.owner_email
            logger.info(
                "File %r owned by %s; signed in as %s", info.name, current_owner, email
            )
            if current_owner is None or email is None or current_owner != email:
                raise OwnershipError(
                    f"You don't own this file. Current owner: {current_owner}. "
                    f"You are signed in as: {email}",
                    details={"current_owner": current_owner, "signed_in_as": email},
                )
            attempt.advance(TransferState.OWNER_VERIFIED)

            logger.info("Adding %s as writer", receiver_email)
            granted = controller.create_permission(
                file_id,
                receiver_email,
                role=WRITER_ROLE,
                send_notification_email=True,
            )
            attempt.permission_id = granted.permission_id or None
            attempt.advance(TransferState.WRITER_GRANTED)

            permission = _find_writer_permission(
                controller.list_permissions(file_id), receiver_email
            )
            if permission is None:
                raise PermissionLookupError("Could not find writer permission for receiver")
            attempt.permission_id = permission.permission_id
            attempt.advance(TransferState.PERMISSION_LOCATED)

            controller.update_permission(
                file_id,
                permission.permission_id,
                role=WRITER_ROLE,
                pending_owner=True,
            )
            attempt.advance(TransferState.PENDING_TRANSFER_SET)
        except DriveTransferError as exc:
            attempt.fail(exc)
            logger.error(
                "Transfer of %s failed at %s: %s",
                file_id,
                exc.details.get("failed_step"),
                exc,
            )
            if attempt.permission_id is not None:
                logger.warning(
                    "Writer permission %s for %s on %s was not rolled back",
                    attempt.permission_id,
                    receiver_email,
                    file_id,
                )
            raise

        logger.info("Transfer initiated: %s -> %s", file_id, receiver_email)
        return TransferResult(
            file_name=attempt.file_name or "",
            receiver_email=receiver_email,
        )


def _find_writer_permission(
    permissions: list[PermissionInfo],
    receiver_email: str,
) -> Optional[PermissionInfo]:
    # Drive stores addresses lowercased.
    wanted = receiver_email.casefold()
    for p in permissions:
        if (
            p.role == WRITER_ROLE
            and p.email_address is not None
            and p.email_address.casefold() == wanted
        ):
            return p
    return None


def _to_summary(info: DriveFile, current_email: Optional[str]) -> FileSummary:
    owner = info.owner_email
    return FileSummary(
        id=info.file_id,
        name=info.name,
        type=file_type_label(info.mime_type),
        owner_email=owner,
        view_url=info.web_view_link,
        created_date=to_display_date(info.created_time),
        modified_date=to_display_date(info.modified_time),
        is_owned_by_current_user=owner is not None and owner == current_email,
    )
