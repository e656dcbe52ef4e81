"""Transfer attempt states for drivetransfer."""

from __future__ import annotations

from enum import Enum


class TransferState(str, Enum):
    """States of one ownership-transfer attempt, in protocol order."""

    REQUESTED = "requested"
    OWNER_VERIFIED = "owner_verified"
    WRITER_GRANTED = "writer_granted"
    PERMISSION_LOCATED = "permission_located"
    PENDING_TRANSFER_SET = "pending_transfer_set"
    FAILED = "failed"


# Happy path; FAILED is reachable from any non-terminal state.
TRANSFER_SEQUENCE: tuple[TransferState, ...] = (
    TransferState.REQUESTED,
    TransferState.OWNER_VERIFIED,
    TransferState.WRITER_GRANTED,
    TransferState.PERMISSION_LOCATED,
    TransferState.PENDING_TRANSFER_SET,
)

TERMINAL_STATES: frozenset[TransferState] = frozenset(
    {TransferState.PENDING_TRANSFER_SET, TransferState.FAILED}
)
