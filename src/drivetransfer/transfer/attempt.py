"""Short-lived state machine for a single ownership transfer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from drivetransfer.errors import DriveTransferError

from .states import TERMINAL_STATES, TRANSFER_SEQUENCE, TransferState


@dataclass(slots=True)
class TransferAttempt:
    """
    Tracks one transfer from request to pending ownership (or failure).

    An attempt is never retried: once FAILED, the caller starts a new one.
    failed_step is the state the attempt was trying to reach when it failed.
    """

    file_id: str
    receiver_email: str

    state: TransferState = TransferState.REQUESTED
    file_name: Optional[str] = None
    permission_id: Optional[str] = None
    failed_step: Optional[TransferState] = None
    error: Optional[DriveTransferError] = None
    history: list[TransferState] = field(
        default_factory=lambda: [TransferState.REQUESTED]
    )

    @property
    def next_state(self) -> Optional[TransferState]:
        """The state the next successful step leads to, or None when terminal."""
        if self.state in TERMINAL_STATES:
            return None
        return TRANSFER_SEQUENCE[TRANSFER_SEQUENCE.index(self.state) + 1]

    @property
    def is_terminal(self) -> bool:
        return self.state in TERMINAL_STATES

    def advance(self, to: TransferState) -> None:
        """Move to the next state of the sequence. Raises ValueError otherwise."""
        expected = self.next_state
        if expected is None:
            raise ValueError(f"Transfer attempt is already {self.state.value}")
        if to is not expected:
            raise ValueError(
                f"Cannot move from {self.state.value} to {to.value}; "
                f"expected {expected.value}"
            )
        self.state = to
        self.history.append(to)

    def fail(self, error: DriveTransferError) -> DriveTransferError:
        """
        Move to FAILED and annotate error.details with the failed step.

        Returns the same error so callers can `raise attempt.fail(exc)`.
        """
        if self.is_terminal:
            raise ValueError(f"Transfer attempt is already {self.state.value}")

        self.failed_step = self.next_state
        self.error = error
        self.state = TransferState.FAILED
        self.history.append(TransferState.FAILED)

        error.details.setdefault("file_id", self.file_id)
        error.details.setdefault("receiver_email", self.receiver_email)
        error.details["failed_step"] = self.failed_step.value if self.failed_step else None
        if self.permission_id is not None:
            error.details["granted_permission_id"] = self.permission_id
        return error
