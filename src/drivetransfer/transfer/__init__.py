"""Public transfer exports for drivetransfer."""

from __future__ import annotations

from .attempt import TransferAttempt
from .states import TERMINAL_STATES, TRANSFER_SEQUENCE, TransferState

__all__ = ["TransferAttempt", "TransferState", "TRANSFER_SEQUENCE", "TERMINAL_STATES"]
