"""drivetransfer public API."""

from __future__ import annotations

from drivetransfer.auth import AuthSession, ClientCredentials, load_client_credentials
from drivetransfer.config import Settings
from drivetransfer.errors import (
    ApiError,
    AuthError,
    ConfigurationError,
    ConflictError,
    DriveTransferError,
    HttpErrorInfo,
    InvalidArgumentError,
    NetworkError,
    NotAuthenticatedError,
    NotFoundError,
    OwnershipError,
    PermissionError,
    PermissionLookupError,
    QuotaExceededError,
    RateLimitError,
    RetrievalError,
    map_http_error,
)
from drivetransfer.gateway import DriveGateway
from drivetransfer.models import FileSummary, SessionState, TransferResult
from drivetransfer.transfer import TransferAttempt, TransferState

__all__ = [
    # High-level
    "DriveGateway",
    "Settings",
    # Auth
    "AuthSession",
    "ClientCredentials",
    "load_client_credentials",
    # Transfer / Models
    "TransferAttempt",
    "TransferState",
    "FileSummary",
    "SessionState",
    "TransferResult",
    # Errors
    "DriveTransferError",
    "ConfigurationError",
    "AuthError",
    "NotAuthenticatedError",
    "OwnershipError",
    "PermissionLookupError",
    "RetrievalError",
    "PermissionError",
    "InvalidArgumentError",
    "NotFoundError",
    "ConflictError",
    "RateLimitError",
    "QuotaExceededError",
    "NetworkError",
    "ApiError",
    "HttpErrorInfo",
    "map_http_error",
]
