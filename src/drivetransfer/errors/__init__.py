"""Public error exports for drivetransfer."""

from __future__ import annotations

from .exceptions import (
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

__all__ = [
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
