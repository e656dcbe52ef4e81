"""Exception hierarchy and HTTP error mapping for drivetransfer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


class DriveTransferError(Exception):
    """
    Base exception for drivetransfer.

    Attributes:
        details: Optional structured information (e.g., HTTP status, failed step).
        cause: Optional original exception that triggered this error.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}
        self.cause = cause


class ConfigurationError(DriveTransferError):
    """Raised when OAuth client credentials or settings are missing/malformed."""


class AuthError(DriveTransferError):
    """Raised when the code exchange, token persistence, or HTTP 401 fails."""


class NotAuthenticatedError(DriveTransferError):
    """Raised when a Drive operation is attempted without an authenticated session."""


class OwnershipError(DriveTransferError):
    """Raised when the signed-in account does not own the target file."""


class PermissionLookupError(DriveTransferError):
    """Raised when the receiver's writer permission cannot be found after granting it."""


class RetrievalError(DriveTransferError):
    """Raised when listing documents fails."""


class PermissionError(DriveTransferError):
    """Raised when access is denied (HTTP 403 non-quota)."""


class InvalidArgumentError(DriveTransferError):
    """Raised when request arguments are invalid (HTTP 400, etc.)."""


class NotFoundError(DriveTransferError):
    """Raised when a Drive resource is not found (HTTP 404)."""


class ConflictError(DriveTransferError):
    """Raised when a conflict occurs (HTTP 409/412)."""


class RateLimitError(DriveTransferError):
    """Raised when rate-limited (HTTP 429)."""


class QuotaExceededError(DriveTransferError):
    """Raised when quota is exceeded (HTTP 403 with quota-related reason)."""


class NetworkError(DriveTransferError):
    """Raised when network/timeout issues prevent the request."""


class ApiError(DriveTransferError):
    """Raised for unclassified API errors (5xx, unknown 4xx, etc.)."""


@dataclass(frozen=True)
class HttpErrorInfo:
    """Lightweight HTTP error information for mapping to drivetransfer exceptions."""

    status_code: int
    reason: str | None = None
    message: str | None = None
    details: dict[str, Any] | None = None


_QUOTA_REASON_KEYWORDS: tuple[str, ...] = (
    "quota",
    "rateLimitExceeded",
    "userRateLimitExceeded",
    "dailyLimitExceeded",
    "usageLimits",
    "storageQuotaExceeded",
)


def _is_quota_reason(reason: str | None) -> bool:
    if not reason:
        return False
    return any(key.lower() in reason.lower() for key in _QUOTA_REASON_KEYWORDS)


def map_http_error(
    info: HttpErrorInfo,
    *,
    cause: Optional[BaseException] = None,
) -> DriveTransferError:
    """
    Map a Drive HTTP error to a drivetransfer exception.

    Policy:
        - 400 -> InvalidArgumentError
        - 401 -> AuthError
        - 403 -> PermissionError, or QuotaExceededError if quota-related
        - 404 -> NotFoundError
        - 409/412 -> ConflictError
        - 429 -> RateLimitError
        - otherwise -> ApiError
    """
    details: dict[str, Any] = {
        "status_code": info.status_code,
        "reason": info.reason,
    }
    if info.details:
        details.update(info.details)

    message = info.message or f"HTTP error {info.status_code}"

    if info.status_code == 400:
        return InvalidArgumentError(message, details=details, cause=cause)
    if info.status_code == 401:
        return AuthError(message, details=details, cause=cause)
    if info.status_code == 403:
        if _is_quota_reason(info.reason):
            return QuotaExceededError(message, details=details, cause=cause)
        return PermissionError(message, details=details, cause=cause)
    if info.status_code == 404:
        return NotFoundError(message, details=details, cause=cause)
    if info.status_code in (409, 412):
        return ConflictError(message, details=details, cause=cause)
    if info.status_code == 429:
        return RateLimitError(message, details=details, cause=cause)

    return ApiError(message, details=details, cause=cause)
