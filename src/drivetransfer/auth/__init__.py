"""Public auth exports for drivetransfer."""

from __future__ import annotations

from .credentials import ClientCredentials, load_client_credentials
from .session import DRIVE_SCOPES, AuthSession

__all__ = ["AuthSession", "ClientCredentials", "DRIVE_SCOPES", "load_client_credentials"]
