"""OAuth client credentials for drivetransfer."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from drivetransfer.errors import ConfigurationError

DEFAULT_AUTH_URI = "https://accounts.google.com/o/oauth2/auth"
DEFAULT_TOKEN_URI = "https://oauth2.googleapis.com/token"

_CLIENT_TYPES: tuple[str, ...] = ("installed", "web")


@dataclass(slots=True, frozen=True)
class ClientCredentials:
    """
    OAuth client identity.

    Loaded once from the Google Cloud Console client JSON; client_type is the
    top-level key the JSON used ("installed" or "web").
    """

    client_id: str
    client_secret: str
    redirect_uri: str
    client_type: str = "installed"
    auth_uri: str = DEFAULT_AUTH_URI
    token_uri: str = DEFAULT_TOKEN_URI

    def __post_init__(self) -> None:
        if self.client_type not in _CLIENT_TYPES:
            raise ValueError(f"client_type must be one of {_CLIENT_TYPES}")

        for key in ("client_id", "client_secret", "redirect_uri"):
            value = getattr(self, key)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"ClientCredentials.{key} must be a non-empty string")

    def to_client_config(self) -> dict[str, Any]:
        """Client config in the shape google_auth_oauthlib expects."""
        return {
            self.client_type: {
                "client_id": self.client_id,
                "client_secret": self.client_secret,
                "auth_uri": self.auth_uri,
                "token_uri": self.token_uri,
                "redirect_uris": [self.redirect_uri],
            }
        }


def load_client_credentials(
    path: str | Path,
    *,
    redirect_uri: Optional[str] = None,
) -> ClientCredentials:
    """
    Read the OAuth client JSON at path.

    Args:
        path: Client secrets file.
        redirect_uri: Overrides the first entry of redirect_uris.

    Raises:
        ConfigurationError: if the file is missing, unreadable or malformed.
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            payload = json.load(f)
    except FileNotFoundError as exc:
        raise ConfigurationError(
            f"OAuth client credentials not found: {path}",
            details={"credentials_file": str(path)},
            cause=exc,
        ) from exc
    except (OSError, ValueError) as exc:
        raise ConfigurationError(
            f"Failed to read OAuth client credentials: {exc}",
            details={"credentials_file": str(path)},
            cause=exc,
        ) from exc

    if not isinstance(payload, dict):
        raise ConfigurationError(
            "OAuth client credentials must be a JSON object",
            details={"credentials_file": str(path)},
        )

    client_type = next((t for t in _CLIENT_TYPES if isinstance(payload.get(t), dict)), None)
    if client_type is None:
        raise ConfigurationError(
            "OAuth client credentials need an 'installed' or 'web' section",
            details={"credentials_file": str(path)},
        )
    section = payload[client_type]

    if redirect_uri is None:
        uris = section.get("redirect_uris") or []
        redirect_uri = uris[0] if isinstance(uris, list) and uris else None

    try:
        return ClientCredentials(
            client_id=section.get("client_id"),
            client_secret=section.get("client_secret"),
            redirect_uri=redirect_uri,  # type: ignore[arg-type]
            client_type=client_type,
            auth_uri=section.get("auth_uri") or DEFAULT_AUTH_URI,
            token_uri=section.get("token_uri") or DEFAULT_TOKEN_URI,
        )
    except ValueError as exc:
        raise ConfigurationError(
            f"Malformed OAuth client credentials: {exc}",
            details={"credentials_file": str(path), "client_type": client_type},
            cause=exc,
        ) from exc
