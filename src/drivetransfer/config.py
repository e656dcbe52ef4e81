"""Runtime configuration.

Settings come from ``DRIVETRANSFER_*`` environment variables; the CLI layers
its flags on top with ``dataclasses.replace``.

    DRIVETRANSFER_CREDENTIALS_FILE  OAuth client JSON (read-only)
    DRIVETRANSFER_TOKEN_FILE        authorized-user token JSON
    DRIVETRANSFER_HOST / _PORT      bind address of the local server
    DRIVETRANSFER_REDIRECT_URI      overrides redirect_uris[0] of the client JSON
    DRIVETRANSFER_PUBLIC_DIR        static front-end directory
    DRIVETRANSFER_OPEN_BROWSER      open the front-end on startup
    DRIVETRANSFER_LOG_LEVEL         root logging level
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from drivetransfer.errors import ConfigurationError

PACKAGE_DIR = Path(__file__).parent
DEFAULT_PUBLIC_DIR = PACKAGE_DIR / "public"

DEFAULT_CREDENTIALS_FILE = Path("credentials") / "owner_oauth.json"
DEFAULT_TOKEN_FILE = Path("tokens") / "owner_token.json"
DEFAULT_HOST = "localhost"
DEFAULT_PORT = 3000

ENV_PREFIX = "DRIVETRANSFER_"

_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration. Immutable for the lifetime of the process."""

    credentials_file: Path = DEFAULT_CREDENTIALS_FILE
    token_file: Path = DEFAULT_TOKEN_FILE
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    redirect_uri: Optional[str] = None
    public_dir: Path = DEFAULT_PUBLIC_DIR
    open_browser: bool = True
    log_level: str = "INFO"

    @property
    def base_url(self) -> str:
        return f"http://{self.host}:{self.port}"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from environment variables, falling back to defaults."""
        env = os.environ if environ is None else environ

        def get(name: str) -> Optional[str]:
            value = env.get(ENV_PREFIX + name)
            if value is None or not value.strip():
                return None
            return value.strip()

        port_raw = get("PORT")
        port = DEFAULT_PORT
        if port_raw is not None:
            try:
                port = int(port_raw)
            except ValueError as exc:
                raise ConfigurationError(
                    f"{ENV_PREFIX}PORT must be an integer",
                    details={"value": port_raw},
                    cause=exc,
                ) from exc
        if not 0 < port < 65536:
            raise ConfigurationError(
                f"{ENV_PREFIX}PORT is out of range", details={"value": port}
            )

        open_browser = get("OPEN_BROWSER")
        return cls(
            credentials_file=Path(get("CREDENTIALS_FILE") or DEFAULT_CREDENTIALS_FILE),
            token_file=Path(get("TOKEN_FILE") or DEFAULT_TOKEN_FILE),
            host=get("HOST") or DEFAULT_HOST,
            port=port,
            redirect_uri=get("REDIRECT_URI"),
            public_dir=Path(get("PUBLIC_DIR") or DEFAULT_PUBLIC_DIR),
            open_browser=(
                True if open_browser is None else open_browser.lower() in _TRUE_VALUES
            ),
            log_level=(get("LOG_LEVEL") or "INFO").upper(),
        )
