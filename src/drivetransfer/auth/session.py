"""OAuth session: token lifecycle and account identity for drivetransfer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Optional

from google.auth.exceptions import RefreshError, TransportError
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import Flow

from drivetransfer.config import Settings
from drivetransfer.controller import GoogleDriveController
from drivetransfer.errors import (
    AuthError,
    ConfigurationError,
    DriveTransferError,
    NotAuthenticatedError,
)
from drivetransfer.models import SessionState

from .credentials import ClientCredentials, load_client_credentials

logger = logging.getLogger(__name__)

DRIVE_SCOPES: tuple[str, ...] = ("https://www.googleapis.com/auth/drive",)

ControllerFactory = Callable[[Any], GoogleDriveController]


class AuthSession:
    """
    The single OAuth session of the local server.

    States: unauthenticated -> authenticated (initialize() with a stored
    token, or complete_authorization()) -> unauthenticated
    (reset_authentication()).

    Only this object's methods mutate its state. They are not safe for
    concurrent invocation: the server serves one local user, and a second
    authorization or sign-out racing an in-flight one may leave the session
    inconsistent. No lock is taken.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        controller_factory: ControllerFactory = GoogleDriveController,
    ) -> None:
        self._settings = settings
        self._controller_factory = controller_factory

        self._client: Optional[ClientCredentials] = None
        self._flow: Optional[Flow] = None
        self._credentials: Optional[Credentials] = None
        self._controller: Optional[GoogleDriveController] = None
        self._email: Optional[str] = None

    @property
    def authenticated(self) -> bool:
        return self._credentials is not None

    @property
    def token_file(self) -> Path:
        return Path(self._settings.token_file)

    def initialize(self) -> bool:
        """
        Load client credentials and adopt a stored token if there is one.

        Returns:
            True once client credentials are loaded.

        Raises:
            ConfigurationError: if the client credentials are missing/malformed.
        """
        self._client = load_client_credentials(
            self._settings.credentials_file,
            redirect_uri=self._settings.redirect_uri,
        )
        self._flow = self._new_flow()

        creds = self._load_token()
        if creds is None:
            logger.info("Authentication required")
            return True

        try:
            self._adopt(creds, email=None)
        except AuthError as exc:
            logger.warning("Stored token could not be used: %s", exc)
            return True

        try:
            self._email = self.controller().get_user_email()
        except DriveTransferError as exc:
            logger.warning("Using existing authentication (could not fetch user info): %s", exc)
        else:
            logger.info("Using existing authentication for: %s", self._email)
        return True

    def build_authorization_url(self) -> str:
        """Consent URL requesting offline Drive access for a freshly chosen account."""
        flow = self._require_flow()
        url, _state = flow.authorization_url(
            access_type="offline",
            prompt="select_account consent",
        )
        return url

    def complete_authorization(self, code: str) -> SessionState:
        """
        Exchange an authorization code for a token and sign in.

        The token is persisted and the session updated only after the code
        exchange and the account lookup both succeed.

        Raises:
            AuthError: "Authentication failed: ..." on any failure; the session
                is left as it was.
        """
        self._require_flow()
        flow = self._new_flow()
        try:
            flow.fetch_token(code=code)
            creds = flow.credentials
            controller = self._controller_factory(creds)
            email = controller.get_user_email()
            self._save_credentials(creds)
        except Exception as exc:
            logger.warning("Authorization code exchange failed: %s", exc)
            raise AuthError(f"Authentication failed: {exc}", cause=exc) from exc

        self._flow = flow
        self._adopt(creds, email=email, controller=controller)
        logger.info("Authenticated as %s", email)
        return self.current_user()

    def reset_authentication(self) -> None:
        """
        Sign out: forget the token and start over with a fresh OAuth client.

        Idempotent; a missing token file is not an error.

        Raises:
            AuthError: if the token file exists but cannot be deleted.
        """
        try:
            self.token_file.unlink(missing_ok=True)
        except OSError as exc:
            raise AuthError(
                f"Failed to delete OAuth token file: {exc}",
                details={"token_file": str(self.token_file)},
                cause=exc,
            ) from exc

        self._credentials = None
        self._controller = None
        self._email = None

        if self._client is None:
            self._client = load_client_credentials(
                self._settings.credentials_file,
                redirect_uri=self._settings.redirect_uri,
            )
        self._flow = self._new_flow()
        logger.info("Signed out")

    def current_user(self) -> SessionState:
        return SessionState(authenticated=self.authenticated, email=self._email)

    def controller(self) -> GoogleDriveController:
        """
        Drive controller bound to the current token.

        Raises:
            NotAuthenticatedError: if nobody is signed in.
        """
        if self._credentials is None or self._controller is None:
            raise NotAuthenticatedError("Not authenticated")
        return self._controller

    # ----------------------------
    # Internals
    # ----------------------------
    def _require_flow(self) -> Flow:
        if self._flow is None:
            raise ConfigurationError("OAuth client is not initialized. Call initialize() first.")
        return self._flow

    def _new_flow(self) -> Flow:
        if self._client is None:
            raise ConfigurationError("OAuth client is not initialized. Call initialize() first.")
        # No PKCE verifier: the URL and the code exchange may use different Flow objects.
        return Flow.from_client_config(
            self._client.to_client_config(),
            scopes=list(DRIVE_SCOPES),
            redirect_uri=self._client.redirect_uri,
            autogenerate_code_verifier=False,
        )

    def _adopt(
        self,
        creds: Credentials,
        *,
        email: Optional[str],
        controller: Optional[GoogleDriveController] = None,
    ) -> None:
        self._controller = controller or self._controller_factory(creds)
        self._credentials = creds
        self._email = email

    def _load_token(self) -> Optional[Credentials]:
        token_file = self.token_file
        if not token_file.exists():
            return None

        try:
            creds = Credentials.from_authorized_user_file(
                str(token_file),
                scopes=list(DRIVE_SCOPES),
            )
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable token file %s: %s", token_file, exc)
            return None

        if not creds.valid and creds.refresh_token:
            try:
                creds.refresh(Request())
                self._save_credentials(creds)
            except (RefreshError, TransportError, AuthError) as exc:
                logger.warning("Failed to refresh stored OAuth token: %s", exc)

        return creds

    def _save_credentials(self, creds: Credentials) -> None:
        token_file = self.token_file
        try:
            token_file.parent.mkdir(parents=True, exist_ok=True)
            with open(token_file, "w", encoding="utf-8") as f:
                f.write(creds.to_json())
        except OSError as exc:
            raise AuthError(
                "Failed to save OAuth token file",
                details={"token_file": str(token_file)},
                cause=exc,
            ) from exc
