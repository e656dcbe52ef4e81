"""HTTP façade: JSON API, OAuth redirect page and static front-end."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel, ConfigDict, Field

from drivetransfer.auth import AuthSession
from drivetransfer.config import DEFAULT_PUBLIC_DIR
from drivetransfer.errors import AuthError, DriveTransferError
from drivetransfer.gateway import DriveGateway

from . import pages

logger = logging.getLogger(__name__)


class OAuthCallbackPayload(BaseModel):
    code: Optional[str] = None


class TransferPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    file_id: Optional[str] = Field(default=None, alias="fileId")
    receiver_email: Optional[str] = Field(default=None, alias="receiverEmail")


def _failure(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "message": message})


# Message for a request body or query that fails validation, by route.
VALIDATION_MESSAGES = {
    "/api/oauth-callback": "Authorization code is required",
    "/api/transfer": "File ID and receiver email are required",
}


def create_app(
    session: AuthSession,
    gateway: Optional[DriveGateway] = None,
    *,
    public_dir: Optional[Path] = None,
) -> FastAPI:
    """
    Build the FastAPI application around an initialized session.

    Handlers are plain functions, so FastAPI runs them in its threadpool and
    the blocking Drive client never stalls the event loop.
    """
    gateway = gateway or DriveGateway(session)
    app = FastAPI(title="drivetransfer", docs_url=None, redoc_url=None)
    app.state.session = session
    app.state.gateway = gateway

    @app.exception_handler(DriveTransferError)
    async def _drive_error(request: Request, exc: DriveTransferError) -> JSONResponse:
        logger.warning("%s %s failed: %s", request.method, request.url.path, exc)
        return _failure(str(exc), 500)

    @app.exception_handler(RequestValidationError)
    async def _invalid_request(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc.errors())
        message = VALIDATION_MESSAGES.get(request.url.path, "Invalid request")
        return _failure(message, 400)

    @app.get("/api/auth-status")
    def auth_status() -> dict:
        return session.current_user().to_dict()

    @app.get("/api/auth-url")
    def auth_url() -> dict:
        return {"url": session.build_authorization_url()}

    @app.post("/api/oauth-callback")
    def oauth_callback(payload: Optional[OAuthCallbackPayload] = None):
        code = payload.code if payload is not None else None
        if not code:
            return _failure("Authorization code is required", 400)

        try:
            state = session.complete_authorization(code)
        except AuthError as exc:
            return {"success": False, "message": str(exc)}
        return {
            "success": True,
            "message": "Authentication successful!",
            "userEmail": state.email,
        }

    @app.post("/api/reset-auth")
    def reset_auth() -> dict:
        try:
            session.reset_authentication()
        except DriveTransferError as exc:
            return {"success": False, "message": f"Sign out failed: {exc}"}
        return {"success": True, "message": "Signed out successfully!"}

    @app.get("/api/my-files")
    def my_files(search: Optional[str] = None) -> dict:
        files = gateway.list_own_documents(search or None)
        return {"success": True, "files": [f.to_dict() for f in files]}

    @app.post("/api/transfer")
    def transfer(payload: Optional[TransferPayload] = None):
        file_id = (payload.file_id or "").strip() if payload is not None else ""
        receiver = (payload.receiver_email or "").strip() if payload is not None else ""
        if not file_id or not receiver:
            return _failure("File ID and receiver email are required", 400)

        result = gateway.transfer_ownership(file_id, receiver)
        return {
            "success": True,
            "message": "Ownership transfer initiated!",
            "details": result.to_details(),
        }

    @app.get("/oauth", response_class=HTMLResponse)
    def oauth_redirect(code: Optional[str] = None, error: Optional[str] = None) -> str:
        if error:
            return pages.error_page(f"Authorization was not granted: {error}")
        if not code:
            return pages.error_page("No authorization code received.")

        try:
            state = session.complete_authorization(code)
        except AuthError as exc:
            return pages.failure_page(str(exc))
        except DriveTransferError as exc:
            return pages.error_page(str(exc))
        return pages.success_page(state.email)

    # Mounted last so the API routes above take precedence.
    static_dir = Path(public_dir) if public_dir is not None else DEFAULT_PUBLIC_DIR
    app.mount("/", StaticFiles(directory=static_dir, html=True), name="public")

    return app
