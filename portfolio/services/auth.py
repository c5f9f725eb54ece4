"""Firebase Authentication wrapper.

Email/password sign-in goes through the Identity Toolkit REST API (the Admin
SDK cannot check passwords). Everything else (ID token verification,
refresh-token revocation and custom claims) uses ``firebase_admin.auth``.
"""
from __future__ import annotations

import asyncio
import logging
from functools import lru_cache
from typing import Any, Callable, Optional

import httpx
from firebase_admin import auth as firebase_auth
from firebase_admin import exceptions as firebase_exceptions

from portfolio.config import get_settings
from portfolio.errors import RemoteOperationError
from portfolio.models import AuthUser, Session
from portfolio.services.firebase_app import get_firebase_app

logger = logging.getLogger(__name__)

AuthListener = Callable[[Optional[AuthUser]], None]

_SIGN_IN_ERRORS = {
    "EMAIL_NOT_FOUND": "Invalid email or password",
    "INVALID_PASSWORD": "Invalid email or password",
    "INVALID_LOGIN_CREDENTIALS": "Invalid email or password",
    "INVALID_EMAIL": "Invalid email address",
    "USER_DISABLED": "This account has been disabled",
    "TOO_MANY_ATTEMPTS_TRY_LATER": "Too many attempts, try again later",
}


class AuthService:
    """Sign-in, token verification and auth state listeners."""

    _SIGN_IN_URL = "https://identitytoolkit.googleapis.com/v1/accounts:signInWithPassword"

    def __init__(
        self,
        *,
        api_key: str | None,
        app: Any = None,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._api_key = api_key
        self._app = app
        self._client = http_client or httpx.AsyncClient(timeout=timeout)
        self._listeners: list[AuthListener] = []

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def sign_in(self, email: str, password: str) -> Session:
        if not self._api_key:
            raise RemoteOperationError("Email/password sign-in is not configured", status_code=503)

        payload = {"email": email, "password": password, "returnSecureToken": True}
        try:
            resp = await self._client.post(self._SIGN_IN_URL, params={"key": self._api_key}, json=payload)
        except httpx.HTTPError as exc:
            logger.error("Sign-in request failed: %s", exc)
            raise RemoteOperationError("Authentication service is unreachable") from exc

        if resp.status_code >= 400:
            code = _error_code(resp)
            logger.warning("Sign-in rejected for %s: %s", email, code)
            raise RemoteOperationError(_SIGN_IN_ERRORS.get(code, "Login failed"), status_code=401)

        data = resp.json()
        user = await asyncio.to_thread(self.current_user, data["idToken"])
        if user is None:
            raise RemoteOperationError("Login failed", status_code=401)

        self._notify(user)
        logger.info("Signed in uid=%s", user.uid)
        return Session(
            id_token=data["idToken"],
            refresh_token=data.get("refreshToken", ""),
            expires_in=int(data.get("expiresIn", 3600)),
            user=user,
        )

    async def sign_out(self, user: AuthUser) -> None:
        try:
            await asyncio.to_thread(firebase_auth.revoke_refresh_tokens, user.uid, app=self._app)
        except firebase_auth.UserNotFoundError:
            logger.warning("Sign-out for unknown uid=%s", user.uid)
        except firebase_exceptions.FirebaseError as exc:
            logger.error("Failed to revoke tokens for uid=%s: %s", user.uid, exc)
            raise RemoteOperationError("Logout failed") from exc
        self._notify(None)
        logger.info("Signed out uid=%s", user.uid)

    def current_user(self, id_token: str | None) -> AuthUser | None:
        """Return the user behind ``id_token``, or None if it is not valid."""

        if not id_token:
            return None
        try:
            # Tokens issued before sign_out revoked the session are refused too
            decoded = firebase_auth.verify_id_token(id_token, app=self._app, check_revoked=True)
        except firebase_auth.CertificateFetchError as exc:
            logger.error("Could not fetch token signing certificates: %s", exc)
            raise RemoteOperationError("Authentication service is unreachable") from exc
        except (firebase_auth.InvalidIdTokenError, firebase_auth.UserNotFoundError, ValueError) as exc:
            # Expired, revoked, disabled, deleted and malformed all end up here
            logger.debug("Rejected ID token: %s", exc)
            return None
        except firebase_exceptions.FirebaseError as exc:
            logger.error("Could not check ID token revocation: %s", exc)
            raise RemoteOperationError("Authentication service is unreachable") from exc

        return AuthUser(uid=decoded["uid"], email=decoded.get("email"), claims=dict(decoded))

    def on_auth_state_change(self, callback: AuthListener) -> Callable[[], None]:
        """Register ``callback`` for sign-in/sign-out; returns an unsubscribe function."""

        self._listeners.append(callback)

        def unsubscribe() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    def grant_admin(self, email: str) -> AuthUser:
        """Set the ``admin`` custom claim on the account registered to ``email``."""

        try:
            record = firebase_auth.get_user_by_email(email, app=self._app)
            claims = dict(record.custom_claims or {})
            claims["admin"] = True
            firebase_auth.set_custom_user_claims(record.uid, claims, app=self._app)
        except firebase_auth.UserNotFoundError as exc:
            raise RemoteOperationError(f"No user registered with {email}", status_code=404) from exc
        except firebase_exceptions.FirebaseError as exc:
            raise RemoteOperationError(f"Failed to update claims for {email}") from exc
        logger.info("Granted admin claim to uid=%s", record.uid)
        return AuthUser(uid=record.uid, email=record.email, claims=claims)

    async def close(self) -> None:
        await self._client.aclose()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _notify(self, user: AuthUser | None) -> None:
        for listener in list(self._listeners):
            try:
                listener(user)
            except Exception as exc:  # pragma: no cover
                logger.exception("Auth state listener failed: %s", exc)


def _error_code(resp: httpx.Response) -> str:
    try:
        message = resp.json()["error"]["message"]
    except (ValueError, KeyError, TypeError):
        return ""
    # e.g. "TOO_MANY_ATTEMPTS_TRY_LATER : Access to this account has been temporarily disabled"
    return str(message).split(":", 1)[0].strip()


@lru_cache()
def get_auth_service() -> AuthService:
    """Return the process-wide auth service, created on first use."""

    settings = get_settings()
    return AuthService(
        api_key=settings.firebase_web_api_key,
        app=get_firebase_app(),
        timeout=settings.firebase_auth_timeout,
    )
