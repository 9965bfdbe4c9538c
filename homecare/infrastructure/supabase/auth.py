from __future__ import annotations

import logging
from typing import Any

from homecare.application.auth_session import REFRESH_TOKEN_NOT_FOUND
from homecare.application.exceptions import AuthError
from homecare.application.ports.auth import AuthChangeEvent, AuthListener, AuthPort, Subscription
from homecare.domain.entities.user import AuthUser
from homecare.infrastructure.supabase.client import SupabaseClient


class SupabaseAuth(AuthPort):
    def __init__(self, client: SupabaseClient) -> None:
        self._client = client
        self._listeners: list[AuthListener] = []
        self._logger = logging.getLogger(__name__)
        client.on_unauthorized = self._refresh_on_unauthorized

    def get_session(self) -> AuthUser | None:
        if not self._client.access_token:
            return None
        try:
            resp = self._client.request("GET", "/auth/v1/user", error_cls=AuthError)
        except AuthError as e:
            if e.status in (401, 403):
                self._client.set_session(None)
                return None
            raise
        return AuthUser.from_payload(resp.json())

    def sign_in_with_password(self, email: str, password: str) -> AuthUser:
        resp = self._client.request(
            "POST",
            "/auth/v1/token",
            params={"grant_type": "password"},
            json={"email": email, "password": password},
            error_cls=AuthError,
            retry_unauthorized=False,
        )
        body = resp.json()
        if not body.get("user"):
            raise AuthError("No user returned after sign in")

        self._client.set_session(body.get("access_token"), body.get("refresh_token"))
        user = AuthUser.from_payload(body["user"])
        self._logger.info("Signed in", extra={"user_id": user.id})
        self._notify(AuthChangeEvent.SIGNED_IN, user)
        return user

    def sign_up(self, email: str, password: str, metadata: dict[str, Any]) -> AuthUser:
        resp = self._client.request(
            "POST",
            "/auth/v1/signup",
            json={"email": email, "password": password, "data": metadata},
            error_cls=AuthError,
        )
        body = resp.json()
        # with email confirmation on, the user object is the whole body
        payload = body.get("user") or body
        if not payload.get("id"):
            raise AuthError("No user returned after sign up")
        return AuthUser.from_payload(payload)

    def sign_out(self) -> None:
        try:
            if self._client.access_token:
                self._client.request("POST", "/auth/v1/logout", error_cls=AuthError, retry_unauthorized=False)
        finally:
            self._end_session()

    def refresh_session(self) -> AuthUser:
        """Trade the refresh token for a new access token.

        Notifies TOKEN_REFRESHED on success. A rejected refresh ends the
        session: tokens are dropped, SIGNED_OUT is notified and AuthError
        is raised.
        """
        refresh_token = self._client.refresh_token
        if not refresh_token:
            self._end_session()
            raise AuthError("Refresh token not found", code=REFRESH_TOKEN_NOT_FOUND, status=400)

        try:
            resp = self._client.request(
                "POST",
                "/auth/v1/token",
                params={"grant_type": "refresh_token"},
                json={"refresh_token": refresh_token},
                error_cls=AuthError,
                retry_unauthorized=False,
            )
            body = resp.json()
            if not body.get("access_token") or not body.get("user"):
                raise AuthError("No session returned after refresh", code=REFRESH_TOKEN_NOT_FOUND)
        except AuthError as e:
            self._logger.warning("Token refresh failed", extra={"error_code": e.code, "error": str(e)})
            self._end_session()
            raise

        self._client.set_session(body["access_token"], body.get("refresh_token") or refresh_token)
        user = AuthUser.from_payload(body["user"])
        self._logger.info("Token refreshed", extra={"user_id": user.id})
        self._notify(AuthChangeEvent.TOKEN_REFRESHED, user)
        return user

    def on_auth_state_change(self, listener: AuthListener) -> Subscription:
        self._listeners.append(listener)
        return Subscription(lambda: self._listeners.remove(listener))

    def _refresh_on_unauthorized(self) -> bool:
        try:
            self.refresh_session()
        except AuthError:
            return False
        return True

    def _end_session(self) -> None:
        self._client.set_session(None)
        self._notify(AuthChangeEvent.SIGNED_OUT, None)

    def _notify(self, event: AuthChangeEvent, user: AuthUser | None) -> None:
        for listener in list(self._listeners):
            listener(event, user)
