from __future__ import annotations

import logging
import uuid
from typing import Any

from homecare.application.exceptions import AuthError
from homecare.application.ports.auth import AuthChangeEvent, AuthListener, AuthPort, Subscription
from homecare.domain.entities.user import AuthUser


class MemoryAuthBackend(AuthPort):
    """Local stand-in for the hosted auth service."""

    def __init__(self) -> None:
        self._accounts: dict[str, tuple[str, AuthUser]] = {}
        self._current: AuthUser | None = None
        self._listeners: list[AuthListener] = []
        self._logger = logging.getLogger(__name__)

    def get_session(self) -> AuthUser | None:
        return self._current

    def sign_in_with_password(self, email: str, password: str) -> AuthUser:
        account = self._accounts.get(_normalize(email))
        if account is None or account[0] != password:
            raise AuthError("Invalid login credentials", code="invalid_credentials", status=400)

        user = account[1]
        self._current = user
        self._logger.info("Mock sign in", extra={"user_id": user.id})
        self._notify(AuthChangeEvent.SIGNED_IN, user)
        return user

    def sign_up(self, email: str, password: str, metadata: dict[str, Any]) -> AuthUser:
        key = _normalize(email)
        if not key or not password:
            raise AuthError("Email and password are required", code="validation_failed", status=400)
        if len(password) < 6:
            raise AuthError("Password should be at least 6 characters", code="weak_password", status=422)
        if key in self._accounts:
            raise AuthError("User already registered", code="user_already_exists", status=422)

        user = AuthUser(id=str(uuid.uuid4()), email=email.strip(), metadata=dict(metadata))
        self._accounts[key] = (password, user)
        self._logger.info("Mock sign up", extra={"user_id": user.id})
        return user

    def sign_out(self) -> None:
        self._current = None
        self._notify(AuthChangeEvent.SIGNED_OUT, None)

    def on_auth_state_change(self, listener: AuthListener) -> Subscription:
        self._listeners.append(listener)
        return Subscription(lambda: self._listeners.remove(listener))

    def has_account(self, email: str) -> bool:
        return _normalize(email) in self._accounts

    def listener_count(self) -> int:
        return len(self._listeners)

    def _notify(self, event: AuthChangeEvent, user: AuthUser | None) -> None:
        for listener in list(self._listeners):
            listener(event, user)


def _normalize(email: str) -> str:
    return (email or "").strip().lower()
