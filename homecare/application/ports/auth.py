from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable

from homecare.domain.entities.user import AuthUser


class AuthChangeEvent(str, Enum):
    INITIAL_SESSION = "INITIAL_SESSION"
    SIGNED_IN = "SIGNED_IN"
    SIGNED_OUT = "SIGNED_OUT"
    TOKEN_REFRESHED = "TOKEN_REFRESHED"
    USER_UPDATED = "USER_UPDATED"


AuthListener = Callable[[AuthChangeEvent, "AuthUser | None"], None]


class Subscription:
    def __init__(self, unsubscribe: Callable[[], None]) -> None:
        self._unsubscribe = unsubscribe
        self.active = True

    def unsubscribe(self) -> None:
        if self.active:
            self.active = False
            self._unsubscribe()


class AuthPort(ABC):
    @abstractmethod
    def get_session(self) -> AuthUser | None:
        """Return the user of the current session, or None when signed out."""
        raise NotImplementedError

    @abstractmethod
    def sign_in_with_password(self, email: str, password: str) -> AuthUser:
        """Authenticate and notify listeners with SIGNED_IN. Raises AuthError."""
        raise NotImplementedError

    @abstractmethod
    def sign_up(self, email: str, password: str, metadata: dict[str, Any]) -> AuthUser:
        """Register a credential pair. Does not establish a session."""
        raise NotImplementedError

    @abstractmethod
    def sign_out(self) -> None:
        """Revoke the current session and notify listeners with SIGNED_OUT."""
        raise NotImplementedError

    @abstractmethod
    def on_auth_state_change(self, listener: AuthListener) -> Subscription:
        raise NotImplementedError
