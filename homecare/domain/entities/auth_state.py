from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from homecare.domain.entities.profile import UserProfile
from homecare.domain.entities.user import AuthUser


class AuthStatus(str, Enum):
    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATING = "authenticating"
    AUTHENTICATED_NO_PROFILE = "authenticated_no_profile"
    AUTHENTICATED_WITH_PROFILE = "authenticated_with_profile"
    ERRORED = "errored"


@dataclass(frozen=True)
class AuthState:
    user: AuthUser | None = None
    profile: UserProfile | None = None
    loading: bool = True
    error: str | None = None
    status: AuthStatus = AuthStatus.AUTHENTICATING
