from __future__ import annotations

import logging
from dataclasses import replace

from homecare.application.events import SessionEvents
from homecare.application.exceptions import AuthError, DuplicateAccountError, ProfileNotFoundError
from homecare.application.ports.auth import AuthChangeEvent, AuthPort, Subscription
from homecare.application.ports.profile_store import ProfileStorePort
from homecare.application.use_cases.load_profile import ProfileLoader
from homecare.domain.entities.auth_state import AuthState, AuthStatus
from homecare.domain.entities.profile import UserProfile
from homecare.domain.entities.role import Role
from homecare.domain.entities.user import AuthUser

PROFILE_NOT_FOUND_MESSAGE = "Profile not found. Please sign in again."
DUPLICATE_ACCOUNT_MESSAGE = "An account with this email already exists"
REFRESH_TOKEN_NOT_FOUND = "refresh_token_not_found"


class AuthSession:
    """Who is signed in and what their profile is.

    Built once per application, started before the first request and closed
    at shutdown. Auth notifications are republished on ``SessionEvents`` with
    a sequence number; profile results older than the last applied one are
    dropped.
    """

    def __init__(
        self,
        auth: AuthPort,
        profiles: ProfileStorePort,
        events: SessionEvents | None = None,
    ) -> None:
        self._auth = auth
        self._profiles = profiles
        self._events = events or SessionEvents()
        self._state = AuthState()
        self._applied_seq = 0
        self._pending_user: AuthUser | None = None
        self._subscriptions: list[Subscription] = []
        self._logger = logging.getLogger(__name__)

    @property
    def state(self) -> AuthState:
        return self._state

    @property
    def events(self) -> SessionEvents:
        return self._events

    @property
    def pending_user(self) -> AuthUser | None:
        """Identity created by the last sign-up, until its profile is registered."""
        return self._pending_user

    @property
    def started(self) -> bool:
        return bool(self._subscriptions)

    def start(self) -> None:
        if self._subscriptions:
            return

        loader = ProfileLoader(self._profiles, self)
        self._subscriptions.append(self._events.subscribe(loader.handle))
        self._subscriptions.append(self._auth.on_auth_state_change(self._on_auth_state_change))

        self._update(loading=True, status=AuthStatus.AUTHENTICATING)
        try:
            user = self._auth.get_session()
        except Exception as e:
            self._logger.error("Session error", extra={"error": str(e)})
            self._update(loading=False, error=str(e), status=AuthStatus.ERRORED)
            return

        if user is None:
            self._update(loading=False, status=AuthStatus.UNAUTHENTICATED)
            return

        self._update(user=user)
        self._events.publish(AuthChangeEvent.INITIAL_SESSION, user)

    def close(self) -> None:
        while self._subscriptions:
            self._subscriptions.pop().unsubscribe()

    def sign_in(self, email: str, password: str) -> None:
        self._update(loading=True, error=None, status=AuthStatus.AUTHENTICATING)
        try:
            self._auth.sign_in_with_password(email, password)
        except Exception as e:
            self._logger.warning("Sign in error", extra={"error": str(e)})
            self._update(loading=False, error=str(e), status=AuthStatus.ERRORED)
            raise
        # profile arrives through the SIGNED_IN notification

    def sign_up(self, email: str, password: str, role: Role) -> AuthUser:
        role = Role.parse(role)
        self._update(loading=True, error=None, status=AuthStatus.AUTHENTICATING)
        try:
            if self._profiles.find_id_by_email(email):
                raise DuplicateAccountError(DUPLICATE_ACCOUNT_MESSAGE)

            user = self._auth.sign_up(
                email,
                password,
                metadata={"role": role.value, "name": email.split("@")[0]},
            )
        except Exception as e:
            self._logger.warning("Sign up error", extra={"error": str(e)})
            self._update(loading=False, error=str(e), status=AuthStatus.ERRORED)
            raise

        self._pending_user = user
        self._update(loading=False, status=self._settled_status())
        self._logger.info("Signed up", extra={"user_id": user.id})
        return user

    def sign_out(self) -> None:
        self._update(loading=True, error=None)
        try:
            self._auth.sign_out()
        except Exception as e:
            # local state is cleared even though the remote session may survive
            self._logger.error("Sign out error", extra={"error": str(e)})

        self._applied_seq = max(self._applied_seq, self._events.last_seq)
        self._state = AuthState(loading=False, status=AuthStatus.UNAUTHENTICATED)

    def clear_error(self) -> None:
        if self._state.status is AuthStatus.ERRORED:
            self._update(error=None, status=self._settled_status())
        else:
            self._update(error=None)

    def registration_done(self, user_id: str) -> None:
        if self._pending_user is not None and self._pending_user.id == user_id:
            self._pending_user = None

    def refresh_profile(self) -> None:
        user = self._state.user
        if user is None:
            raise AuthError("Not signed in")
        self._events.publish(AuthChangeEvent.USER_UPDATED, user)

    def _on_auth_state_change(self, event: AuthChangeEvent, user: AuthUser | None) -> None:
        self._update(user=user)
        self._events.publish(event, user)

    # results reported by ProfileLoader

    def profile_loading(self, seq: int) -> None:
        if self._is_stale(seq):
            return
        self._update(loading=True, error=None, status=AuthStatus.AUTHENTICATING)

    def profile_loaded(self, seq: int, profile: UserProfile) -> None:
        if self._is_stale(seq):
            return
        self._applied_seq = seq
        self._update(
            profile=profile,
            loading=False,
            error=None,
            status=AuthStatus.AUTHENTICATED_WITH_PROFILE,
        )

    def profile_cleared(self, seq: int) -> None:
        if self._is_stale(seq):
            return
        self._applied_seq = seq
        self._update(profile=None, loading=False, status=AuthStatus.UNAUTHENTICATED)

    def profile_failed(self, seq: int, error: Exception) -> None:
        if self._is_stale(seq):
            return
        self._applied_seq = seq

        if isinstance(error, ProfileNotFoundError):
            self.sign_out()
            self._update(error=PROFILE_NOT_FOUND_MESSAGE)
            return

        if getattr(error, "code", None) == REFRESH_TOKEN_NOT_FOUND:
            self.sign_out()
            self._update(error=str(error))
            return

        self._update(profile=None, loading=False, error=str(error), status=AuthStatus.ERRORED)

    def _is_stale(self, seq: int) -> bool:
        if seq <= self._applied_seq:
            self._logger.info(
                "Discarding stale profile result",
                extra={"seq": seq, "applied_seq": self._applied_seq},
            )
            return True
        return False

    def _settled_status(self) -> AuthStatus:
        if self._state.user is None:
            return AuthStatus.UNAUTHENTICATED
        if self._state.profile is None:
            return AuthStatus.AUTHENTICATED_NO_PROFILE
        return AuthStatus.AUTHENTICATED_WITH_PROFILE

    def _update(self, **changes) -> None:
        self._state = replace(self._state, **changes)
