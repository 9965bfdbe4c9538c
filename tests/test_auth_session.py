"""
Tests for the session/profile state holder.
"""

from __future__ import annotations

from dataclasses import replace

import pytest

from homecare.application.auth_session import PROFILE_NOT_FOUND_MESSAGE, AuthSession
from homecare.application.exceptions import AuthError, BackendError, DuplicateAccountError, ValidationError
from homecare.application.use_cases.register_profile import RegisterProfileUseCase
from homecare.domain.entities.auth_state import AuthStatus
from homecare.domain.entities.profile import UserProfile
from homecare.domain.entities.role import Role
from homecare.infrastructure.memory.auth_backend import MemoryAuthBackend
from homecare.infrastructure.memory.profile_store import MemoryProfileStore


class RevokeFailingAuth(MemoryAuthBackend):
    def sign_out(self) -> None:
        raise BackendError("network down")


class ErrorProfileStore(MemoryProfileStore):
    def __init__(self, error: Exception) -> None:
        super().__init__()
        self._error = error

    def get_profile(self, user_id: str) -> UserProfile:
        raise self._error


class RacingProfileStore(MemoryProfileStore):
    """The first lookup is overtaken by a newer session change before it returns."""

    def __init__(self) -> None:
        super().__init__()
        self.session: AuthSession | None = None
        self.calls = 0

    def get_profile(self, user_id: str) -> UserProfile:
        self.calls += 1
        profile = super().get_profile(user_id)
        if self.calls == 1:
            self.session.refresh_profile()
            return replace(profile, name="Stale")
        return profile


def _make(auth=None, profiles=None) -> tuple[AuthSession, MemoryAuthBackend, MemoryProfileStore]:
    auth = auth or MemoryAuthBackend()
    profiles = profiles or MemoryProfileStore()
    return AuthSession(auth=auth, profiles=profiles), auth, profiles


def _register(auth, profiles, email: str, role: Role, password: str = "secret123") -> UserProfile:
    user = auth.sign_up(email, password, {"role": role.value})
    return profiles.create_profile(
        UserProfile(id=user.id, role=role, name="Meena", email=email, phone="9876543210")
    )


def test_initial_state_is_authenticating_until_probe():
    """Before start() the holder is probing; with no session it settles unauthenticated."""
    session, _, _ = _make()
    assert session.state.status == AuthStatus.AUTHENTICATING
    assert session.state.loading is True

    session.start()

    assert session.state.status == AuthStatus.UNAUTHENTICATED
    assert session.state.loading is False
    assert session.state.user is None


def test_sign_in_reaches_authenticated_with_profile():
    """A successful sign-in ends with both user and profile populated."""
    session, auth, profiles = _make()
    profile = _register(auth, profiles, "meena@example.com", Role.NURSE)
    session.start()

    session.sign_in("meena@example.com", "secret123")

    state = session.state
    assert state.status == AuthStatus.AUTHENTICATED_WITH_PROFILE
    assert state.user is not None and state.user.id == profile.id
    assert state.profile == profile
    assert state.loading is False
    assert state.error is None


def test_existing_session_is_probed_on_start():
    """A session that already exists at start-up triggers a profile fetch."""
    session, auth, profiles = _make()
    _register(auth, profiles, "meena@example.com", Role.PATIENT)
    auth.sign_in_with_password("meena@example.com", "secret123")

    session.start()

    assert session.state.status == AuthStatus.AUTHENTICATED_WITH_PROFILE
    assert session.state.profile.role is Role.PATIENT


def test_missing_profile_forces_sign_out():
    """A session without a profile row returns to unauthenticated with an error."""
    session, auth, _ = _make()
    auth.sign_up("ghost@example.com", "secret123", {"role": "patient"})
    session.start()

    session.sign_in("ghost@example.com", "secret123")

    state = session.state
    assert state.status == AuthStatus.UNAUTHENTICATED
    assert state.user is None
    assert state.profile is None
    assert state.error == PROFILE_NOT_FOUND_MESSAGE
    assert auth.get_session() is None


def test_sign_in_failure_sets_error_and_raises():
    """Bad credentials surface the upstream message and stop loading."""
    session, auth, profiles = _make()
    _register(auth, profiles, "meena@example.com", Role.NURSE)
    session.start()

    with pytest.raises(AuthError):
        session.sign_in("meena@example.com", "wrong-password")

    assert session.state.status == AuthStatus.ERRORED
    assert session.state.error == "Invalid login credentials"
    assert session.state.loading is False

    session.clear_error()
    assert session.state.error is None
    assert session.state.status == AuthStatus.UNAUTHENTICATED


def test_sign_up_with_existing_profile_email_fails_before_auth():
    """Duplicate emails are rejected without creating an identity."""
    session, auth, profiles = _make()
    profiles.create_profile(
        UserProfile(id="existing", role=Role.PATIENT, name="Ravi", email="ravi@example.com")
    )
    session.start()

    with pytest.raises(DuplicateAccountError, match="already exists"):
        session.sign_up("ravi@example.com", "secret123", Role.PATIENT)

    assert not auth.has_account("ravi@example.com")
    assert session.state.user is None
    assert session.state.error == "An account with this email already exists"


def test_sign_up_tags_role_and_temporary_name():
    """Sign-up stores role and the email local part, and opens no session."""
    session, auth, _ = _make()
    session.start()

    user = session.sign_up("asha@example.com", "secret123", Role.PATIENT)

    assert user.metadata == {"role": "patient", "name": "asha"}
    assert auth.get_session() is None
    assert session.state.user is None
    assert session.state.loading is False
    assert session.state.status == AuthStatus.UNAUTHENTICATED


def test_sign_out_resets_state():
    session, auth, profiles = _make()
    _register(auth, profiles, "meena@example.com", Role.NURSE)
    session.start()
    session.sign_in("meena@example.com", "secret123")

    session.sign_out()

    state = session.state
    assert state.status == AuthStatus.UNAUTHENTICATED
    assert state.user is None and state.profile is None
    assert state.loading is False and state.error is None


def test_sign_out_clears_local_state_when_revoke_fails():
    """Local state is reset even if the remote revoke call fails."""
    session, auth, profiles = _make(auth=RevokeFailingAuth())
    _register(auth, profiles, "meena@example.com", Role.NURSE)
    session.start()
    session.sign_in("meena@example.com", "secret123")

    session.sign_out()

    assert session.state.user is None
    assert session.state.profile is None
    assert session.state.error is None
    assert session.state.status == AuthStatus.UNAUTHENTICATED


def test_stale_profile_result_is_discarded():
    """A profile fetch finishing after a newer one must not overwrite it."""
    session, _, _ = _make()
    session.start()
    newer = UserProfile(id="u2", role=Role.NURSE, name="New", email="new@example.com")
    older = UserProfile(id="u1", role=Role.PATIENT, name="Old", email="old@example.com")

    session.profile_loaded(3, newer)
    session.profile_loaded(2, older)
    session.profile_failed(1, BackendError("late failure"))

    assert session.state.profile == newer
    assert session.state.error is None


def test_profile_backend_error_is_recoverable():
    """A generic profile failure leaves the user signed in but errored."""
    session, auth, _ = _make(profiles=ErrorProfileStore(BackendError("boom")))
    auth.sign_up("meena@example.com", "secret123", {"role": "nurse"})
    session.start()

    session.sign_in("meena@example.com", "secret123")

    assert session.state.status == AuthStatus.ERRORED
    assert session.state.user is not None
    assert session.state.error == "boom"

    session.clear_error()
    assert session.state.status == AuthStatus.AUTHENTICATED_NO_PROFILE


def test_refresh_token_not_found_forces_sign_out():
    error = BackendError("Invalid Refresh Token", code="refresh_token_not_found", status=400)
    session, auth, _ = _make(profiles=ErrorProfileStore(error))
    auth.sign_up("meena@example.com", "secret123", {"role": "nurse"})
    session.start()

    session.sign_in("meena@example.com", "secret123")

    assert session.state.user is None
    assert session.state.error == "Invalid Refresh Token"
    assert auth.get_session() is None


def test_close_unsubscribes_from_auth_changes():
    session, auth, _ = _make()
    session.start()
    assert auth.listener_count() == 1

    session.close()

    assert auth.listener_count() == 0
    assert session.started is False


def test_registration_then_sign_in():
    """Sign-up, register the profile, then sign in to reach the dashboard."""
    session, auth, profiles = _make()
    session.start()
    register = RegisterProfileUseCase(store=profiles, session=session)

    user = session.sign_up("kavya@example.com", "secret123", Role.NURSE)
    register.execute(
        user_id=user.id,
        email="kavya@example.com",
        role=Role.NURSE,
        name="Kavya",
        phone="9000000000",
    )
    session.sign_in("kavya@example.com", "secret123")

    assert session.state.status == AuthStatus.AUTHENTICATED_WITH_PROFILE
    assert session.state.profile.name == "Kavya"


def test_registration_validates_role_specific_fields():
    session, _, profiles = _make()
    session.start()
    register = RegisterProfileUseCase(store=profiles, session=session)

    patient = session.sign_up("p@example.com", "secret123", Role.PATIENT)
    with pytest.raises(ValueError, match="address"):
        register.execute(user_id=patient.id, name="P")

    nurse = session.sign_up("n@example.com", "secret123", Role.NURSE)
    with pytest.raises(ValueError, match="phone"):
        register.execute(user_id=nurse.id, name="N")


def test_profile_result_overtaken_by_newer_session_change_is_dropped():
    """A lookup that finishes after a newer session change must not win."""
    profiles = RacingProfileStore()
    session, auth, _ = _make(profiles=profiles)
    profiles.session = session
    _register(auth, profiles, "meena@example.com", Role.NURSE)
    session.start()

    session.sign_in("meena@example.com", "secret123")

    assert profiles.calls == 2
    assert session.state.status == AuthStatus.AUTHENTICATED_WITH_PROFILE
    assert session.state.profile.name == "Meena"
    assert session.events.last_seq == 2


def test_registration_is_bound_to_the_signed_up_identity():
    """Email and role come from the sign-up; other ids or values are refused."""
    session, _, profiles = _make()
    session.start()
    register = RegisterProfileUseCase(store=profiles, session=session)

    user = session.sign_up("real@example.com", "secret123", Role.NURSE)

    with pytest.raises(ValidationError, match="No pending sign-up"):
        register.execute(user_id="someone-else", name="Mallory", phone="9000000000")
    with pytest.raises(ValidationError, match="Email"):
        register.execute(user_id=user.id, name="Real", phone="9000000000", email="other@example.com")
    with pytest.raises(ValidationError, match="Role"):
        register.execute(user_id=user.id, name="Real", address="Chennai", role=Role.PATIENT)
    assert profiles.find_id_by_email("other@example.com") is None

    profile = register.execute(user_id=user.id, name="Real", phone="9000000000")

    assert profile.email == "real@example.com"
    assert profile.role is Role.NURSE
    assert session.pending_user is None
    with pytest.raises(ValidationError, match="No pending sign-up"):
        register.execute(user_id=user.id, name="Again", phone="9000000000")


def test_duplicate_email_check_ignores_case():
    session, _, profiles = _make()
    profiles.create_profile(
        UserProfile(id="existing", role=Role.PATIENT, name="Ravi", email="ravi@example.com")
    )
    session.start()

    with pytest.raises(DuplicateAccountError):
        session.sign_up("Ravi@Example.com", "secret123", Role.NURSE)
