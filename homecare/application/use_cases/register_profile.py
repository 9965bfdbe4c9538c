from __future__ import annotations

import logging
from dataclasses import dataclass

from homecare.application.auth_session import AuthSession
from homecare.application.exceptions import ValidationError
from homecare.application.ports.profile_store import ProfileStorePort
from homecare.domain.entities.profile import UserProfile
from homecare.domain.entities.role import Role


@dataclass
class RegisterProfileUseCase:
    """Second step of sign-up: store the profile row for a new identity.

    Only the identity returned by the last ``sign_up`` can be registered. Its
    email and role come from that identity; values sent by the caller must
    agree with it.
    """

    store: ProfileStorePort
    session: AuthSession

    def execute(
        self,
        user_id: str,
        name: str,
        phone: str | None = None,
        address: str | None = None,
        email: str | None = None,
        role: Role | str | None = None,
    ) -> UserProfile:
        if not user_id:
            raise ValidationError("Missing user id")

        pending = self.session.pending_user
        if pending is None or pending.id != user_id:
            raise ValidationError("No pending sign-up for this user")

        account_email = (pending.email or "").strip()
        if email and email.strip().lower() != account_email.lower():
            raise ValidationError("Email does not match the signed-up account")

        account_role = Role.parse(pending.metadata.get("role"))
        if role is not None and Role.parse(role) is not account_role:
            raise ValidationError("Role does not match the signed-up account")

        name = (name or "").strip()
        if not name:
            raise ValidationError("Please enter your name")
        if not account_email:
            raise ValidationError("Please enter your email")

        phone = (phone or "").strip() or None
        address = (address or "").strip() or None
        if account_role is Role.PATIENT and not address:
            raise ValidationError("Please enter your address")
        if account_role is Role.NURSE and not phone:
            raise ValidationError("Please enter your phone number")

        profile = self.store.create_profile(
            UserProfile(
                id=user_id,
                role=account_role,
                name=name,
                email=account_email,
                phone=phone,
                address=address,
            )
        )
        self.session.registration_done(user_id)
        logging.getLogger(__name__).info(
            "Profile registered", extra={"user_id": user_id, "role": account_role.value}
        )

        user = self.session.state.user
        if user is not None and user.id == user_id:
            self.session.refresh_profile()
        return profile
