from __future__ import annotations

from homecare.application.exceptions import BackendError, ProfileNotFoundError
from homecare.application.ports.profile_store import ProfileStorePort
from homecare.domain.entities.profile import UserProfile


class MemoryProfileStore(ProfileStorePort):
    def __init__(self) -> None:
        self._profiles: dict[str, UserProfile] = {}

    def get_profile(self, user_id: str) -> UserProfile:
        profile = self._profiles.get(user_id)
        if profile is None:
            raise ProfileNotFoundError(
                "JSON object requested, multiple (or no) rows returned",
                code="PGRST116",
                status=406,
            )
        return profile

    def find_id_by_email(self, email: str) -> str | None:
        wanted = (email or "").strip().lower()
        for profile in self._profiles.values():
            if profile.email.lower() == wanted:
                return profile.id
        return None

    def create_profile(self, profile: UserProfile) -> UserProfile:
        if profile.id in self._profiles:
            raise BackendError(
                'duplicate key value violates unique constraint "profiles_pkey"',
                code="23505",
                status=409,
            )
        self._profiles[profile.id] = profile
        return profile
