from __future__ import annotations

from homecare.application.exceptions import BackendError, ProfileNotFoundError
from homecare.application.ports.profile_store import ProfileStorePort
from homecare.domain.entities.profile import UserProfile
from homecare.infrastructure.supabase.client import SupabaseClient

NO_ROWS = "PGRST116"
SINGLE_OBJECT = {"Accept": "application/vnd.pgrst.object+json"}


class SupabaseProfileStore(ProfileStorePort):
    def __init__(self, client: SupabaseClient, table: str = "profiles") -> None:
        self._client = client
        self._path = f"/rest/v1/{table}"

    def get_profile(self, user_id: str) -> UserProfile:
        try:
            resp = self._client.request(
                "GET",
                self._path,
                params={"select": "*", "id": f"eq.{user_id}"},
                headers=SINGLE_OBJECT,
            )
        except BackendError as e:
            if e.code == NO_ROWS:
                raise ProfileNotFoundError(str(e), code=e.code, status=e.status) from e
            raise
        return UserProfile.from_row(resp.json())

    def find_id_by_email(self, email: str) -> str | None:
        resp = self._client.request(
            "GET",
            self._path,
            params={"select": "id", "email": f"ilike.{_escape_like(email.strip())}", "limit": 1},
        )
        rows = resp.json() or []
        return str(rows[0]["id"]) if rows else None

    def create_profile(self, profile: UserProfile) -> UserProfile:
        resp = self._client.request(
            "POST",
            self._path,
            json=profile.to_row(),
            headers={"Prefer": "return=representation"},
        )
        rows = resp.json() or []
        return UserProfile.from_row(rows[0]) if rows else profile


def _escape_like(value: str) -> str:
    # ilike without wildcards is a case-insensitive equality
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
