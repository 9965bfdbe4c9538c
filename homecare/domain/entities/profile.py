from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from homecare.domain.entities.role import Role


@dataclass(frozen=True)
class UserProfile:
    id: str
    role: Role
    name: str
    email: str
    phone: str | None = None
    address: str | None = None

    @staticmethod
    def from_row(row: dict[str, Any]) -> "UserProfile":
        return UserProfile(
            id=str(row["id"]),
            role=Role.parse(row.get("role")),
            name=(row.get("name") or "").strip(),
            email=(row.get("email") or "").strip(),
            phone=(row.get("phone") or None),
            address=(row.get("address") or None),
        )

    def to_row(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "role": self.role.value,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "address": self.address,
        }
