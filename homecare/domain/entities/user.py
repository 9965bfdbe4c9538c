from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class AuthUser:
    id: str
    email: str
    metadata: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def from_payload(payload: dict[str, Any]) -> "AuthUser":
        return AuthUser(
            id=str(payload.get("id") or ""),
            email=str(payload.get("email") or ""),
            metadata=dict(payload.get("user_metadata") or {}),
        )
