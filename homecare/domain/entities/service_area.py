from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class ServiceArea:
    pincode: str
    service_id: str
    is_available: bool = True
    created_at: datetime | None = None

    @staticmethod
    def from_row(row: dict[str, Any]) -> "ServiceArea":
        created_at = row.get("created_at")
        if isinstance(created_at, str):
            created_at = datetime.fromisoformat(created_at.replace("Z", "+00:00"))
        return ServiceArea(
            pincode=str(row["pincode"]),
            service_id=str(row["service_id"]),
            is_available=bool(row.get("is_available")),
            created_at=created_at,
        )

    def key(self) -> tuple[str, str]:
        return (self.pincode, self.service_id)

    def status_label(self) -> str:
        return "Available" if self.is_available else "Unavailable"
