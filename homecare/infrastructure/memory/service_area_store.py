from __future__ import annotations

from datetime import datetime, timezone
from itertools import count

from homecare.application.ports.service_area_store import ServiceAreaStorePort
from homecare.domain.entities.service_area import ServiceArea


class MemoryServiceAreaStore(ServiceAreaStorePort):
    def __init__(self) -> None:
        self._rows: dict[tuple[str, str], tuple[int, ServiceArea]] = {}
        self._counter = count(1)

    def list_areas(self) -> list[ServiceArea]:
        # insertion order breaks ties between equal timestamps
        ordered = sorted(
            self._rows.values(),
            key=lambda item: (item[1].created_at, item[0]),
            reverse=True,
        )
        return [area for _, area in ordered]

    def update_service_area(self, pincode: str, service_id: str, is_available: bool) -> None:
        key = (pincode, service_id)
        existing = self._rows.get(key)
        if existing is None:
            area = ServiceArea(
                pincode=pincode,
                service_id=service_id,
                is_available=is_available,
                created_at=datetime.now(timezone.utc),
            )
            self._rows[key] = (next(self._counter), area)
            return

        seq, area = existing
        self._rows[key] = (
            seq,
            ServiceArea(
                pincode=area.pincode,
                service_id=area.service_id,
                is_available=is_available,
                created_at=area.created_at,
            ),
        )

    def delete_area(self, pincode: str, service_id: str) -> None:
        self._rows.pop((pincode, service_id), None)

    def delete_all(self) -> None:
        self._rows.clear()
