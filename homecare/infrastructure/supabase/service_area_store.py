from __future__ import annotations

from homecare.application.ports.service_area_store import ServiceAreaStorePort
from homecare.domain.entities.service_area import ServiceArea
from homecare.infrastructure.supabase.client import SupabaseClient

EPOCH = "1970-01-01"


class SupabaseServiceAreaStore(ServiceAreaStorePort):
    def __init__(self, client: SupabaseClient, table: str = "service_areas") -> None:
        self._client = client
        self._path = f"/rest/v1/{table}"

    def list_areas(self) -> list[ServiceArea]:
        resp = self._client.request(
            "GET",
            self._path,
            params={"select": "*", "order": "created_at.desc"},
        )
        return [ServiceArea.from_row(row) for row in resp.json() or []]

    def update_service_area(self, pincode: str, service_id: str, is_available: bool) -> None:
        self._client.request(
            "POST",
            "/rest/v1/rpc/update_service_area",
            json={
                "p_pincode": pincode,
                "p_service_id": service_id,
                "p_is_available": is_available,
            },
        )

    def delete_area(self, pincode: str, service_id: str) -> None:
        self._client.request(
            "DELETE",
            self._path,
            params={"pincode": f"eq.{pincode}", "service_id": f"eq.{service_id}"},
        )

    def delete_all(self) -> None:
        # PostgREST refuses an unfiltered DELETE
        self._client.request("DELETE", self._path, params={"created_at": f"gte.{EPOCH}"})
