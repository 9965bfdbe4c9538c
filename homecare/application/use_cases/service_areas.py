from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any

from homecare.application.events import SessionChanged
from homecare.application.ports.service_area_store import ServiceAreaStorePort
from homecare.application.ports.service_catalog import ServiceCatalogPort
from homecare.domain.entities.language import Language
from homecare.domain.entities.service_area import ServiceArea

ERROR_LOADING = "Error loading service areas"
ERROR_UPDATING = "Error updating service area"
ERROR_DELETING = "Error deleting service area"
ERROR_CLEARING = "Error clearing service areas"

MISSING_PINCODE = "Please enter a pincode"
MISSING_SERVICE = "Please select a service"
INVALID_PINCODE = "Pincode must be 6 digits"

PINCODE_RE = re.compile(r"^\d{6}$")


@dataclass
class ServiceAreaForm:
    pincode: str = ""
    service_id: str = ""
    is_available: bool = True


class ServiceAreaManager:
    """Service-area registry screen of the nurse dashboard.

    Every remote failure is logged and reduced to one static message; every
    successful mutation is followed by a full reload.
    """

    def __init__(
        self,
        store: ServiceAreaStorePort,
        catalog: ServiceCatalogPort,
        language: Language = Language.EN,
    ) -> None:
        self._store = store
        self._catalog = catalog
        self._language = language
        self.areas: list[ServiceArea] = []
        self.is_loading = False
        self.error = ""
        self.confirm_clear = False
        self.form = ServiceAreaForm()
        self._user_id: str | None = None
        self._logger = logging.getLogger(__name__)

    def load(self) -> bool:
        self.is_loading = True
        try:
            self.areas = self._store.list_areas()
            return True
        except Exception as e:
            self.error = ERROR_LOADING
            self._logger.exception("Error loading service areas", extra={"error": str(e)})
            return False
        finally:
            self.is_loading = False

    def upsert(self, pincode: str, service_id: str, is_available: bool = True) -> bool:
        self.form = ServiceAreaForm(pincode=pincode, service_id=service_id, is_available=is_available)
        return self.submit()

    def submit(self) -> bool:
        pincode = (self.form.pincode or "").strip()
        service_id = (self.form.service_id or "").strip()

        validation_error = self._validate(pincode, service_id)
        if validation_error:
            self.error = validation_error
            return False

        # the catalog match is case-insensitive; store its canonical id
        service_id = self._catalog.get_service(service_id, self._language).id

        self.error = ""
        self.is_loading = True
        try:
            self._store.update_service_area(pincode, service_id, self.form.is_available)
            self._logger.info(
                "Service area updated",
                extra={"pincode": pincode, "service_id": service_id, "status": self.form.is_available},
            )
            self.form = ServiceAreaForm()
            return self.load()
        except Exception as e:
            self.error = ERROR_UPDATING
            self._logger.exception("Error updating service area", extra={"error": str(e)})
            return False
        finally:
            self.is_loading = False

    def delete(self, pincode: str, service_id: str) -> bool:
        self.error = ""
        self.is_loading = True
        try:
            self._store.delete_area(pincode, service_id)
            return self.load()
        except Exception as e:
            self.error = ERROR_DELETING
            self._logger.exception(
                "Error deleting service area",
                extra={"pincode": pincode, "service_id": service_id, "error": str(e)},
            )
            return False
        finally:
            self.is_loading = False

    def on_session_changed(self, message: SessionChanged) -> None:
        user_id = message.user.id if message.user else None
        if user_id != self._user_id:
            self._user_id = user_id
            self.reset()

    def reset(self) -> None:
        """Drop screen state left over from the previous session."""
        self.areas = []
        self.error = ""
        self.confirm_clear = False
        self.form = ServiceAreaForm()

    def request_clear(self) -> None:
        self.confirm_clear = True

    def cancel_clear(self) -> None:
        self.confirm_clear = False

    def clear_all(self) -> bool:
        if not self.confirm_clear:
            self._logger.warning("Clear all requested without confirmation")
            return False

        self.error = ""
        self.is_loading = True
        try:
            self._store.delete_all()
            loaded = self.load()
            self.confirm_clear = False
            return loaded
        except Exception as e:
            self.error = ERROR_CLEARING
            self._logger.exception("Error clearing service areas", extra={"error": str(e)})
            return False
        finally:
            self.is_loading = False

    def service_name(self, service_id: str) -> str:
        entry = self._catalog.get_service(service_id, self._language)
        return entry.title if entry else service_id

    def rows(self) -> list[dict[str, Any]]:
        return [
            {
                "pincode": area.pincode,
                "service_id": area.service_id,
                "service_name": self.service_name(area.service_id),
                "is_available": area.is_available,
                "status": area.status_label(),
            }
            for area in self.areas
        ]

    def _validate(self, pincode: str, service_id: str) -> str | None:
        if not pincode:
            return MISSING_PINCODE
        if not service_id:
            return MISSING_SERVICE
        if not PINCODE_RE.match(pincode):
            return INVALID_PINCODE
        if self._catalog.get_service(service_id, self._language) is None:
            return MISSING_SERVICE
        return None
