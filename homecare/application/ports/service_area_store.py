from abc import ABC, abstractmethod

from homecare.domain.entities.service_area import ServiceArea


class ServiceAreaStorePort(ABC):
    @abstractmethod
    def list_areas(self) -> list[ServiceArea]:
        """All rows, most recently created first."""
        raise NotImplementedError

    @abstractmethod
    def update_service_area(self, pincode: str, service_id: str, is_available: bool) -> None:
        """Insert or update the row keyed by (pincode, service_id)."""
        raise NotImplementedError

    @abstractmethod
    def delete_area(self, pincode: str, service_id: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def delete_all(self) -> None:
        raise NotImplementedError
