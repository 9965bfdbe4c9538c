from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from homecare.domain.entities.language import Language
from homecare.domain.entities.service_catalog import ServiceCatalogEntry


class ServiceCatalogPort(ABC):
    @abstractmethod
    def list_services(self, language: Language) -> list[ServiceCatalogEntry]:
        raise NotImplementedError

    @abstractmethod
    def get_service(self, service_id: str, language: Language) -> ServiceCatalogEntry | None:
        """Get catalog entry by service id."""
        raise NotImplementedError

    @abstractmethod
    def get_content(self, language: Language) -> dict[str, Any]:
        """Full locale content table (nav, hero, services, about, contact)."""
        raise NotImplementedError
