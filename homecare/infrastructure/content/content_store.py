from __future__ import annotations

import copy
from typing import Any

from homecare.application.ports.service_catalog import ServiceCatalogPort
from homecare.domain.entities.language import Language
from homecare.domain.entities.service_catalog import ServiceCatalogEntry, SubService
from homecare.infrastructure.content.locales import EN, TA


def _build_catalog(content: dict[str, Any]) -> dict[str, ServiceCatalogEntry]:
    catalog: dict[str, ServiceCatalogEntry] = {}
    for item in content["services"]["items"]:
        catalog[item["id"]] = ServiceCatalogEntry(
            id=item["id"],
            title=item["title"],
            description=item["description"],
            sub_services=tuple(
                SubService(name=s["name"], description=s["description"], price=int(s["price"]))
                for s in item.get("subServices", [])
            ),
        )
    return catalog


class LocaleContentStore(ServiceCatalogPort):
    def __init__(self, tables: dict[Language, dict[str, Any]] | None = None) -> None:
        self._tables = tables or {Language.EN: EN, Language.TA: TA}
        self._catalogs = {lang: _build_catalog(table) for lang, table in self._tables.items()}

    def list_services(self, language: Language) -> list[ServiceCatalogEntry]:
        return list(self._catalog_for(language).values())

    def get_service(self, service_id: str, language: Language) -> ServiceCatalogEntry | None:
        normalized_id = (service_id or "").lower().strip()
        return self._catalog_for(language).get(normalized_id)

    def get_content(self, language: Language) -> dict[str, Any]:
        # callers get their own copy of the static table
        return copy.deepcopy(self._tables.get(language) or self._tables[Language.EN])

    def _catalog_for(self, language: Language) -> dict[str, ServiceCatalogEntry]:
        return self._catalogs.get(language) or self._catalogs[Language.EN]
