from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SubService:
    name: str
    description: str
    price: int


@dataclass(frozen=True)
class ServiceCatalogEntry:
    id: str
    title: str
    description: str
    sub_services: tuple[SubService, ...] = ()
