from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Query

from homecare.application.ports.service_catalog import ServiceCatalogPort
from homecare.core.config import settings
from homecare.domain.entities.language import Language
from homecare.wiring.dependencies import get_catalog

router = APIRouter()


def resolve_language(lang: Language | None = Query(None)) -> Language:
    if lang is not None:
        return lang
    try:
        return Language(settings.DEFAULT_LANGUAGE)
    except ValueError:
        return Language.EN


@router.get("/content")
async def get_content(
    language: Language = Depends(resolve_language),
    catalog: ServiceCatalogPort = Depends(get_catalog),
) -> dict[str, Any]:
    return {
        "language": language.value,
        "toggle": language.toggled().value,
        "content": catalog.get_content(language),
    }


@router.get("/services")
async def list_services(
    language: Language = Depends(resolve_language),
    catalog: ServiceCatalogPort = Depends(get_catalog),
) -> list[dict[str, Any]]:
    return [
        {
            "id": entry.id,
            "title": entry.title,
            "description": entry.description,
            "sub_services": [
                {"name": s.name, "description": s.description, "price": s.price}
                for s in entry.sub_services
            ],
        }
        for entry in catalog.list_services(language)
    ]
