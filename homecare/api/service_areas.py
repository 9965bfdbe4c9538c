from __future__ import annotations

from fastapi import APIRouter, Depends

from homecare.api.schemas import ServiceAreaRequestSchema, ServiceAreaRowSchema, ServiceAreaScreenSchema
from homecare.application.use_cases.service_areas import ServiceAreaManager
from homecare.domain.entities.role import Role
from homecare.wiring.dependencies import get_service_area_manager, require_role

router = APIRouter(
    prefix="/dashboard/nurse/service-areas",
    dependencies=[Depends(require_role(Role.NURSE))],
)


def _screen(manager: ServiceAreaManager) -> ServiceAreaScreenSchema:
    return ServiceAreaScreenSchema(
        areas=[ServiceAreaRowSchema(**row) for row in manager.rows()],
        is_loading=manager.is_loading,
        error=manager.error,
        confirm_clear=manager.confirm_clear,
    )


@router.get("", response_model=ServiceAreaScreenSchema)
async def list_service_areas(manager: ServiceAreaManager = Depends(get_service_area_manager)):
    manager.load()
    return _screen(manager)


@router.post("", response_model=ServiceAreaScreenSchema)
async def upsert_service_area(
    req: ServiceAreaRequestSchema,
    manager: ServiceAreaManager = Depends(get_service_area_manager),
):
    manager.upsert(req.pincode, req.service_id, req.is_available)
    return _screen(manager)


@router.delete("/{pincode}/{service_id}", response_model=ServiceAreaScreenSchema)
async def delete_service_area(
    pincode: str,
    service_id: str,
    manager: ServiceAreaManager = Depends(get_service_area_manager),
):
    manager.delete(pincode, service_id)
    return _screen(manager)


@router.post("/clear/request", response_model=ServiceAreaScreenSchema)
async def request_clear(manager: ServiceAreaManager = Depends(get_service_area_manager)):
    manager.request_clear()
    return _screen(manager)


@router.post("/clear/cancel", response_model=ServiceAreaScreenSchema)
async def cancel_clear(manager: ServiceAreaManager = Depends(get_service_area_manager)):
    manager.cancel_clear()
    return _screen(manager)


@router.post("/clear/confirm", response_model=ServiceAreaScreenSchema)
async def confirm_clear(manager: ServiceAreaManager = Depends(get_service_area_manager)):
    manager.clear_all()
    return _screen(manager)
