from __future__ import annotations

from dataclasses import asdict
from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from homecare.application.use_cases.dashboard import build_dashboard
from homecare.domain.entities.profile import UserProfile
from homecare.domain.entities.role import Role
from homecare.wiring.dependencies import require_profile

router = APIRouter(prefix="/dashboard")


@router.get("/{role}")
async def get_dashboard(role: Role, profile: UserProfile = Depends(require_profile)) -> dict[str, Any]:
    if profile.role is not role:
        raise HTTPException(status_code=403, detail=f"{role.label()} access only")
    return asdict(build_dashboard(profile))
