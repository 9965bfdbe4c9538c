from fastapi import APIRouter, Depends, HTTPException

from homecare.api.schemas import ProfileSchema, RegistrationRequestSchema
from homecare.application.exceptions import BackendError
from homecare.application.use_cases.register_profile import RegisterProfileUseCase
from homecare.wiring.dependencies import get_register_use_case

router = APIRouter()


@router.post("/registration", response_model=ProfileSchema)
async def register(
    req: RegistrationRequestSchema,
    uc: RegisterProfileUseCase = Depends(get_register_use_case),
):
    try:
        profile = uc.execute(
            user_id=req.user_id,
            name=req.name,
            phone=req.phone,
            address=req.address,
            email=req.email,
            role=req.role,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except BackendError as e:
        raise HTTPException(status_code=502, detail=str(e))

    return ProfileSchema(**profile.to_row())
