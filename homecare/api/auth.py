from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from homecare.api.schemas import (
    AuthStateSchema,
    CredentialsSchema,
    SignUpRequestSchema,
    SignUpResponseSchema,
    UserSchema,
)
from homecare.application.auth_session import AuthSession
from homecare.application.exceptions import AuthError, BackendError, DuplicateAccountError
from homecare.wiring.dependencies import get_auth_session

router = APIRouter(prefix="/auth")
logger = logging.getLogger(__name__)


@router.get("/state", response_model=AuthStateSchema)
async def get_state(session: AuthSession = Depends(get_auth_session)):
    return AuthStateSchema.from_state(session.state)


@router.post("/sign-in", response_model=AuthStateSchema)
async def sign_in(req: CredentialsSchema, session: AuthSession = Depends(get_auth_session)):
    try:
        session.sign_in(req.email, req.password)
    except AuthError as e:
        raise HTTPException(status_code=401, detail=str(e))
    except BackendError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return AuthStateSchema.from_state(session.state)


@router.post("/sign-up", response_model=SignUpResponseSchema)
async def sign_up(req: SignUpRequestSchema, session: AuthSession = Depends(get_auth_session)):
    try:
        user = session.sign_up(req.email, req.password, req.role)
    except DuplicateAccountError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except (AuthError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except BackendError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return SignUpResponseSchema(
        user=UserSchema(id=user.id, email=user.email),
        state=AuthStateSchema.from_state(session.state),
    )


@router.post("/sign-out", response_model=AuthStateSchema)
async def sign_out(session: AuthSession = Depends(get_auth_session)):
    session.sign_out()
    return AuthStateSchema.from_state(session.state)


@router.post("/clear-error", response_model=AuthStateSchema)
async def clear_error(session: AuthSession = Depends(get_auth_session)):
    session.clear_error()
    return AuthStateSchema.from_state(session.state)
