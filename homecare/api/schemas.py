from __future__ import annotations

from pydantic import BaseModel, Field

from homecare.application.use_cases.dashboard import dashboard_path
from homecare.domain.entities.auth_state import AuthState, AuthStatus
from homecare.domain.entities.role import Role


class CredentialsSchema(BaseModel):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class SignUpRequestSchema(CredentialsSchema):
    role: Role


class UserSchema(BaseModel):
    id: str
    email: str


class ProfileSchema(BaseModel):
    id: str
    role: Role
    name: str
    email: str
    phone: str | None = None
    address: str | None = None


class AuthStateSchema(BaseModel):
    status: AuthStatus
    user: UserSchema | None = None
    profile: ProfileSchema | None = None
    loading: bool
    error: str | None = None
    dashboard: str | None = None

    @staticmethod
    def from_state(state: AuthState) -> "AuthStateSchema":
        return AuthStateSchema(
            status=state.status,
            user=UserSchema(id=state.user.id, email=state.user.email) if state.user else None,
            profile=ProfileSchema(**state.profile.to_row()) if state.profile else None,
            loading=state.loading,
            error=state.error,
            dashboard=dashboard_path(state.profile.role) if state.profile else None,
        )


class SignUpResponseSchema(BaseModel):
    user: UserSchema
    state: AuthStateSchema


class RegistrationRequestSchema(BaseModel):
    user_id: str
    name: str
    phone: str | None = None
    address: str | None = None
    # optional; checked against the signed-up account
    email: str | None = None
    role: Role | None = None


class ServiceAreaRequestSchema(BaseModel):
    pincode: str = ""
    service_id: str = ""
    is_available: bool = True


class ServiceAreaRowSchema(BaseModel):
    pincode: str
    service_id: str
    service_name: str
    is_available: bool
    status: str


class ServiceAreaScreenSchema(BaseModel):
    areas: list[ServiceAreaRowSchema] = Field(default_factory=list)
    is_loading: bool = False
    error: str = ""
    confirm_clear: bool = False
