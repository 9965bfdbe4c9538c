from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from fastapi import Depends, HTTPException, Request

from homecare.application.auth_session import AuthSession
from homecare.application.ports.auth import AuthPort, Subscription
from homecare.application.ports.profile_store import ProfileStorePort
from homecare.application.ports.service_area_store import ServiceAreaStorePort
from homecare.application.ports.service_catalog import ServiceCatalogPort
from homecare.application.use_cases.register_profile import RegisterProfileUseCase
from homecare.application.use_cases.service_areas import ServiceAreaManager
from homecare.core.config import Settings, settings
from homecare.domain.entities.auth_state import AuthStatus
from homecare.domain.entities.profile import UserProfile
from homecare.domain.entities.role import Role
from homecare.infrastructure.content.content_store import LocaleContentStore
from homecare.infrastructure.memory.auth_backend import MemoryAuthBackend
from homecare.infrastructure.memory.profile_store import MemoryProfileStore
from homecare.infrastructure.memory.service_area_store import MemoryServiceAreaStore
from homecare.infrastructure.supabase.auth import SupabaseAuth
from homecare.infrastructure.supabase.client import SupabaseClient
from homecare.infrastructure.supabase.profile_store import SupabaseProfileStore
from homecare.infrastructure.supabase.service_area_store import SupabaseServiceAreaStore


@dataclass
class Backend:
    auth: AuthPort
    profiles: ProfileStorePort
    service_areas: ServiceAreaStorePort
    client: SupabaseClient | None = None

    def close(self) -> None:
        if self.client is not None:
            self.client.close()


@dataclass
class Container:
    backend: Backend
    catalog: ServiceCatalogPort
    session: AuthSession
    service_areas: ServiceAreaManager
    subscriptions: list[Subscription] = field(default_factory=list, init=False, repr=False)

    def start(self) -> None:
        # the screen belongs to whoever is signed in
        self.subscriptions.append(self.session.events.subscribe(self.service_areas.on_session_changed))
        self.session.start()

    def close(self) -> None:
        while self.subscriptions:
            self.subscriptions.pop().unsubscribe()
        self.session.close()
        self.backend.close()


def resolve_backend_provider(config: Settings) -> str:
    provider = (config.BACKEND_PROVIDER or "").strip().lower()
    if provider:
        return provider
    if not (config.SUPABASE_URL and config.SUPABASE_ANON_KEY) or config.ENV.lower() in {"dev", "local"}:
        return "memory"
    return "supabase"


def build_backend(config: Settings = settings) -> Backend:
    logger = logging.getLogger(__name__)
    provider = resolve_backend_provider(config)
    logger.info("BACKEND_PROVIDER=%s ENV=%s", provider, config.ENV)

    if provider == "memory":
        logger.info("Using in-memory backend")
        return Backend(
            auth=MemoryAuthBackend(),
            profiles=MemoryProfileStore(),
            service_areas=MemoryServiceAreaStore(),
        )
    if provider == "supabase":
        logger.info("Using Supabase backend")
        client = SupabaseClient(
            url=config.SUPABASE_URL or "",
            anon_key=config.SUPABASE_ANON_KEY or "",
            timeout=config.HTTP_TIMEOUT_SECONDS,
        )
        return Backend(
            auth=SupabaseAuth(client),
            profiles=SupabaseProfileStore(client),
            service_areas=SupabaseServiceAreaStore(client),
            client=client,
        )
    raise ValueError(f"Unknown BACKEND_PROVIDER: {provider!r}")


def build_container(backend: Backend | None = None, config: Settings = settings) -> Container:
    backend = backend or build_backend(config)
    catalog = LocaleContentStore()
    return Container(
        backend=backend,
        catalog=catalog,
        session=AuthSession(auth=backend.auth, profiles=backend.profiles),
        service_areas=ServiceAreaManager(store=backend.service_areas, catalog=catalog),
    )


def get_container(request: Request) -> Container:
    return request.app.state.container


def get_auth_session(container: Container = Depends(get_container)) -> AuthSession:
    return container.session


def get_catalog(container: Container = Depends(get_container)) -> ServiceCatalogPort:
    return container.catalog


def get_service_area_manager(container: Container = Depends(get_container)) -> ServiceAreaManager:
    return container.service_areas


def get_register_use_case(container: Container = Depends(get_container)) -> RegisterProfileUseCase:
    return RegisterProfileUseCase(store=container.backend.profiles, session=container.session)


def require_profile(session: AuthSession = Depends(get_auth_session)) -> UserProfile:
    state = session.state
    if state.status is not AuthStatus.AUTHENTICATED_WITH_PROFILE or state.profile is None:
        raise HTTPException(status_code=401, detail=state.error or "Not signed in")
    return state.profile


def require_role(role: Role) -> Callable[..., UserProfile]:
    def dependency(profile: UserProfile = Depends(require_profile)) -> UserProfile:
        if profile.role is not role:
            raise HTTPException(status_code=403, detail=f"{role.label()} access only")
        return profile

    return dependency
