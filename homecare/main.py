import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from homecare.api.auth import router as auth_router
from homecare.api.content import router as content_router
from homecare.api.dashboard import router as dashboard_router
from homecare.api.registration import router as registration_router
from homecare.api.service_areas import router as service_areas_router
from homecare.core.config import settings
from homecare.wiring.dependencies import Container, build_container


class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in (
            "user_id", "role", "event", "seq", "applied_seq",
            "path", "pincode", "service_id", "status", "error_code", "error",
        ):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


def configure_logging() -> None:
    handler = logging.StreamHandler()
    handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

    root = logging.getLogger()
    root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
    root.handlers.clear()
    root.addHandler(handler)


def create_app(container: Container | None = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.container = container or build_container()
        app.state.container.start()
        try:
            yield
        finally:
            app.state.container.close()

    app = FastAPI(title=settings.SITE_NAME, version="1.0.0", lifespan=lifespan)

    app.include_router(content_router, tags=["content"])
    app.include_router(auth_router, tags=["auth"])
    app.include_router(registration_router, tags=["registration"])
    app.include_router(service_areas_router, tags=["service-areas"])
    app.include_router(dashboard_router, tags=["dashboard"])

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


configure_logging()
app = create_app()
