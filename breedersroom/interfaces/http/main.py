from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from breedersroom.config.settings import Settings, get_settings
from breedersroom.infrastructure.auth.jwt_service import JWTService
from breedersroom.infrastructure.db.session import create_engine, create_session_factory
from breedersroom.infrastructure.notifications.logging_sender import LoggingNotificationSender
from breedersroom.infrastructure.notifications.models import NotificationSender
from breedersroom.interfaces.http.deps import get_app_settings
from breedersroom.interfaces.http.routers import (
    adoptions,
    clutches,
    eggs,
    individuals,
    matings,
    notifications,
    parent_links,
)
from breedersroom.interfaces.middleware.auth_middleware import AuthMiddleware
from breedersroom.interfaces.middleware.error_handler import register_error_handlers


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        yield
    finally:
        engine = getattr(app.state, "engine", None)
        if engine is not None:
            await engine.dispose()


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), logging.INFO)
    root = logging.getLogger()
    # Avoid adding duplicate handlers on reload
    if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(level)
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(name).setLevel(level)
    # SQL echo only when explicitly debugging
    logging.getLogger("sqlalchemy.engine").setLevel(max(level, logging.WARNING))


def create_app(
    *,
    settings: Settings | None = None,
    jwt_service: JWTService | None = None,
    notification_sender: NotificationSender | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    _configure_logging(settings.log_level)
    app = FastAPI(
        title="Breeders Room Backend",
        version="0.1.0",
        description="Breeding lifecycle and pedigree API",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = create_engine(settings.database_url)
    app.state.session_factory = create_session_factory(app.state.engine)
    app.state.jwt_service = jwt_service or JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        algorithm=settings.jwt_algorithm,
        access_token_expires_minutes=settings.jwt_access_token_expires_minutes,
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
    )
    # Push/email channels are not wired; deliveries are logged
    app.state.notification_sender = notification_sender or LoggingNotificationSender()
    register_error_handlers(app)

    # Group all API routes behind a single versioned prefix
    api = APIRouter(prefix="/api/v1")
    api.include_router(individuals.router)
    api.include_router(parent_links.router)
    api.include_router(matings.router)
    api.include_router(clutches.router)
    api.include_router(eggs.router)
    api.include_router(adoptions.router)
    api.include_router(notifications.router)

    @api.get("/health", tags=["health"])
    async def health(_: Settings = Depends(get_app_settings)) -> dict[str, str]:  # noqa: ANN001
        return {"status": "ok"}

    app.include_router(api)

    # Add Auth first, then CORS last so CORS runs outermost and can handle preflight OPTIONS
    app.add_middleware(AuthMiddleware, settings=settings)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    return app


app = create_app()
