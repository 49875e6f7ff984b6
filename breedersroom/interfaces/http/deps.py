from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import BackgroundTasks, Request

from breedersroom.application.errors import AuthError
from breedersroom.application.events.dispatcher import dispatch_events
from breedersroom.config.settings import Settings, get_settings
from breedersroom.infrastructure.auth.context import AuthContext
from breedersroom.infrastructure.auth.jwt_service import JWTService
from breedersroom.infrastructure.db.session import SQLAlchemyUnitOfWork


async def get_auth_context(request: Request) -> AuthContext:
    context = getattr(request.state, "auth_context", None)
    if context is None:
        raise AuthError("Authentication required")
    return context


async def get_uow(request: Request) -> AsyncIterator[SQLAlchemyUnitOfWork]:
    session_factory = getattr(request.app.state, "session_factory", None)
    if session_factory is None:
        raise RuntimeError("Session factory not configured")
    uow = SQLAlchemyUnitOfWork(session_factory)
    async with uow:
        yield uow


def get_app_settings(request: Request) -> Settings:
    return getattr(request.app.state, "settings", None) or get_settings()


def get_jwt_service(request: Request) -> JWTService:
    service = getattr(request.app.state, "jwt_service", None)
    if service is None:
        raise RuntimeError("JWT service not configured")
    return service


async def commit_and_dispatch(
    uow: SQLAlchemyUnitOfWork, request: Request, background_tasks: BackgroundTasks
) -> None:
    """Commit the request's transaction, then deliver queued notifications in background."""
    await uow.commit()
    events = uow.drain_events()
    session_factory = getattr(request.app.state, "session_factory", None)
    if session_factory and events:
        background_tasks.add_task(
            dispatch_events,
            session_factory,
            events,
            getattr(request.app.state, "notification_sender", None),
        )
