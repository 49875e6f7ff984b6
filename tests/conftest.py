from __future__ import annotations

import os
import sys
from collections.abc import AsyncIterator
from pathlib import Path
from typing import cast
from uuid import UUID

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///default.db")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT))

# ruff: noqa: E402
from breedersroom.config.settings import Settings
from breedersroom.domain.models.user import User
from breedersroom.infrastructure.db.base import Base
from breedersroom.infrastructure.db.orm import (  # noqa: F401
    adoption,
    clutch,
    egg,
    individual,
    mating,
    notification,
    parent_link,
    user,
)
from breedersroom.infrastructure.db.orm.user import UserORM
from breedersroom.infrastructure.db.session import SQLAlchemyUnitOfWork
from breedersroom.infrastructure.notifications.logging_sender import LoggingNotificationSender
from breedersroom.interfaces.http.main import create_app

USER_NAMES = ("alice", "bob", "carol")


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    db_path = tmp_path / "test.db"
    return Settings.model_validate(
        {
            "database_url": f"sqlite+aiosqlite:///{db_path}",
            "jwt_secret_key": "test-secret",
            "log_level": "INFO",
            "environment": "test",
        }
    )


@pytest.fixture()
def notification_sender() -> LoggingNotificationSender:
    return LoggingNotificationSender()


@pytest.fixture()
def app(test_settings: Settings, notification_sender: LoggingNotificationSender):
    return create_app(settings=test_settings, notification_sender=notification_sender)


@pytest.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    engine = app.state.engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
    await engine.dispose()


@pytest.fixture()
async def users(app, client) -> dict[str, UUID]:
    seeded = {name: User.create(f"{name}@breeders.test", name.capitalize()) for name in USER_NAMES}
    async with app.state.session_factory() as session:  # type: ignore[attr-defined]
        async_session = cast(AsyncSession, session)
        async_session.add_all(
            [UserORM(id=u.id, email=u.email, name=u.name, is_active=True) for u in seeded.values()]
        )
        await async_session.commit()
    return {name: u.id for name, u in seeded.items()}


@pytest.fixture()
def headers(app, users: dict[str, UUID]) -> dict[str, dict[str, str]]:
    jwt_service = app.state.jwt_service
    return {
        name: {"Authorization": f"Bearer {jwt_service.issue(user_id)}"}
        for name, user_id in users.items()
    }


@pytest.fixture()
async def uow(app, users) -> AsyncIterator[SQLAlchemyUnitOfWork]:
    unit = SQLAlchemyUnitOfWork(app.state.session_factory)
    async with unit:
        yield unit
