from __future__ import annotations

from collections.abc import Callable

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from breedersroom.application.interfaces.unit_of_work import UnitOfWork
from breedersroom.infrastructure.repos.adoptions_sqlalchemy import AdoptionsSQLAlchemyRepository
from breedersroom.infrastructure.repos.clutches_sqlalchemy import ClutchesSQLAlchemyRepository
from breedersroom.infrastructure.repos.eggs_sqlalchemy import EggsSQLAlchemyRepository
from breedersroom.infrastructure.repos.individuals_sqlalchemy import (
    IndividualsSQLAlchemyRepository,
)
from breedersroom.infrastructure.repos.matings_sqlalchemy import MatingsSQLAlchemyRepository
from breedersroom.infrastructure.repos.notifications_sqlalchemy import (
    NotificationsSQLAlchemyRepository,
)
from breedersroom.infrastructure.repos.parent_links_sqlalchemy import (
    ParentLinksSQLAlchemyRepository,
)
from breedersroom.infrastructure.repos.users_sqlalchemy import UsersSQLAlchemyRepository

_REPOSITORIES = {
    "users": UsersSQLAlchemyRepository,
    "individuals": IndividualsSQLAlchemyRepository,
    "eggs": EggsSQLAlchemyRepository,
    "parent_links": ParentLinksSQLAlchemyRepository,
    "matings": MatingsSQLAlchemyRepository,
    "clutches": ClutchesSQLAlchemyRepository,
    "adoptions": AdoptionsSQLAlchemyRepository,
    "notifications": NotificationsSQLAlchemyRepository,
}


def create_engine(database_url: str) -> AsyncEngine:
    return create_async_engine(database_url, echo=False, future=True)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


class SQLAlchemyUnitOfWork(UnitOfWork):
    def __init__(self, session_factory: Callable[[], AsyncSession]) -> None:
        self._session_factory = session_factory
        self.session: AsyncSession | None = None
        self.events: list = []
        self._reset_repositories()

    def _reset_repositories(self) -> None:
        for name in _REPOSITORIES:
            setattr(self, name, None)

    async def __aenter__(self) -> UnitOfWork:
        self.session = self._session_factory()
        self.events = []
        for name, repo_cls in _REPOSITORIES.items():
            setattr(self, name, repo_cls(self.session))
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if not self.session:
            return
        try:
            if exc:
                await self.session.rollback()
                self.events.clear()
        finally:
            await self.session.close()
            self.session = None
            self._reset_repositories()

    async def commit(self) -> None:
        if not self.session:
            return
        await self.session.commit()

    async def rollback(self) -> None:
        if not self.session:
            return
        await self.session.rollback()
        self.events.clear()

    def add_event(self, event: object) -> None:
        self.events.append(event)

    def drain_events(self) -> list:
        drained, self.events = self.events, []
        return drained
