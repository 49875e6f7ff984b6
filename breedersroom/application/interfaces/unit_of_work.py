from __future__ import annotations

from typing import Protocol

from breedersroom.application.interfaces.repositories.adoptions import AdoptionRepository
from breedersroom.application.interfaces.repositories.clutches import ClutchRepository
from breedersroom.application.interfaces.repositories.eggs import EggRepository
from breedersroom.application.interfaces.repositories.individuals import IndividualRepository
from breedersroom.application.interfaces.repositories.matings import MatingRepository
from breedersroom.application.interfaces.repositories.notifications import (
    NotificationRepository,
)
from breedersroom.application.interfaces.repositories.parent_links import ParentLinkRepository
from breedersroom.application.interfaces.repositories.users import UserRepository


class UnitOfWork(Protocol):
    users: UserRepository
    individuals: IndividualRepository
    eggs: EggRepository
    parent_links: ParentLinkRepository
    matings: MatingRepository
    clutches: ClutchRepository
    adoptions: AdoptionRepository
    notifications: NotificationRepository
    # Domain events collected during the transaction
    events: list

    async def __aenter__(self) -> UnitOfWork: ...

    async def __aexit__(self, exc_type, exc, tb) -> None: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...

    # Record a domain event during the transaction
    def add_event(self, event: object) -> None: ...

    # Drain collected events (used for post-commit dispatch)
    def drain_events(self) -> list: ...
