from __future__ import annotations

from typing import Iterable, Protocol
from uuid import UUID

from breedersroom.domain.models.individual import Individual


class IndividualRepository(Protocol):
    async def add(self, individual: Individual) -> Individual: ...

    async def get(self, individual_id: UUID, *, include_deleted: bool = False) -> Individual | None: ...

    async def get_many(self, individual_ids: Iterable[UUID]) -> dict[UUID, Individual]: ...

    async def update(self, individual: Individual) -> Individual: ...
