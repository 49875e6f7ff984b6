from __future__ import annotations

from typing import Iterable, Protocol
from uuid import UUID

from breedersroom.domain.models.clutch import Clutch


class ClutchRepository(Protocol):
    async def add(self, clutch: Clutch) -> Clutch: ...

    async def get(self, clutch_id: UUID) -> Clutch | None: ...

    async def update(self, clutch: Clutch) -> Clutch: ...

    async def list_by_mating(self, mating_id: UUID) -> list[Clutch]: ...

    async def list_by_matings(self, mating_ids: Iterable[UUID]) -> dict[UUID, list[Clutch]]: ...
