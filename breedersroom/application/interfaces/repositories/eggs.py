from __future__ import annotations

from typing import Iterable, Protocol
from uuid import UUID

from breedersroom.domain.models.egg import Egg


class EggRepository(Protocol):
    async def add(self, egg: Egg) -> Egg: ...

    async def get(self, egg_id: UUID) -> Egg | None: ...

    async def update(self, egg: Egg) -> Egg: ...

    async def list_by_clutches(self, clutch_ids: Iterable[UUID]) -> dict[UUID, list[Egg]]: ...

    async def count_hatched(self, clutch_id: UUID) -> int: ...

    async def soft_delete_by_clutch(self, clutch_id: UUID) -> list[UUID]: ...

    async def has_unhatched_for_parent(self, individual_id: UUID) -> bool: ...
