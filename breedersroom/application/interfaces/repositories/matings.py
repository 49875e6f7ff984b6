from __future__ import annotations

from datetime import date
from typing import Protocol
from uuid import UUID

from breedersroom.domain.models.mating import Mating


class MatingRepository(Protocol):
    async def add(self, mating: Mating) -> Mating: ...

    async def get(self, mating_id: UUID, *, for_update: bool = False) -> Mating | None: ...

    async def update(self, mating: Mating) -> Mating: ...

    async def find_duplicate(
        self,
        owner_id: UUID,
        father_id: UUID | None,
        mother_id: UUID | None,
        mated_on: date,
        *,
        exclude_id: UUID | None = None,
    ) -> Mating | None: ...

    async def list_by_owner(
        self,
        owner_id: UUID,
        father_id: UUID | None = None,
        mother_id: UUID | None = None,
        species: str | None = None,
        date_from: date | None = None,
        date_to: date | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[Mating]: ...

    async def count_by_owner(
        self,
        owner_id: UUID,
        father_id: UUID | None = None,
        mother_id: UUID | None = None,
        species: str | None = None,
        date_from: date | None = None,
        date_to: date | None = None,
    ) -> int: ...
