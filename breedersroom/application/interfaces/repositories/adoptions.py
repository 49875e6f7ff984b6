from __future__ import annotations

from typing import Protocol
from uuid import UUID

from breedersroom.domain.models.adoption import Adoption


class AdoptionRepository(Protocol):
    async def add(self, adoption: Adoption) -> Adoption: ...

    async def get(self, adoption_id: UUID) -> Adoption | None: ...

    async def update(self, adoption: Adoption) -> Adoption: ...

    async def get_active_for_individual(self, individual_id: UUID) -> Adoption | None: ...

    async def list_by_seller(
        self,
        seller_id: UUID,
        status: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[Adoption]: ...

    async def count_by_seller(self, seller_id: UUID, status: str | None = None) -> int: ...
