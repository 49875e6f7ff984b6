from __future__ import annotations

from typing import Protocol
from uuid import UUID

from breedersroom.domain.models.parent_link_request import ParentLinkRequest


class ParentLinkRepository(Protocol):
    async def add(self, link: ParentLinkRequest) -> ParentLinkRequest: ...

    async def get(self, link_id: UUID) -> ParentLinkRequest | None: ...

    async def update(self, link: ParentLinkRequest) -> ParentLinkRequest: ...

    async def find_pending(
        self, child_id: UUID, parent_id: UUID, role: str
    ) -> ParentLinkRequest | None: ...

    async def find_active(self, child_id: UUID, role: str) -> ParentLinkRequest | None: ...

    async def list_active_for_child(self, child_id: UUID) -> list[ParentLinkRequest]: ...

    async def list_for_child(self, child_id: UUID) -> list[ParentLinkRequest]: ...

    async def mark_deleted_for_individual(self, individual_id: UUID) -> int: ...
