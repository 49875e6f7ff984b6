from __future__ import annotations

from typing import Protocol
from uuid import UUID

from breedersroom.domain.models.user import User


class UserRepository(Protocol):
    async def add(self, user: User) -> User: ...

    async def get(self, user_id: UUID) -> User | None: ...

    async def get_by_email(self, email: str) -> User | None: ...

    async def exists(self, user_id: UUID) -> bool: ...
