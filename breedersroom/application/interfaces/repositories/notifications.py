from __future__ import annotations

from typing import Protocol
from uuid import UUID

from breedersroom.domain.models.notification import Notification


class NotificationRepository(Protocol):
    async def add(self, notification: Notification) -> Notification: ...

    async def get(self, notification_id: UUID) -> Notification | None: ...

    async def update(self, notification: Notification) -> Notification: ...

    async def find_latest_for_target(self, type: str, target_id: UUID) -> Notification | None: ...

    async def list_by_user(
        self,
        user_id: UUID,
        *,
        unread_only: bool = False,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Notification]: ...

    async def count_unread(self, user_id: UUID) -> int: ...
