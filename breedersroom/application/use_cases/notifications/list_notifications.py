from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from breedersroom.application.interfaces.unit_of_work import UnitOfWork
from breedersroom.domain.models.notification import Notification


@dataclass(slots=True)
class ListNotificationsResult:
    items: list[Notification]
    unread: int


async def execute(
    uow: UnitOfWork,
    user_id: UUID,
    *,
    unread_only: bool = False,
    limit: int = 50,
    offset: int = 0,
) -> ListNotificationsResult:
    items = await uow.notifications.list_by_user(
        user_id, unread_only=unread_only, limit=limit, offset=offset
    )
    unread = await uow.notifications.count_unread(user_id)
    return ListNotificationsResult(items=items, unread=unread)
