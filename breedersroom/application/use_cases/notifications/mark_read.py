from __future__ import annotations

from uuid import UUID

from breedersroom.application.errors import NotFound
from breedersroom.application.interfaces.unit_of_work import UnitOfWork
from breedersroom.domain.models.notification import Notification


async def execute(uow: UnitOfWork, user_id: UUID, notification_id: UUID) -> Notification:
    notification = await uow.notifications.get(notification_id)
    # Other users' notifications are reported as missing
    if notification is None or notification.user_id != user_id:
        raise NotFound(f"Notification {notification_id} not found")
    notification.mark_as_read()
    return await uow.notifications.update(notification)
