from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

from breedersroom.application.events.models import NotificationCreatedEvent
from breedersroom.application.interfaces.unit_of_work import UnitOfWork
from breedersroom.domain.models.notification import Notification

from .factory import build_notification
from .types import NotificationType

logger = logging.getLogger(__name__)


async def notify(
    uow: UnitOfWork,
    receiver_id: UUID,
    ntype: str,
    *,
    sender_id: UUID | None = None,
    target_id: UUID | None = None,
    **payload: Any,
) -> Notification:
    """Persist a notification in the current transaction and queue its delivery."""
    built = build_notification(ntype, **payload)
    notification = Notification.create(
        user_id=receiver_id,
        type=built.type,
        title=built.title,
        message=built.message,
        sender_id=sender_id,
        target_id=target_id,
        data=built.data,
    )
    saved = await uow.notifications.add(notification)
    uow.add_event(
        NotificationCreatedEvent(
            notification_id=saved.id,
            user_id=receiver_id,
            type=built.type,
            sender_id=sender_id,
        )
    )
    logger.debug("Queued notification type=%s receiver=%s target=%s", ntype, receiver_id, target_id)
    return saved


async def mark_request_status(uow: UnitOfWork, request_id: UUID, status: str) -> None:
    """Reflect a decision in the payload of the request's originating notification."""
    original = await uow.notifications.find_latest_for_target(
        NotificationType.PARENT_REQUEST, request_id
    )
    if original is None:
        return
    original.set_status(status)
    await uow.notifications.update(original)
