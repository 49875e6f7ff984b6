from __future__ import annotations

import logging
from typing import Iterable

from breedersroom.application.events.models import NotificationCreatedEvent
from breedersroom.infrastructure.notifications.logging_sender import LoggingNotificationSender
from breedersroom.infrastructure.notifications.models import NotificationSender
from breedersroom.infrastructure.repos.notifications_sqlalchemy import (
    NotificationsSQLAlchemyRepository,
)

logger = logging.getLogger(__name__)


async def dispatch_events(
    session_factory,
    events: Iterable[object],
    sender: NotificationSender | None = None,
) -> None:
    """
    Dispatch events post-commit. Uses a transient session to reload what was committed.
    Safe to call in a background task.
    """
    events = list(events)
    if not events:
        return
    sender = sender or LoggingNotificationSender()

    async with session_factory() as session:
        notifications = NotificationsSQLAlchemyRepository(session)
        for event in events:
            try:
                if isinstance(event, NotificationCreatedEvent):
                    await _handle_notification_created(notifications, sender, event)
            except Exception as e:
                logger.error(
                    "Error dispatching event %s: %s", type(event).__name__, e, exc_info=True
                )


async def _handle_notification_created(
    notifications: NotificationsSQLAlchemyRepository,
    sender: NotificationSender,
    e: NotificationCreatedEvent,
) -> None:
    notification = await notifications.get(e.notification_id)
    if notification is None:
        logger.warning("Notification %s vanished before delivery", e.notification_id)
        return
    await sender.send(notification)
