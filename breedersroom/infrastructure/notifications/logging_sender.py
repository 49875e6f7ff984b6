from __future__ import annotations

import logging

from breedersroom.domain.models.notification import Notification
from breedersroom.infrastructure.notifications.models import NotificationSender

logger = logging.getLogger(__name__)


class LoggingNotificationSender(NotificationSender):
    def __init__(self) -> None:
        self.sent: list[Notification] = []

    async def send(self, notification: Notification) -> None:
        self.sent.append(notification)
        logger.info(
            "Delivering notification (logging sender): id=%s type=%s to=%s from=%s title=%s",
            notification.id,
            notification.type,
            notification.user_id,
            notification.sender_id,
            notification.title,
        )
