from __future__ import annotations

from breedersroom.domain.models.notification import Notification


class NotificationSender:
    async def send(self, notification: Notification) -> None:  # pragma: no cover - interface
        raise NotImplementedError
