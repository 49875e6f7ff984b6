from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4


@dataclass(slots=True)
class Notification:
    id: UUID
    user_id: UUID
    type: str
    title: str
    message: str
    sender_id: UUID | None = None
    target_id: UUID | None = None
    data: dict | None = None
    read: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    read_at: datetime | None = None

    @classmethod
    def create(
        cls,
        user_id: UUID,
        type: str,
        title: str,
        message: str,
        sender_id: UUID | None = None,
        target_id: UUID | None = None,
        data: dict | None = None,
    ) -> Notification:
        return cls(
            id=uuid4(),
            user_id=user_id,
            type=type,
            title=title,
            message=message,
            sender_id=sender_id,
            target_id=target_id,
            data=data,
            read=False,
            created_at=datetime.now(timezone.utc),
            read_at=None,
        )

    def mark_as_read(self) -> None:
        if not self.read:
            self.read = True
            self.read_at = datetime.now(timezone.utc)

    def set_status(self, status: str) -> None:
        data = dict(self.data or {})
        data["status"] = status
        self.data = data
