from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class IndividualDeletedEvent:
    individual_id: UUID
    actor_user_id: UUID | None = None
    reason: str | None = None


@dataclass(frozen=True)
class AdoptionSavedEvent:
    adoption_id: UUID
    individual_id: UUID
    status: str
    actor_user_id: UUID | None = None


@dataclass(frozen=True)
class AdoptionDeletedEvent:
    adoption_id: UUID
    individual_id: UUID
    actor_user_id: UUID | None = None


@dataclass(frozen=True)
class NotificationCreatedEvent:
    notification_id: UUID
    user_id: UUID
    type: str
    sender_id: UUID | None = None
