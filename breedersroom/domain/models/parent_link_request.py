from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4

from breedersroom.domain.value_objects.parent_link import ParentLinkStatus

# Decisions a pending request accepts; terminal states accept none.
ALLOWED_DECISIONS: dict[ParentLinkStatus, frozenset[ParentLinkStatus]] = {
    ParentLinkStatus.PENDING: frozenset(
        {ParentLinkStatus.APPROVED, ParentLinkStatus.REJECTED, ParentLinkStatus.CANCELLED}
    ),
    ParentLinkStatus.APPROVED: frozenset(),
    ParentLinkStatus.REJECTED: frozenset(),
    ParentLinkStatus.CANCELLED: frozenset(),
    ParentLinkStatus.DELETED: frozenset(),
}


class LinkTransitionError(ValueError):
    """A decision was attempted from a state that does not accept it."""

    def __init__(self, current: ParentLinkStatus, target: ParentLinkStatus) -> None:
        super().__init__(f"Cannot move parent link from {current.value} to {target.value}")
        self.current = current
        self.target = target


def next_status(current: str, target: str) -> ParentLinkStatus:
    """Return the state reached by deciding ``target`` from ``current``.

    Raises LinkTransitionError when ``current`` does not accept the decision,
    which is always the case for terminal and deleted states.
    """
    current_status = ParentLinkStatus(current)
    target_status = ParentLinkStatus(target)
    if target_status not in ALLOWED_DECISIONS[current_status]:
        raise LinkTransitionError(current_status, target_status)
    return target_status


@dataclass(slots=True)
class ParentLinkRequest:
    id: UUID
    child_id: UUID
    parent_id: UUID
    role: str  # ParentRole
    status: str = ParentLinkStatus.PENDING.value
    message: str | None = None
    reject_reason: str | None = None
    requested_by: UUID | None = None
    decided_by: UUID | None = None
    decided_at: datetime | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 1

    @classmethod
    def create(
        cls,
        child_id: UUID,
        parent_id: UUID,
        role: str,
        requested_by: UUID | None = None,
        message: str | None = None,
        approved: bool = False,
    ) -> ParentLinkRequest:
        now = datetime.now(timezone.utc)
        status = ParentLinkStatus.APPROVED if approved else ParentLinkStatus.PENDING
        return cls(
            id=uuid4(),
            child_id=child_id,
            parent_id=parent_id,
            role=role,
            status=status.value,
            message=message,
            requested_by=requested_by,
            decided_by=requested_by if approved else None,
            decided_at=now if approved else None,
            created_at=now,
            updated_at=now,
            version=1,
        )

    @property
    def state(self) -> ParentLinkStatus:
        return ParentLinkStatus(self.status)

    def approve(self, decided_by: UUID) -> None:
        self._decide(ParentLinkStatus.APPROVED, decided_by)

    def reject(self, decided_by: UUID, reason: str | None = None) -> None:
        self._decide(ParentLinkStatus.REJECTED, decided_by)
        self.reject_reason = reason

    def cancel(self, decided_by: UUID) -> None:
        self._decide(ParentLinkStatus.CANCELLED, decided_by)

    def revoke(self) -> None:
        """Supersede any non-deleted state; used by unlink and endpoint deletion."""
        if self.state is ParentLinkStatus.DELETED:
            raise LinkTransitionError(self.state, ParentLinkStatus.DELETED)
        self.status = ParentLinkStatus.DELETED.value
        self.bump_version()

    def _decide(self, target: ParentLinkStatus, decided_by: UUID) -> None:
        self.status = next_status(self.status, target.value).value
        self.decided_by = decided_by
        self.decided_at = datetime.now(timezone.utc)
        self.bump_version()

    def bump_version(self) -> None:
        self.version += 1
        self.updated_at = datetime.now(timezone.utc)
