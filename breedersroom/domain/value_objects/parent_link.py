from __future__ import annotations

from enum import Enum


class ParentRole(str, Enum):
    FATHER = "father"
    MOTHER = "mother"


class ParentLinkStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    CANCELLED = "cancelled"
    DELETED = "deleted"

    @property
    def is_terminal(self) -> bool:
        return self in TERMINAL_LINK_STATUSES

    @property
    def is_active(self) -> bool:
        return self in ACTIVE_LINK_STATUSES


TERMINAL_LINK_STATUSES = frozenset(
    {ParentLinkStatus.APPROVED, ParentLinkStatus.REJECTED, ParentLinkStatus.CANCELLED}
)
ACTIVE_LINK_STATUSES = frozenset({ParentLinkStatus.PENDING, ParentLinkStatus.APPROVED})
