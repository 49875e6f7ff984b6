from __future__ import annotations

import logging
from dataclasses import dataclass
from uuid import UUID

from breedersroom.application.errors import (
    InvalidTransition,
    NotFound,
    PermissionDenied,
    ValidationError,
)
from breedersroom.application.interfaces.unit_of_work import UnitOfWork
from breedersroom.application.notifications.trigger import mark_request_status, notify
from breedersroom.application.notifications.types import DECISION_TYPES
from breedersroom.domain.models.parent_link_request import LinkTransitionError, ParentLinkRequest
from breedersroom.domain.value_objects.parent_link import ParentLinkStatus

logger = logging.getLogger(__name__)

_TERMINAL_MESSAGES = {
    ParentLinkStatus.APPROVED: "Parent link request already approved",
    ParentLinkStatus.REJECTED: "Parent link request already rejected",
    ParentLinkStatus.CANCELLED: "Parent link request already cancelled",
    ParentLinkStatus.DELETED: "Parent link request was deleted",
}


@dataclass(slots=True)
class DecideLinkInput:
    status: str
    reject_reason: str | None = None


def _parse_target(value: str) -> ParentLinkStatus:
    try:
        target = ParentLinkStatus(value)
    except ValueError as exc:
        raise ValidationError(f"Invalid decision {value!r}") from exc
    if target not in DECISION_TYPES:
        raise ValidationError(f"Cannot decide a parent link as {value!r}")
    return target


async def execute(
    uow: UnitOfWork,
    actor_id: UUID,
    request_id: UUID,
    payload: DecideLinkInput,
) -> ParentLinkRequest:
    link = await uow.parent_links.get(request_id)
    if link is None:
        raise NotFound(f"Parent link request {request_id} not found")

    child = await uow.individuals.get(link.child_id, include_deleted=True)
    parent = await uow.individuals.get(link.parent_id, include_deleted=True)
    child_owner = child.owner_id if child else None
    parent_owner = parent.owner_id if parent else None
    if actor_id not in (child_owner, parent_owner):
        raise PermissionDenied("Only the owners of the linked individuals can decide")

    if link.state is not ParentLinkStatus.PENDING:
        raise InvalidTransition(
            _TERMINAL_MESSAGES[link.state], details={"status": link.status}
        )

    target = _parse_target(payload.status)
    if target is ParentLinkStatus.CANCELLED:
        if actor_id != child_owner:
            raise PermissionDenied("Only the requester can cancel a parent link request")
    elif actor_id != parent_owner:
        raise PermissionDenied(f"Only the parent's owner can mark the request {target.value}")

    try:
        if target is ParentLinkStatus.APPROVED:
            link.approve(actor_id)
        elif target is ParentLinkStatus.REJECTED:
            link.reject(actor_id, payload.reject_reason)
        else:
            link.cancel(actor_id)
    except LinkTransitionError as exc:
        raise InvalidTransition(str(exc)) from exc

    updated = await uow.parent_links.update(link)
    await mark_request_status(uow, updated.id, updated.status)

    receiver = parent_owner if target is ParentLinkStatus.CANCELLED else child_owner
    if receiver is not None and receiver != actor_id:
        await notify(
            uow,
            receiver,
            DECISION_TYPES[target],
            sender_id=actor_id,
            target_id=updated.id,
            request_id=updated.id,
            child=child,
            parent=parent,
            role=updated.role,
            status=updated.status,
            reject_reason=updated.reject_reason,
            date_time=updated.decided_at,
        )
    logger.info("Parent link %s decided %s by %s", updated.id, updated.status, actor_id)
    return updated
