from __future__ import annotations

import logging
from uuid import UUID

from breedersroom.application.errors import NotFound
from breedersroom.application.interfaces.unit_of_work import UnitOfWork
from breedersroom.application.notifications.trigger import mark_request_status, notify
from breedersroom.application.notifications.types import NotificationType
from breedersroom.application.use_cases.individuals.guards import (
    ensure_owner,
    load_individual,
    parse_role,
)
from breedersroom.domain.models.parent_link_request import ParentLinkRequest
from breedersroom.domain.value_objects.parent_link import ParentLinkStatus

logger = logging.getLogger(__name__)


async def execute(
    uow: UnitOfWork,
    actor_id: UUID,
    child_id: UUID,
    role: str,
) -> ParentLinkRequest:
    """Withdraw the active link filling ``role`` for a child.

    A pending request is cancelled and its addressee told so; an approved link
    is marked deleted. Rejected or cancelled history is left alone.
    """
    parent_role = parse_role(role)
    child = await load_individual(uow, child_id)
    ensure_owner(child, actor_id, "unlink parents of")

    link = await uow.parent_links.find_active(child.id, parent_role.value)
    if link is None:
        raise NotFound(f"Individual {child.id} has no {parent_role.value} link")

    if link.state is ParentLinkStatus.PENDING:
        link.cancel(actor_id)
        updated = await uow.parent_links.update(link)
        await mark_request_status(uow, updated.id, updated.status)
        parent = await uow.individuals.get(link.parent_id, include_deleted=True)
        if parent is not None and parent.owner_id != actor_id:
            await notify(
                uow,
                parent.owner_id,
                NotificationType.PARENT_CANCEL,
                sender_id=actor_id,
                target_id=updated.id,
                request_id=updated.id,
                child=child,
                parent=parent,
                role=updated.role,
                status=updated.status,
                date_time=updated.decided_at,
            )
    else:
        link.revoke()
        updated = await uow.parent_links.update(link)

    logger.info("Parent link %s of %s now %s", updated.id, child.id, updated.status)
    return updated
