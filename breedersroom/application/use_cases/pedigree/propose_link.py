from __future__ import annotations

import logging
from dataclasses import dataclass
from uuid import UUID

from breedersroom.application.errors import ConflictError, ValidationError
from breedersroom.application.interfaces.unit_of_work import UnitOfWork
from breedersroom.application.notifications.trigger import notify
from breedersroom.application.notifications.types import NotificationType
from breedersroom.application.use_cases.individuals.guards import (
    ensure_can_be_parent,
    ensure_owner,
    load_individual,
    parse_role,
)
from breedersroom.domain.models.parent_link_request import ParentLinkRequest

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ProposeLinkInput:
    child_id: UUID
    parent_id: UUID
    role: str
    message: str | None = None


async def execute(
    uow: UnitOfWork,
    requester_id: UUID,
    payload: ProposeLinkInput,
) -> ParentLinkRequest:
    role = parse_role(payload.role)
    if payload.child_id == payload.parent_id:
        raise ValidationError("An individual cannot be its own parent")

    child = await load_individual(uow, payload.child_id, label="Child")
    parent = await load_individual(uow, payload.parent_id, label="Parent")
    ensure_owner(child, requester_id, "link parents of")
    ensure_can_be_parent(parent, role)

    if await uow.parent_links.find_pending(child.id, parent.id, role.value):
        raise ConflictError(
            f"A pending {role.value} request from {child.id} to {parent.id} already exists"
        )
    active = await uow.parent_links.find_active(child.id, role.value)
    if active is not None:
        raise ConflictError(
            f"Individual {child.id} already has a {active.status} {role.value} link",
            details={"link_id": str(active.id)},
        )

    # Requester owns both endpoints: nobody else has to approve
    auto_approved = parent.owner_id == requester_id
    link = ParentLinkRequest.create(
        child_id=child.id,
        parent_id=parent.id,
        role=role.value,
        requested_by=requester_id,
        message=payload.message,
        approved=auto_approved,
    )
    saved = await uow.parent_links.add(link)

    if not auto_approved:
        await notify(
            uow,
            parent.owner_id,
            NotificationType.PARENT_REQUEST,
            sender_id=requester_id,
            target_id=saved.id,
            request_id=saved.id,
            child=child,
            parent=parent,
            role=role.value,
            status=saved.status,
            message=payload.message,
            date_time=saved.created_at,
        )
    logger.info(
        "Parent link %s proposed child=%s parent=%s role=%s status=%s",
        saved.id,
        child.id,
        parent.id,
        role.value,
        saved.status,
    )
    return saved
