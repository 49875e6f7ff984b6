from __future__ import annotations

from uuid import UUID

from breedersroom.application.interfaces.unit_of_work import UnitOfWork
from breedersroom.application.use_cases.individuals.guards import ensure_owner, load_individual
from breedersroom.domain.models.parent_link_request import ParentLinkRequest


async def execute(uow: UnitOfWork, actor_id: UUID, child_id: UUID) -> list[ParentLinkRequest]:
    """Every link request ever filed for a child, newest first; owner only."""
    child = await load_individual(uow, child_id)
    ensure_owner(child, actor_id, "view the link history of")
    return await uow.parent_links.list_for_child(child.id)
