from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from breedersroom.application.interfaces.unit_of_work import UnitOfWork
from breedersroom.application.use_cases.individuals.guards import load_individual
from breedersroom.domain.models.individual import Individual
from breedersroom.domain.value_objects.parent_link import ParentLinkStatus, ParentRole


@dataclass(slots=True)
class ParentView:
    link_id: UUID
    role: str
    status: str
    parent: Individual | None


@dataclass(slots=True)
class ResolvedParents:
    child_id: UUID
    father: ParentView | None = None
    mother: ParentView | None = None


async def execute(
    uow: UnitOfWork,
    child_id: UUID,
    viewer_id: UUID | None = None,
) -> ResolvedParents:
    child = await load_individual(uow, child_id)
    return await resolve_for(uow, child, viewer_id)


async def resolve_for(
    uow: UnitOfWork, child: Individual, viewer_id: UUID | None = None
) -> ResolvedParents:
    links = await uow.parent_links.list_active_for_child(child.id)
    # Pending requests stay private to the child's owner
    if viewer_id != child.owner_id:
        links = [link for link in links if link.status == ParentLinkStatus.APPROVED.value]
    parents = await uow.individuals.get_many(link.parent_id for link in links)

    resolved = ResolvedParents(child_id=child.id)
    # links come newest first
    for link in links:
        view = ParentView(
            link_id=link.id,
            role=link.role,
            status=link.status,
            parent=parents.get(link.parent_id),
        )
        if link.role == ParentRole.FATHER.value and resolved.father is None:
            resolved.father = view
        elif link.role == ParentRole.MOTHER.value and resolved.mother is None:
            resolved.mother = view
    return resolved
