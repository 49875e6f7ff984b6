from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from breedersroom.application.interfaces.unit_of_work import UnitOfWork
from breedersroom.application.use_cases.individuals.guards import load_individual
from breedersroom.application.use_cases.pedigree import resolve_parents
from breedersroom.domain.models.individual import Individual


@dataclass(slots=True)
class IndividualView:
    individual: Individual
    parents: resolve_parents.ResolvedParents


async def execute(uow: UnitOfWork, individual_id: UUID, viewer_id: UUID | None) -> IndividualView:
    individual = await load_individual(uow, individual_id)
    parents = await resolve_parents.resolve_for(uow, individual, viewer_id)
    return IndividualView(individual=individual, parents=parents)
