from __future__ import annotations

from dataclasses import dataclass, field

from breedersroom.application.interfaces.unit_of_work import UnitOfWork
from breedersroom.domain.models.clutch import Clutch
from breedersroom.domain.models.egg import Egg
from breedersroom.domain.models.individual import Individual
from breedersroom.domain.models.mating import Mating


@dataclass(slots=True)
class ClutchView:
    clutch: Clutch
    eggs: list[Egg] = field(default_factory=list)


@dataclass(slots=True)
class MatingView:
    mating: Mating
    father: Individual | None = None
    mother: Individual | None = None
    clutches: list[ClutchView] = field(default_factory=list)


async def build_mating_views(uow: UnitOfWork, matings: list[Mating]) -> list[MatingView]:
    """Attach parent summaries and nested clutches with their eggs."""
    parent_ids = {pid for m in matings for pid in m.parent_ids if pid is not None}
    parents = await uow.individuals.get_many(parent_ids)
    clutches = await uow.clutches.list_by_matings(m.id for m in matings)
    eggs = await uow.eggs.list_by_clutches(c.id for group in clutches.values() for c in group)
    return [
        MatingView(
            mating=m,
            father=parents.get(m.father_id) if m.father_id else None,
            mother=parents.get(m.mother_id) if m.mother_id else None,
            clutches=[
                ClutchView(clutch=c, eggs=eggs.get(c.id, [])) for c in clutches.get(m.id, [])
            ],
        )
        for m in matings
    ]
