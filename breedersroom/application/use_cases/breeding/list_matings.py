from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from breedersroom.application.interfaces.unit_of_work import UnitOfWork
from breedersroom.application.use_cases.breeding.views import MatingView, build_mating_views


@dataclass(slots=True)
class ListMatingsResult:
    items: list[MatingView]
    total: int
    limit: int | None
    offset: int


async def execute(
    uow: UnitOfWork,
    owner_id: UUID,
    father_id: UUID | None = None,
    mother_id: UUID | None = None,
    species: str | None = None,
    date_from: date | None = None,
    date_to: date | None = None,
    limit: int | None = None,
    offset: int = 0,
) -> ListMatingsResult:
    filters = dict(
        father_id=father_id,
        mother_id=mother_id,
        species=species,
        date_from=date_from,
        date_to=date_to,
    )
    matings = await uow.matings.list_by_owner(owner_id, limit=limit, offset=offset, **filters)
    total = await uow.matings.count_by_owner(owner_id, **filters)
    items = await build_mating_views(uow, matings)
    return ListMatingsResult(items=items, total=total, limit=limit, offset=offset)
