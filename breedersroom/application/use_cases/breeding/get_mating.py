from __future__ import annotations

from uuid import UUID

from breedersroom.application.interfaces.unit_of_work import UnitOfWork
from breedersroom.application.use_cases.breeding._access import load_owned_mating
from breedersroom.application.use_cases.breeding.views import MatingView, build_mating_views


async def execute(uow: UnitOfWork, owner_id: UUID, mating_id: UUID) -> MatingView:
    mating = await load_owned_mating(uow, owner_id, mating_id)
    views = await build_mating_views(uow, [mating])
    return views[0]
