from __future__ import annotations

from uuid import UUID

from breedersroom.application.interfaces.unit_of_work import UnitOfWork
from breedersroom.application.use_cases.breeding._access import load_owned_clutch
from breedersroom.application.use_cases.breeding.views import ClutchView


async def execute(uow: UnitOfWork, owner_id: UUID, clutch_id: UUID) -> ClutchView:
    clutch = await load_owned_clutch(uow, owner_id, clutch_id)
    eggs = await uow.eggs.list_by_clutches([clutch.id])
    return ClutchView(clutch=clutch, eggs=eggs.get(clutch.id, []))
