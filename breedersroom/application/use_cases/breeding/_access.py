from __future__ import annotations

from uuid import UUID

from breedersroom.application.errors import NotFound, PermissionDenied
from breedersroom.application.interfaces.unit_of_work import UnitOfWork
from breedersroom.domain.models.clutch import Clutch
from breedersroom.domain.models.mating import Mating


async def load_owned_mating(
    uow: UnitOfWork, owner_id: UUID, mating_id: UUID, *, for_update: bool = False
) -> Mating:
    mating = await uow.matings.get(mating_id, for_update=for_update)
    if mating is None:
        raise NotFound(f"Mating {mating_id} not found")
    if mating.owner_id != owner_id:
        raise PermissionDenied(f"Not allowed to modify mating {mating_id}")
    return mating


async def load_owned_clutch(uow: UnitOfWork, owner_id: UUID, clutch_id: UUID) -> Clutch:
    clutch = await uow.clutches.get(clutch_id)
    if clutch is None:
        raise NotFound(f"Clutch {clutch_id} not found")
    if clutch.owner_id != owner_id:
        raise PermissionDenied(f"Not allowed to modify clutch {clutch_id}")
    return clutch
