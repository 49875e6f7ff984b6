from __future__ import annotations

from uuid import UUID

from breedersroom.application.errors import ConflictError
from breedersroom.application.interfaces.unit_of_work import UnitOfWork
from breedersroom.application.use_cases.breeding._access import load_owned_mating


async def execute(uow: UnitOfWork, owner_id: UUID, mating_id: UUID) -> None:
    mating = await load_owned_mating(uow, owner_id, mating_id, for_update=True)
    clutches = await uow.clutches.list_by_mating(mating.id)
    if clutches:
        raise ConflictError(
            f"Mating {mating.id} still has {len(clutches)} clutch(es)",
            details={"clutch_ids": [str(c.id) for c in clutches]},
        )
    mating.soft_delete()
    await uow.matings.update(mating)
