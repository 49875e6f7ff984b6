from __future__ import annotations

from uuid import UUID

from breedersroom.application.errors import ConflictError, ValidationError
from breedersroom.application.interfaces.unit_of_work import UnitOfWork
from breedersroom.application.use_cases.breeding._access import load_owned_mating
from breedersroom.application.use_cases.breeding.record_mating import MatingInput
from breedersroom.application.use_cases.breeding.validation import resolve_mating_parents
from breedersroom.domain.models.mating import Mating


async def execute(
    uow: UnitOfWork, owner_id: UUID, mating_id: UUID, payload: MatingInput
) -> Mating:
    mating = await load_owned_mating(uow, owner_id, mating_id, for_update=True)
    _father, _mother, species = await resolve_mating_parents(
        uow, owner_id, payload.father_id, payload.mother_id
    )
    duplicate = await uow.matings.find_duplicate(
        owner_id, payload.father_id, payload.mother_id, payload.mated_on, exclude_id=mating.id
    )
    if duplicate is not None:
        raise ConflictError(
            f"Mating on {payload.mated_on.isoformat()} already recorded for these parents",
            details={"mating_id": str(duplicate.id)},
        )

    clutches = await uow.clutches.list_by_mating(mating.id)
    if clutches:
        earliest = min(c.laid_on for c in clutches)
        if payload.mated_on > earliest:
            raise ValidationError(
                f"Mating date {payload.mated_on.isoformat()} would follow "
                f"its first clutch on {earliest.isoformat()}"
            )
        if species != mating.species:
            raise ValidationError("Cannot change the species of a mating that has clutches")

    mating.reassign(payload.father_id, payload.mother_id, payload.mated_on, species)
    return await uow.matings.update(mating)
