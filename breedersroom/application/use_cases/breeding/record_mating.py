from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from uuid import UUID

from breedersroom.application.errors import ConflictError
from breedersroom.application.interfaces.unit_of_work import UnitOfWork
from breedersroom.application.use_cases.breeding.validation import resolve_mating_parents
from breedersroom.domain.models.mating import Mating

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class MatingInput:
    mated_on: date
    father_id: UUID | None = None
    mother_id: UUID | None = None


async def execute(uow: UnitOfWork, owner_id: UUID, payload: MatingInput) -> Mating:
    _father, _mother, species = await resolve_mating_parents(
        uow, owner_id, payload.father_id, payload.mother_id
    )
    duplicate = await uow.matings.find_duplicate(
        owner_id, payload.father_id, payload.mother_id, payload.mated_on
    )
    if duplicate is not None:
        raise ConflictError(
            f"Mating on {payload.mated_on.isoformat()} already recorded for these parents",
            details={"mating_id": str(duplicate.id)},
        )
    mating = Mating.create(
        owner_id=owner_id,
        mated_on=payload.mated_on,
        species=species,
        father_id=payload.father_id,
        mother_id=payload.mother_id,
    )
    created = await uow.matings.add(mating)
    logger.info("Mating %s recorded by %s", created.id, owner_id)
    return created
