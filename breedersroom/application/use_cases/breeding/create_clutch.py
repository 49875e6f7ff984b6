from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from uuid import UUID

from breedersroom.application.errors import ValidationError
from breedersroom.application.interfaces.unit_of_work import UnitOfWork
from breedersroom.application.use_cases.breeding._access import load_owned_mating
from breedersroom.application.use_cases.breeding.validation import clutch_sequence, sibling_error
from breedersroom.application.use_cases.breeding.views import ClutchView
from breedersroom.domain.models.clutch import Clutch
from breedersroom.domain.models.egg import Egg
from breedersroom.domain.ordered_siblings import SiblingOrderError
from breedersroom.domain.value_objects.egg_status import EggStatus

logger = logging.getLogger(__name__)

UNKNOWN_PARENT_NAME = "@"


@dataclass(slots=True)
class EggSeed:
    status: str = EggStatus.FERTILIZED.value
    temperature: float | None = None
    name: str | None = None


@dataclass(slots=True)
class CreateClutchInput:
    mating_id: UUID
    laid_on: date
    clutch_order: int
    egg_count: int | None = None
    temperature: float | None = None
    eggs: list[EggSeed] = field(default_factory=list)


def egg_name(father: str | None, mother: str | None, clutch_order: int, position: int) -> str:
    return (
        f"{father or UNKNOWN_PARENT_NAME}x{mother or UNKNOWN_PARENT_NAME}"
        f"({clutch_order}-{position})"
    )


def _seeds(payload: CreateClutchInput) -> list[EggSeed]:
    if payload.eggs:
        if payload.egg_count is not None and payload.egg_count != len(payload.eggs):
            raise ValidationError(
                f"egg_count {payload.egg_count} does not match {len(payload.eggs)} egg details"
            )
        for seed in payload.eggs:
            try:
                seed.status = EggStatus(seed.status).value
            except ValueError as exc:
                raise ValidationError(f"Invalid egg status {seed.status!r}") from exc
        return payload.eggs
    if payload.egg_count is not None and payload.egg_count < 0:
        raise ValidationError("egg_count cannot be negative")
    return [EggSeed(temperature=payload.temperature) for _ in range(payload.egg_count or 0)]


async def execute(uow: UnitOfWork, owner_id: UUID, payload: CreateClutchInput) -> ClutchView:
    if payload.clutch_order < 1:
        raise ValidationError("clutch order must be a positive integer")
    seeds = _seeds(payload)

    # Row lock on the mating serialises concurrent clutch writes
    mating = await load_owned_mating(uow, owner_id, payload.mating_id, for_update=True)
    sequence = await clutch_sequence(uow, mating)
    try:
        sequence.check_insert(payload.clutch_order, payload.laid_on)
    except SiblingOrderError as exc:
        raise sibling_error(exc) from exc

    clutch = Clutch.create(
        owner_id=owner_id,
        species=mating.species,
        laid_on=payload.laid_on,
        clutch_order=payload.clutch_order,
        mating_id=mating.id,
        egg_count=len(seeds) if payload.eggs else payload.egg_count,
        temperature=payload.temperature,
    )
    created = await uow.clutches.add(clutch)

    parents = await uow.individuals.get_many(p for p in mating.parent_ids if p is not None)
    father = parents.get(mating.father_id) if mating.father_id else None
    mother = parents.get(mating.mother_id) if mating.mother_id else None
    eggs: list[Egg] = []
    for position, seed in enumerate(seeds, start=1):
        egg = Egg.create(
            owner_id=owner_id,
            clutch_id=created.id,
            species=created.species,
            position=position,
            name=seed.name
            or egg_name(
                father.name if father else None,
                mother.name if mother else None,
                created.clutch_order,
                position,
            ),
            status=seed.status,
            temperature=seed.temperature,
        )
        eggs.append(await uow.eggs.add(egg))

    logger.info(
        "Clutch %s (order %s) laid %s under mating %s with %s egg(s)",
        created.id,
        created.clutch_order,
        created.laid_on.isoformat(),
        mating.id,
        len(eggs),
    )
    return ClutchView(clutch=created, eggs=eggs)
