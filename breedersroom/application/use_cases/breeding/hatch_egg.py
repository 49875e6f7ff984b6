from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from uuid import UUID

from breedersroom.application.errors import InvalidTransition, NotFound, ValidationError
from breedersroom.application.interfaces.unit_of_work import UnitOfWork
from breedersroom.application.use_cases.breeding.update_egg import load_owned_egg
from breedersroom.application.use_cases.individuals.guards import parse_sex
from breedersroom.domain.models.egg import Egg
from breedersroom.domain.models.individual import Individual
from breedersroom.domain.models.parent_link_request import ParentLinkRequest
from breedersroom.domain.value_objects.parent_link import ParentRole

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class HatchEggInput:
    hatched_on: date
    name: str | None = None
    sex: str | None = None


@dataclass(slots=True)
class HatchEggOutput:
    egg: Egg
    individual: Individual
    links: list[ParentLinkRequest] = field(default_factory=list)


async def execute(
    uow: UnitOfWork, owner_id: UUID, egg_id: UUID, payload: HatchEggInput
) -> HatchEggOutput:
    egg = await load_owned_egg(uow, owner_id, egg_id)
    if egg.is_hatched:
        raise InvalidTransition(
            f"Egg {egg.id} has already hatched",
            details={"individual_id": str(egg.hatched_individual_id)},
        )
    clutch = await uow.clutches.get(egg.clutch_id)
    if clutch is None:
        raise NotFound(f"Clutch {egg.clutch_id} not found")
    if payload.hatched_on < clutch.laid_on:
        raise ValidationError(
            f"hatch date {payload.hatched_on.isoformat()} precedes "
            f"clutch date {clutch.laid_on.isoformat()}"
        )

    individual = Individual.create(
        owner_id=egg.owner_id,
        species=clutch.species,
        name=payload.name or egg.name,
        sex=parse_sex(payload.sex),
        hatched_on=payload.hatched_on,
        source_clutch_id=clutch.id,
    )
    hatchling = await uow.individuals.add(individual)
    egg.mark_hatched(hatchling.id, payload.hatched_on)
    updated_egg = await uow.eggs.update(egg)

    links: list[ParentLinkRequest] = []
    mating = await uow.matings.get(clutch.mating_id) if clutch.mating_id else None
    if mating is not None:
        parents = await uow.individuals.get_many(p for p in mating.parent_ids if p is not None)
        for role, parent_id in (
            (ParentRole.FATHER, mating.father_id),
            (ParentRole.MOTHER, mating.mother_id),
        ):
            if parent_id is None:
                continue
            parent = parents.get(parent_id)
            if parent is None or parent.is_deleted:
                logger.warning(
                    "Skipping %s link of hatchling %s: parent %s is gone",
                    role.value,
                    hatchling.id,
                    parent_id,
                )
                continue
            # Hatchlings inherit their mating's parents without an approval round
            link = ParentLinkRequest.create(
                child_id=hatchling.id,
                parent_id=parent_id,
                role=role.value,
                requested_by=owner_id,
                approved=True,
            )
            links.append(await uow.parent_links.add(link))

    logger.info("Egg %s hatched into %s on %s", egg.id, hatchling.id, payload.hatched_on)
    return HatchEggOutput(egg=updated_egg, individual=hatchling, links=links)
