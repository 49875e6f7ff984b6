from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from uuid import UUID

from breedersroom.application.errors import ValidationError
from breedersroom.application.interfaces.unit_of_work import UnitOfWork
from breedersroom.application.use_cases.individuals.guards import parse_sex
from breedersroom.application.use_cases.pedigree import propose_link
from breedersroom.domain.models.individual import Individual
from breedersroom.domain.models.parent_link_request import ParentLinkRequest
from breedersroom.domain.value_objects.parent_link import ParentRole


@dataclass(slots=True)
class RegisterIndividualInput:
    species: str
    name: str | None = None
    sex: str | None = None
    hatched_on: date | None = None
    father_id: UUID | None = None
    mother_id: UUID | None = None
    message: str | None = None


@dataclass(slots=True)
class RegisterIndividualOutput:
    individual: Individual
    links: list[ParentLinkRequest] = field(default_factory=list)


async def execute(
    uow: UnitOfWork,
    owner_id: UUID,
    payload: RegisterIndividualInput,
) -> RegisterIndividualOutput:
    species = (payload.species or "").strip()
    if not species:
        raise ValidationError("Species is required")
    if payload.father_id is not None and payload.father_id == payload.mother_id:
        raise ValidationError("Father and mother must be different individuals")

    individual = Individual.create(
        owner_id=owner_id,
        species=species,
        name=payload.name,
        sex=parse_sex(payload.sex),
        hatched_on=payload.hatched_on,
    )
    created = await uow.individuals.add(individual)

    links: list[ParentLinkRequest] = []
    for role, parent_id in (
        (ParentRole.FATHER, payload.father_id),
        (ParentRole.MOTHER, payload.mother_id),
    ):
        if parent_id is None:
            continue
        link = await propose_link.execute(
            uow,
            owner_id,
            propose_link.ProposeLinkInput(
                child_id=created.id,
                parent_id=parent_id,
                role=role.value,
                message=payload.message,
            ),
        )
        links.append(link)
    return RegisterIndividualOutput(individual=created, links=links)
