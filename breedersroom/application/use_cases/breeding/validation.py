from __future__ import annotations

from uuid import UUID

from breedersroom.application.errors import ConflictError, InvalidTransition, ValidationError
from breedersroom.application.interfaces.unit_of_work import UnitOfWork
from breedersroom.application.use_cases.individuals.guards import (
    ensure_can_be_parent,
    ensure_owner,
    load_individual,
)
from breedersroom.domain.models.individual import Individual
from breedersroom.domain.ordered_siblings import (
    DuplicateSibling,
    OrderedSiblings,
    OutsideWindow,
    SiblingOrderError,
)
from breedersroom.domain.value_objects.parent_link import ParentRole


async def resolve_mating_parents(
    uow: UnitOfWork,
    owner_id: UUID,
    father_id: UUID | None,
    mother_id: UUID | None,
) -> tuple[Individual | None, Individual | None, str]:
    """Load and check both parents; return them with the species they share."""
    if father_id is None and mother_id is None:
        raise ValidationError("A mating needs a father or a mother")
    if father_id is not None and father_id == mother_id:
        raise ValidationError("Father and mother must be different individuals")

    loaded: dict[ParentRole, Individual | None] = {}
    for role, parent_id in ((ParentRole.FATHER, father_id), (ParentRole.MOTHER, mother_id)):
        if parent_id is None:
            loaded[role] = None
            continue
        parent = await load_individual(uow, parent_id, label=role.value.capitalize())
        ensure_owner(parent, owner_id, "mate")
        ensure_can_be_parent(parent, role)
        loaded[role] = parent

    father, mother = loaded[ParentRole.FATHER], loaded[ParentRole.MOTHER]
    species = {p.species for p in (father, mother) if p is not None}
    if len(species) > 1:
        raise ValidationError(
            "Father and mother belong to different species",
            details={"species": sorted(species)},
        )
    return father, mother, species.pop()


def sibling_error(exc: SiblingOrderError) -> Exception:
    """Map an ordering failure onto the application error it surfaces as."""
    if isinstance(exc, DuplicateSibling):
        return ConflictError(str(exc))
    if isinstance(exc, OutsideWindow):
        return InvalidTransition(str(exc))
    return ValidationError(str(exc))


async def clutch_sequence(uow: UnitOfWork, mating) -> OrderedSiblings:
    clutches = await uow.clutches.list_by_mating(mating.id)
    return OrderedSiblings.from_records(
        mating.id,
        clutches,
        order_field="clutch_order",
        date_field="laid_on",
        floor=mating.mated_on,
    )
