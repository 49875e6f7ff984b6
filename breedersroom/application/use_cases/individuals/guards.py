from __future__ import annotations

from uuid import UUID

from breedersroom.application.errors import NotFound, PermissionDenied, ValidationError
from breedersroom.application.interfaces.unit_of_work import UnitOfWork
from breedersroom.domain.models.individual import Individual
from breedersroom.domain.value_objects.parent_link import ParentRole
from breedersroom.domain.value_objects.sex import Sex

# Known sex that contradicts each parent role
_FORBIDDEN_SEX = {
    ParentRole.FATHER: Sex.FEMALE.value,
    ParentRole.MOTHER: Sex.MALE.value,
}


async def load_individual(
    uow: UnitOfWork, individual_id: UUID, *, label: str = "Individual"
) -> Individual:
    individual = await uow.individuals.get(individual_id)
    if individual is None:
        raise NotFound(f"{label} {individual_id} not found")
    return individual


def ensure_owner(individual: Individual, user_id: UUID, action: str = "modify") -> None:
    if individual.owner_id != user_id:
        raise PermissionDenied(f"Not allowed to {action} individual {individual.id}")


def parse_role(value: str) -> ParentRole:
    try:
        return ParentRole(value)
    except ValueError as exc:
        raise ValidationError(
            f"Invalid parent role {value!r}", details={"allowed": [r.value for r in ParentRole]}
        ) from exc


def parse_sex(value: str | None) -> str | None:
    if value is None:
        return None
    try:
        return Sex(value).value
    except ValueError as exc:
        raise ValidationError(
            f"Invalid sex {value!r}", details={"allowed": [s.value for s in Sex]}
        ) from exc


def ensure_can_be_parent(individual: Individual, role: ParentRole) -> None:
    if individual.is_egg:
        raise ValidationError(f"Egg {individual.id} cannot be registered as a {role.value}")
    if individual.sex is not None and individual.sex == _FORBIDDEN_SEX[role]:
        raise ValidationError(
            f"Individual {individual.id} with sex {individual.sex} cannot be a {role.value}"
        )
