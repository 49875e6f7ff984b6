from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from breedersroom.application.errors import (
    InvalidTransition,
    NotFound,
    PermissionDenied,
    ValidationError,
)
from breedersroom.application.interfaces.unit_of_work import UnitOfWork
from breedersroom.domain.models.egg import Egg, EggAlreadyHatched
from breedersroom.domain.value_objects.egg_status import EggStatus


@dataclass(slots=True)
class UpdateEggInput:
    status: str | None = None
    temperature: float | None = None


async def load_owned_egg(uow: UnitOfWork, owner_id: UUID, egg_id: UUID) -> Egg:
    egg = await uow.eggs.get(egg_id)
    if egg is None:
        raise NotFound(f"Egg {egg_id} not found")
    if egg.owner_id != owner_id:
        raise PermissionDenied(f"Not allowed to modify egg {egg_id}")
    return egg


async def execute(uow: UnitOfWork, owner_id: UUID, egg_id: UUID, payload: UpdateEggInput) -> Egg:
    egg = await load_owned_egg(uow, owner_id, egg_id)
    if payload.status is None and payload.temperature is None:
        return egg
    if payload.status is not None and payload.status not in {s.value for s in EggStatus}:
        raise ValidationError(
            f"Invalid egg status {payload.status!r}",
            details={"allowed": [s.value for s in EggStatus]},
        )
    try:
        if payload.status is not None:
            egg.change_status(payload.status)
        if payload.temperature is not None:
            egg.change_temperature(payload.temperature)
    except EggAlreadyHatched as exc:
        raise InvalidTransition(str(exc)) from exc
    return await uow.eggs.update(egg)
