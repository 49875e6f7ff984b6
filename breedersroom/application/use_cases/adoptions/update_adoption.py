from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from uuid import UUID

from breedersroom.application.cascades import cascades
from breedersroom.application.errors import InvalidTransition
from breedersroom.application.events.models import AdoptionSavedEvent
from breedersroom.application.interfaces.unit_of_work import UnitOfWork
from breedersroom.application.use_cases.adoptions.rules import (
    ensure_buyer_exists,
    ensure_buyer_status,
    load_owned_adoption,
    parse_location,
    parse_status,
)
from breedersroom.domain.models.adoption import Adoption


@dataclass(slots=True)
class UpdateAdoptionInput:
    buyer_id: UUID | None = None
    status: str | None = None
    price: Decimal | None = None
    adopted_on: date | None = None
    memo: str | None = None
    location: str | None = None
    # Names of the fields the caller actually sent; an explicit None clears
    provided: frozenset[str] = field(default_factory=frozenset)


async def execute(
    uow: UnitOfWork, seller_id: UUID, adoption_id: UUID, payload: UpdateAdoptionInput
) -> Adoption:
    adoption = await load_owned_adoption(uow, seller_id, adoption_id)
    if adoption.is_sold:
        raise InvalidTransition(f"Adoption {adoption.id} is already sold")

    if "buyer_id" in payload.provided:
        await ensure_buyer_exists(uow, payload.buyer_id)
        adoption.buyer_id = payload.buyer_id
    if "price" in payload.provided:
        adoption.price = payload.price
    if "adopted_on" in payload.provided:
        adoption.adopted_on = payload.adopted_on
    if "memo" in payload.provided:
        adoption.memo = payload.memo
    if "location" in payload.provided:
        adoption.location = parse_location(payload.location)

    status = parse_status(payload.status) if "status" in payload.provided else None
    ensure_buyer_status(adoption.buyer_id, status)
    adoption.rederive(status)
    updated = await uow.adoptions.update(adoption)
    await cascades.run(
        uow,
        AdoptionSavedEvent(
            adoption_id=updated.id,
            individual_id=updated.individual_id,
            status=updated.status,
            actor_user_id=seller_id,
        ),
    )
    return updated
