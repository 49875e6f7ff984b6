from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID

from breedersroom.application.cascades import cascades
from breedersroom.application.errors import ConflictError
from breedersroom.application.events.models import AdoptionSavedEvent
from breedersroom.application.interfaces.unit_of_work import UnitOfWork
from breedersroom.application.use_cases.adoptions.rules import (
    ensure_buyer_exists,
    ensure_buyer_status,
    parse_location,
    parse_status,
)
from breedersroom.application.use_cases.individuals.guards import ensure_owner, load_individual
from breedersroom.domain.models.adoption import Adoption

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CreateAdoptionInput:
    individual_id: UUID
    buyer_id: UUID | None = None
    status: str | None = None
    price: Decimal | None = None
    adopted_on: date | None = None
    memo: str | None = None
    location: str | None = None


async def execute(uow: UnitOfWork, seller_id: UUID, payload: CreateAdoptionInput) -> Adoption:
    individual = await load_individual(uow, payload.individual_id)
    ensure_owner(individual, seller_id, "sell")
    await ensure_buyer_exists(uow, payload.buyer_id)
    status = parse_status(payload.status)
    ensure_buyer_status(payload.buyer_id, status)

    active = await uow.adoptions.get_active_for_individual(individual.id)
    if active is not None:
        raise ConflictError(
            f"Individual {individual.id} already has an active adoption",
            details={"adoption_id": str(active.id)},
        )

    adoption = Adoption.create(
        individual_id=individual.id,
        seller_id=seller_id,
        buyer_id=payload.buyer_id,
        status=status,
        price=payload.price,
        adopted_on=payload.adopted_on,
        memo=payload.memo,
        location=parse_location(payload.location),
    )
    created = await uow.adoptions.add(adoption)
    await cascades.run(
        uow,
        AdoptionSavedEvent(
            adoption_id=created.id,
            individual_id=created.individual_id,
            status=created.status,
            actor_user_id=seller_id,
        ),
    )
    logger.info("Adoption %s created for %s as %s", created.id, individual.id, created.status)
    return created
