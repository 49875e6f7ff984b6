from __future__ import annotations

import logging

from breedersroom.application.errors import NotFound
from breedersroom.application.events.models import (
    AdoptionDeletedEvent,
    AdoptionSavedEvent,
    IndividualDeletedEvent,
)
from breedersroom.application.interfaces.unit_of_work import UnitOfWork
from breedersroom.domain.value_objects.sale_status import SaleStatus

logger = logging.getLogger(__name__)


async def on_adoption_saved(
    uow: UnitOfWork, event: AdoptionSavedEvent
) -> list[IndividualDeletedEvent] | None:
    """Copy the adoption status onto its individual; a sale removes the individual."""
    individual = await uow.individuals.get(event.individual_id)
    if individual is None:
        raise NotFound(f"Individual {event.individual_id} not found")
    individual.set_sale_status(event.status)
    if event.status != SaleStatus.SOLD.value:
        await uow.individuals.update(individual)
        return None

    individual.soft_delete()
    await uow.individuals.update(individual)
    logger.info("Individual %s sold through adoption %s", individual.id, event.adoption_id)
    return [
        IndividualDeletedEvent(
            individual_id=individual.id, actor_user_id=event.actor_user_id, reason="sold"
        )
    ]


async def on_adoption_deleted(uow: UnitOfWork, event: AdoptionDeletedEvent) -> None:
    individual = await uow.individuals.get(event.individual_id)
    if individual is None:
        return
    individual.set_sale_status(SaleStatus.NOT_FOR_SALE.value)
    await uow.individuals.update(individual)
