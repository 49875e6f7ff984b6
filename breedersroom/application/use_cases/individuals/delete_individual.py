from __future__ import annotations

import logging
from uuid import UUID

from breedersroom.application.cascades import cascades
from breedersroom.application.errors import ConflictError, ValidationError
from breedersroom.application.events.models import IndividualDeletedEvent
from breedersroom.application.interfaces.unit_of_work import UnitOfWork
from breedersroom.application.use_cases.individuals.guards import ensure_owner, load_individual

logger = logging.getLogger(__name__)


async def ensure_can_delete(uow: UnitOfWork, individual_id: UUID) -> None:
    adoption = await uow.adoptions.get_active_for_individual(individual_id)
    if adoption is not None:
        raise ConflictError(
            f"Individual {individual_id} has an active adoption",
            details={"adoption_id": str(adoption.id)},
        )
    if await uow.eggs.has_unhatched_for_parent(individual_id):
        raise ConflictError(f"Individual {individual_id} is the parent of unhatched eggs")


async def execute(uow: UnitOfWork, actor_id: UUID, individual_id: UUID) -> None:
    individual = await load_individual(uow, individual_id)
    ensure_owner(individual, actor_id, "delete")
    if individual.is_egg:
        raise ValidationError("Eggs are updated or removed through their clutch")
    await ensure_can_delete(uow, individual.id)

    individual.soft_delete()
    await uow.individuals.update(individual)
    await cascades.run(
        uow, IndividualDeletedEvent(individual_id=individual.id, actor_user_id=actor_id)
    )
    logger.info("Individual %s deleted by %s", individual.id, actor_id)
