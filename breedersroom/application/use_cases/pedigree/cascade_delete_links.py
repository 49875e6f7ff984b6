from __future__ import annotations

import logging
from uuid import UUID

from breedersroom.application.events.models import IndividualDeletedEvent
from breedersroom.application.interfaces.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


async def execute(uow: UnitOfWork, individual_id: UUID) -> int:
    """Mark every non-deleted request touching the individual as deleted."""
    count = await uow.parent_links.mark_deleted_for_individual(individual_id)
    logger.info("Deleted %s parent link(s) of individual %s", count, individual_id)
    return count


async def on_individual_deleted(uow: UnitOfWork, event: IndividualDeletedEvent) -> None:
    await execute(uow, event.individual_id)
