from __future__ import annotations

import logging
from uuid import UUID

from breedersroom.application.cascades import cascades
from breedersroom.application.errors import ConflictError
from breedersroom.application.events.models import IndividualDeletedEvent
from breedersroom.application.interfaces.unit_of_work import UnitOfWork
from breedersroom.application.use_cases.breeding._access import load_owned_clutch

logger = logging.getLogger(__name__)


async def execute(uow: UnitOfWork, owner_id: UUID, clutch_id: UUID) -> None:
    clutch = await load_owned_clutch(uow, owner_id, clutch_id)
    if clutch.mating_id is not None:
        await uow.matings.get(clutch.mating_id, for_update=True)
    hatched = await uow.eggs.count_hatched(clutch.id)
    if hatched:
        raise ConflictError(f"Clutch {clutch.id} has {hatched} hatched egg(s)")
    egg_ids = await uow.eggs.soft_delete_by_clutch(clutch.id)
    clutch.soft_delete()
    await uow.clutches.update(clutch)
    # Eggs are individuals; their link requests go with them
    await cascades.run(
        uow,
        *[IndividualDeletedEvent(individual_id=egg_id, actor_user_id=owner_id) for egg_id in egg_ids],
    )
    logger.info("Clutch %s deleted with %s egg(s)", clutch.id, len(egg_ids))
