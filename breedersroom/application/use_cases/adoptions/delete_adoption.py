from __future__ import annotations

from uuid import UUID

from breedersroom.application.cascades import cascades
from breedersroom.application.errors import InvalidTransition
from breedersroom.application.events.models import AdoptionDeletedEvent
from breedersroom.application.interfaces.unit_of_work import UnitOfWork
from breedersroom.application.use_cases.adoptions.rules import load_owned_adoption
from breedersroom.domain.models.adoption import AdoptionAlreadySold


async def execute(uow: UnitOfWork, seller_id: UUID, adoption_id: UUID) -> None:
    adoption = await load_owned_adoption(uow, seller_id, adoption_id)
    try:
        adoption.soft_delete()
    except AdoptionAlreadySold as exc:
        raise InvalidTransition(str(exc)) from exc
    await uow.adoptions.update(adoption)
    await cascades.run(
        uow,
        AdoptionDeletedEvent(
            adoption_id=adoption.id,
            individual_id=adoption.individual_id,
            actor_user_id=seller_id,
        ),
    )
