from __future__ import annotations

from datetime import date
from uuid import UUID

from breedersroom.application.errors import ValidationError
from breedersroom.application.interfaces.unit_of_work import UnitOfWork
from breedersroom.application.use_cases.breeding._access import load_owned_clutch
from breedersroom.application.use_cases.breeding.validation import clutch_sequence, sibling_error
from breedersroom.domain.models.clutch import Clutch
from breedersroom.domain.ordered_siblings import OrderedSiblings, Sibling, SiblingOrderError


async def execute(uow: UnitOfWork, owner_id: UUID, clutch_id: UUID, laid_on: date) -> Clutch:
    clutch = await load_owned_clutch(uow, owner_id, clutch_id)
    mating = (
        await uow.matings.get(clutch.mating_id, for_update=True) if clutch.mating_id else None
    )
    if mating is not None:
        sequence = await clutch_sequence(uow, mating)
    else:
        # Unbound clutches only have themselves to respect
        sequence = OrderedSiblings(None, [Sibling(clutch.id, clutch.clutch_order, clutch.laid_on)])

    try:
        sequence.check_move(clutch.id, laid_on)
    except SiblingOrderError as exc:
        raise sibling_error(exc) from exc

    eggs = (await uow.eggs.list_by_clutches([clutch.id])).get(clutch.id, [])
    hatched = [e.hatched_on for e in eggs if e.hatched_on is not None]
    if hatched and laid_on > min(hatched):
        raise ValidationError(
            f"clutch date {laid_on.isoformat()} follows a hatch on {min(hatched).isoformat()}"
        )

    clutch.move_to(laid_on)
    return await uow.clutches.update(clutch)
