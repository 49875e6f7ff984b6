from __future__ import annotations

from types import SimpleNamespace
from uuid import uuid4

import pytest

from breedersroom.application.errors import NotFound
from breedersroom.application.events.models import (
    AdoptionDeletedEvent,
    AdoptionSavedEvent,
    IndividualDeletedEvent,
)
from breedersroom.application.use_cases.adoptions import sync_sale_status
from breedersroom.domain.models.individual import Individual


class StubIndividuals:
    def __init__(self, *individuals: Individual) -> None:
        self.rows = {i.id: i for i in individuals}
        self.updated: list[Individual] = []

    async def get(self, individual_id, *, include_deleted=False):
        found = self.rows.get(individual_id)
        if found is None or (found.is_deleted and not include_deleted):
            return None
        return found

    async def update(self, individual: Individual) -> Individual:
        self.updated.append(individual)
        self.rows[individual.id] = individual
        return individual


def make_uow(*individuals: Individual):
    return SimpleNamespace(individuals=StubIndividuals(*individuals))


def saved(individual: Individual, status: str) -> AdoptionSavedEvent:
    return AdoptionSavedEvent(
        adoption_id=uuid4(),
        individual_id=individual.id,
        status=status,
        actor_user_id=individual.owner_id,
    )


async def test_reservation_is_copied_onto_individual():
    pet = Individual.create(owner_id=uuid4(), species="Pogona vitticeps")
    uow = make_uow(pet)

    follow_ups = await sync_sale_status.on_adoption_saved(uow, saved(pet, "ON_RESERVATION"))

    assert follow_ups is None
    assert uow.individuals.rows[pet.id].sale_status == "ON_RESERVATION"
    assert not uow.individuals.rows[pet.id].is_deleted


async def test_sale_soft_deletes_and_emits_individual_deleted():
    pet = Individual.create(owner_id=uuid4(), species="Pogona vitticeps")
    uow = make_uow(pet)

    follow_ups = await sync_sale_status.on_adoption_saved(uow, saved(pet, "SOLD"))

    stored = uow.individuals.rows[pet.id]
    assert stored.sale_status == "SOLD"
    assert stored.is_deleted
    assert follow_ups == [
        IndividualDeletedEvent(individual_id=pet.id, actor_user_id=pet.owner_id, reason="sold")
    ]


async def test_missing_individual_is_not_found():
    uow = make_uow()
    ghost = Individual.create(owner_id=uuid4(), species="Pogona vitticeps")
    with pytest.raises(NotFound):
        await sync_sale_status.on_adoption_saved(uow, saved(ghost, "ON_SALE"))


async def test_deleting_adoption_returns_individual_to_not_for_sale():
    pet = Individual.create(owner_id=uuid4(), species="Pogona vitticeps")
    pet.set_sale_status("ON_SALE")
    uow = make_uow(pet)

    await sync_sale_status.on_adoption_deleted(
        uow,
        AdoptionDeletedEvent(adoption_id=uuid4(), individual_id=pet.id, actor_user_id=pet.owner_id),
    )

    assert uow.individuals.rows[pet.id].sale_status == "NOT_FOR_SALE"
