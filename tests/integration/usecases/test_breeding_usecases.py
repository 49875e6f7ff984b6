from __future__ import annotations

from datetime import date

import pytest

from breedersroom.application.errors import (
    ConflictError,
    InvalidTransition,
    PermissionDenied,
    ValidationError,
)
from breedersroom.application.use_cases.breeding import (
    create_clutch,
    delete_clutch,
    delete_mating,
    get_mating,
    hatch_egg,
    list_matings,
    record_mating,
    update_clutch_date,
    update_egg,
    update_mating,
)
from breedersroom.application.use_cases.individuals import delete_individual
from breedersroom.application.use_cases.pedigree import decide_link, propose_link
from breedersroom.domain.models.clutch import Clutch
from breedersroom.domain.models.individual import Individual

SPECIES = "Correlophus ciliatus"


async def add_pet(uow, owner_id, name, sex, species=SPECIES):
    return await uow.individuals.add(
        Individual.create(owner_id=owner_id, species=species, name=name, sex=sex)
    )


@pytest.fixture
async def pair(uow, users):
    sire = await add_pet(uow, users["alice"], "Blaze", "M")
    dam = await add_pet(uow, users["alice"], "Ember", "F")
    return sire, dam


async def mate(uow, owner_id, sire, dam, on=date(2024, 1, 1)):
    return await record_mating.execute(
        uow,
        owner_id,
        record_mating.MatingInput(mated_on=on, father_id=sire.id, mother_id=dam.id),
    )


async def lay(uow, owner_id, mating, order, on, eggs=2):
    return await create_clutch.execute(
        uow,
        owner_id,
        create_clutch.CreateClutchInput(
            mating_id=mating.id, laid_on=on, clutch_order=order, egg_count=eggs
        ),
    )


async def test_record_mating_takes_species_from_parents(uow, users, pair):
    sire, dam = pair
    mating = await mate(uow, users["alice"], sire, dam)

    assert mating.species == SPECIES
    assert (mating.father_id, mating.mother_id) == (sire.id, dam.id)


async def test_record_mating_with_single_parent(uow, users, pair):
    _sire, dam = pair
    mating = await record_mating.execute(
        uow, users["alice"], record_mating.MatingInput(mated_on=date(2024, 3, 1), mother_id=dam.id)
    )
    assert mating.father_id is None


async def test_record_mating_validation(uow, users, pair):
    sire, dam = pair
    other_species = await add_pet(uow, users["alice"], "Tank", "F", species="Pogona vitticeps")
    foreign = await add_pet(uow, users["bob"], "Rex", "F")

    with pytest.raises(ValidationError):
        await record_mating.execute(
            uow, users["alice"], record_mating.MatingInput(mated_on=date(2024, 1, 1))
        )
    with pytest.raises(ValidationError):
        await mate(uow, users["alice"], sire, other_species)
    with pytest.raises(ValidationError):
        await mate(uow, users["alice"], dam, sire)
    with pytest.raises(PermissionDenied):
        await mate(uow, users["alice"], sire, foreign)


async def test_duplicate_mating_conflicts(uow, users, pair):
    sire, dam = pair
    await mate(uow, users["alice"], sire, dam)

    with pytest.raises(ConflictError):
        await mate(uow, users["alice"], sire, dam)
    # A different day is a separate mating
    await mate(uow, users["alice"], sire, dam, on=date(2024, 1, 2))


async def test_clutch_order_and_dates(uow, users, pair):
    sire, dam = pair
    mating = await mate(uow, users["alice"], sire, dam)

    first = await lay(uow, users["alice"], mating, 1, date(2024, 1, 10))
    assert [e.name for e in first.eggs] == ["BlazexEmber(1-1)", "BlazexEmber(1-2)"]
    assert first.clutch.egg_count == 2

    with pytest.raises(ConflictError):
        await lay(uow, users["alice"], mating, 1, date(2024, 1, 20))
    with pytest.raises(ValidationError):
        await lay(uow, users["alice"], mating, 2, date(2024, 1, 9))
    with pytest.raises(ValidationError):
        await lay(uow, users["alice"], mating, 0, date(2024, 1, 20))

    second = await lay(uow, users["alice"], mating, 2, date(2024, 1, 15))
    assert second.clutch.clutch_order == 2


async def test_clutch_cannot_precede_mating(uow, users, pair):
    sire, dam = pair
    mating = await mate(uow, users["alice"], sire, dam, on=date(2024, 1, 5))

    with pytest.raises(ValidationError):
        await lay(uow, users["alice"], mating, 1, date(2024, 1, 4))


async def test_clutch_without_egg_count_keeps_it_unset(uow, users, pair):
    sire, dam = pair
    mating = await mate(uow, users["alice"], sire, dam)

    unknown = await create_clutch.execute(
        uow,
        users["alice"],
        create_clutch.CreateClutchInput(
            mating_id=mating.id, laid_on=date(2024, 1, 10), clutch_order=1
        ),
    )
    empty = await lay(uow, users["alice"], mating, 2, date(2024, 1, 20), eggs=0)

    assert unknown.clutch.egg_count is None
    assert unknown.eggs == []
    assert empty.clutch.egg_count == 0


async def test_clutch_order_is_unique_per_mating_in_the_database(uow, users, pair):
    sire, dam = pair
    mating = await mate(uow, users["alice"], sire, dam)
    await lay(uow, users["alice"], mating, 1, date(2024, 1, 10))

    raced = Clutch.create(
        owner_id=users["alice"],
        species=SPECIES,
        laid_on=date(2024, 1, 20),
        clutch_order=1,
        mating_id=mating.id,
    )
    with pytest.raises(ConflictError):
        await uow.clutches.add(raced)


async def test_clutch_date_is_unique_per_mating_in_the_database(uow, users, pair):
    sire, dam = pair
    mating = await mate(uow, users["alice"], sire, dam)
    await lay(uow, users["alice"], mating, 1, date(2024, 1, 10))

    raced = Clutch.create(
        owner_id=users["alice"],
        species=SPECIES,
        laid_on=date(2024, 1, 10),
        clutch_order=2,
        mating_id=mating.id,
    )
    with pytest.raises(ConflictError):
        await uow.clutches.add(raced)


async def test_clutch_date_moves_stay_between_neighbours(uow, users, pair):
    sire, dam = pair
    mating = await mate(uow, users["alice"], sire, dam)
    await lay(uow, users["alice"], mating, 1, date(2024, 1, 10))
    middle = await lay(uow, users["alice"], mating, 2, date(2024, 1, 15))
    await lay(uow, users["alice"], mating, 3, date(2024, 1, 20))

    with pytest.raises(InvalidTransition):
        await update_clutch_date.execute(uow, users["alice"], middle.clutch.id, date(2024, 1, 10))
    with pytest.raises(InvalidTransition):
        await update_clutch_date.execute(uow, users["alice"], middle.clutch.id, date(2024, 1, 21))
    with pytest.raises(ValidationError):
        await update_clutch_date.execute(uow, users["alice"], middle.clutch.id, date(2024, 1, 15))

    moved = await update_clutch_date.execute(
        uow, users["alice"], middle.clutch.id, date(2024, 1, 12)
    )
    assert moved.laid_on == date(2024, 1, 12)


async def test_mating_date_cannot_pass_first_clutch(uow, users, pair):
    sire, dam = pair
    mating = await mate(uow, users["alice"], sire, dam)
    await lay(uow, users["alice"], mating, 1, date(2024, 1, 10))

    with pytest.raises(ValidationError):
        await update_mating.execute(
            uow,
            users["alice"],
            mating.id,
            record_mating.MatingInput(
                mated_on=date(2024, 1, 11), father_id=sire.id, mother_id=dam.id
            ),
        )
    updated = await update_mating.execute(
        uow,
        users["alice"],
        mating.id,
        record_mating.MatingInput(mated_on=date(2023, 12, 28), father_id=sire.id, mother_id=dam.id),
    )
    assert updated.mated_on == date(2023, 12, 28)


async def test_hatching_mints_individual_with_approved_parents(uow, users, pair):
    sire, dam = pair
    mating = await mate(uow, users["alice"], sire, dam)
    clutch = await lay(uow, users["alice"], mating, 1, date(2024, 1, 10))
    egg = clutch.eggs[0]

    result = await hatch_egg.execute(
        uow, users["alice"], egg.id, hatch_egg.HatchEggInput(hatched_on=date(2024, 2, 1))
    )

    hatchling = result.individual
    assert hatchling.name == egg.name
    assert hatchling.species == SPECIES
    assert hatchling.hatched_on == date(2024, 2, 1)
    assert hatchling.source_clutch_id == clutch.clutch.id
    assert result.egg.hatched_individual_id == hatchling.id
    assert {(link.role, link.parent_id, link.status) for link in result.links} == {
        ("father", sire.id, "approved"),
        ("mother", dam.id, "approved"),
    }

    with pytest.raises(InvalidTransition):
        await hatch_egg.execute(
            uow, users["alice"], egg.id, hatch_egg.HatchEggInput(hatched_on=date(2024, 2, 2))
        )
    with pytest.raises(InvalidTransition):
        await update_egg.execute(
            uow, users["alice"], egg.id, update_egg.UpdateEggInput(status="DEAD")
        )


async def test_hatch_guards(uow, users, pair):
    sire, dam = pair
    mating = await mate(uow, users["alice"], sire, dam)
    clutch = await lay(uow, users["alice"], mating, 1, date(2024, 1, 10))
    egg, other = clutch.eggs

    with pytest.raises(ValidationError):
        await hatch_egg.execute(
            uow, users["alice"], egg.id, hatch_egg.HatchEggInput(hatched_on=date(2024, 1, 9))
        )
    with pytest.raises(PermissionDenied):
        await hatch_egg.execute(
            uow, users["bob"], egg.id, hatch_egg.HatchEggInput(hatched_on=date(2024, 2, 1))
        )
    # The recorded status is informational and does not block a hatch
    await update_egg.execute(
        uow, users["alice"], other.id, update_egg.UpdateEggInput(status="UNFERTILIZED")
    )
    result = await hatch_egg.execute(
        uow, users["alice"], other.id, hatch_egg.HatchEggInput(hatched_on=date(2024, 2, 1))
    )
    assert result.egg.hatched_individual_id == result.individual.id


async def test_clutch_date_cannot_follow_a_hatch(uow, users, pair):
    sire, dam = pair
    mating = await mate(uow, users["alice"], sire, dam)
    clutch = await lay(uow, users["alice"], mating, 1, date(2024, 1, 10))
    await hatch_egg.execute(
        uow,
        users["alice"],
        clutch.eggs[0].id,
        hatch_egg.HatchEggInput(hatched_on=date(2024, 1, 20)),
    )

    with pytest.raises(ValidationError):
        await update_clutch_date.execute(uow, users["alice"], clutch.clutch.id, date(2024, 1, 25))


async def test_deletion_rules(uow, users, pair):
    sire, dam = pair
    mating = await mate(uow, users["alice"], sire, dam)
    hatched = await lay(uow, users["alice"], mating, 1, date(2024, 1, 10))
    pending = await lay(uow, users["alice"], mating, 2, date(2024, 1, 20))
    await hatch_egg.execute(
        uow,
        users["alice"],
        hatched.eggs[0].id,
        hatch_egg.HatchEggInput(hatched_on=date(2024, 2, 1)),
    )

    with pytest.raises(ConflictError):
        await delete_clutch.execute(uow, users["alice"], hatched.clutch.id)
    with pytest.raises(ConflictError):
        await delete_mating.execute(uow, users["alice"], mating.id)
    # Parents of unhatched eggs stay put
    with pytest.raises(ConflictError):
        await delete_individual.execute(uow, users["alice"], sire.id)

    await delete_clutch.execute(uow, users["alice"], pending.clutch.id)
    assert await uow.clutches.get(pending.clutch.id) is None
    assert await uow.eggs.get(pending.eggs[0].id) is None

    view = await get_mating.execute(uow, users["alice"], mating.id)
    assert [c.clutch.clutch_order for c in view.clutches] == [1]


async def test_deleting_clutch_deletes_link_requests_of_its_eggs(uow, users, pair):
    sire, dam = pair
    mating = await mate(uow, users["alice"], sire, dam)
    clutch = await lay(uow, users["alice"], mating, 1, date(2024, 1, 10), eggs=1)
    outside_sire = await add_pet(uow, users["bob"], "Rex", "M")
    link = await propose_link.execute(
        uow,
        users["alice"],
        propose_link.ProposeLinkInput(
            child_id=clutch.eggs[0].id, parent_id=outside_sire.id, role="father"
        ),
    )
    assert link.status == "pending"

    await delete_clutch.execute(uow, users["alice"], clutch.clutch.id)

    assert (await uow.parent_links.get(link.id)).status == "deleted"
    with pytest.raises(InvalidTransition):
        await decide_link.execute(
            uow, users["bob"], link.id, decide_link.DecideLinkInput(status="approved")
        )


async def test_empty_mating_can_be_deleted(uow, users, pair):
    sire, dam = pair
    mating = await mate(uow, users["alice"], sire, dam)

    await delete_mating.execute(uow, users["alice"], mating.id)

    listed = await list_matings.execute(uow, users["alice"])
    assert listed.total == 0
    # The same pairing can be recorded again once the old one is gone
    await mate(uow, users["alice"], sire, dam)


async def test_list_matings_filters(uow, users, pair):
    sire, dam = pair
    other_dam = await add_pet(uow, users["alice"], "Ivy", "F")
    await mate(uow, users["alice"], sire, dam, on=date(2024, 1, 1))
    await mate(uow, users["alice"], sire, other_dam, on=date(2024, 3, 1))

    by_mother = await list_matings.execute(uow, users["alice"], mother_id=other_dam.id)
    since = await list_matings.execute(uow, users["alice"], date_from=date(2024, 2, 1))
    everything = await list_matings.execute(uow, users["alice"])
    nothing = await list_matings.execute(uow, users["bob"])

    assert [v.mother.name for v in by_mother.items] == ["Ivy"]
    assert since.total == 1
    assert [v.mating.mated_on for v in everything.items] == [date(2024, 3, 1), date(2024, 1, 1)]
    assert everything.items[0].father.name == "Blaze"
    assert nothing.total == 0
