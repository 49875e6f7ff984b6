from __future__ import annotations

from uuid import uuid4

import pytest

from breedersroom.domain.models.adoption import Adoption, AdoptionAlreadySold, derive_sale_status
from breedersroom.domain.value_objects.sale_status import SaleStatus


@pytest.mark.parametrize(
    ("buyer", "explicit", "expected"),
    [
        (None, None, SaleStatus.ON_SALE),
        (uuid4(), None, SaleStatus.ON_RESERVATION),
        (uuid4(), "SOLD", SaleStatus.SOLD),
        (None, "NOT_FOR_SALE", SaleStatus.NOT_FOR_SALE),
    ],
)
def test_derive_sale_status(buyer, explicit, expected):
    assert derive_sale_status(buyer, explicit) is expected


def test_rederive_follows_buyer_changes():
    adoption = Adoption.create(individual_id=uuid4(), seller_id=uuid4(), buyer_id=uuid4())
    assert adoption.status == "ON_RESERVATION"
    adoption.buyer_id = None
    assert adoption.rederive() is SaleStatus.ON_SALE
    assert adoption.version == 2


def test_sold_adoption_is_frozen():
    adoption = Adoption.create(individual_id=uuid4(), seller_id=uuid4(), status="SOLD")
    assert adoption.is_sold
    assert not adoption.is_active
    with pytest.raises(AdoptionAlreadySold):
        adoption.rederive("ON_SALE")
    with pytest.raises(AdoptionAlreadySold):
        adoption.soft_delete()
