from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import UUID, uuid4

from breedersroom.domain.value_objects.sale_status import SaleStatus

# Explicit statuses that may accompany a buyer.
BUYER_STATUSES = frozenset({SaleStatus.ON_RESERVATION, SaleStatus.SOLD})


def derive_sale_status(buyer_id: UUID | None, explicit_status: str | None) -> SaleStatus:
    """Resolve the status an adoption write lands in.

    An explicit status wins, then a buyer means a reservation, otherwise the
    individual is simply on sale.
    """
    if explicit_status is not None:
        return SaleStatus(explicit_status)
    if buyer_id is not None:
        return SaleStatus.ON_RESERVATION
    return SaleStatus.ON_SALE


class AdoptionAlreadySold(ValueError):
    def __init__(self, adoption_id: UUID) -> None:
        super().__init__(f"Adoption {adoption_id} is already sold")
        self.adoption_id = adoption_id


@dataclass(slots=True)
class Adoption:
    id: UUID
    individual_id: UUID
    seller_id: UUID
    status: str
    buyer_id: UUID | None = None
    price: Decimal | None = None
    adopted_on: date | None = None
    memo: str | None = None
    location: str | None = None  # AdoptionLocation

    deleted_at: datetime | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 1

    @classmethod
    def create(
        cls,
        individual_id: UUID,
        seller_id: UUID,
        buyer_id: UUID | None = None,
        status: str | None = None,
        price: Decimal | None = None,
        adopted_on: date | None = None,
        memo: str | None = None,
        location: str | None = None,
    ) -> Adoption:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            individual_id=individual_id,
            seller_id=seller_id,
            status=derive_sale_status(buyer_id, status).value,
            buyer_id=buyer_id,
            price=price,
            adopted_on=adopted_on,
            memo=memo,
            location=location,
            created_at=now,
            updated_at=now,
            version=1,
        )

    @property
    def is_sold(self) -> bool:
        return self.status == SaleStatus.SOLD.value

    @property
    def is_active(self) -> bool:
        return self.deleted_at is None and not self.is_sold

    def rederive(self, status: str | None = None) -> SaleStatus:
        if self.is_sold:
            raise AdoptionAlreadySold(self.id)
        derived = derive_sale_status(self.buyer_id, status)
        self.status = derived.value
        self.bump_version()
        return derived

    def soft_delete(self) -> None:
        if self.is_sold:
            raise AdoptionAlreadySold(self.id)
        self.deleted_at = datetime.now(timezone.utc)
        self.bump_version()

    def bump_version(self) -> None:
        self.version += 1
        self.updated_at = datetime.now(timezone.utc)
