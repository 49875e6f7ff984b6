from __future__ import annotations

from uuid import UUID

from breedersroom.application.errors import NotFound, PermissionDenied, ValidationError
from breedersroom.application.interfaces.unit_of_work import UnitOfWork
from breedersroom.domain.models.adoption import BUYER_STATUSES, Adoption
from breedersroom.domain.value_objects.adoption_location import AdoptionLocation
from breedersroom.domain.value_objects.sale_status import SaleStatus


def parse_status(value: str | None) -> str | None:
    if value is None:
        return None
    try:
        return SaleStatus(value).value
    except ValueError as exc:
        raise ValidationError(
            f"Invalid sale status {value!r}", details={"allowed": [s.value for s in SaleStatus]}
        ) from exc


def parse_location(value: str | None) -> str | None:
    if value is None:
        return None
    try:
        return AdoptionLocation(value).value
    except ValueError as exc:
        raise ValidationError(f"Invalid adoption location {value!r}") from exc


def ensure_buyer_status(buyer_id: UUID | None, status: str | None) -> None:
    if buyer_id is not None and status is not None and SaleStatus(status) not in BUYER_STATUSES:
        raise ValidationError(
            f"An adoption with a buyer cannot be {status}",
            details={"allowed": sorted(s.value for s in BUYER_STATUSES)},
        )


async def ensure_buyer_exists(uow: UnitOfWork, buyer_id: UUID | None) -> None:
    if buyer_id is not None and not await uow.users.exists(buyer_id):
        raise NotFound(f"Buyer {buyer_id} not found")


async def load_owned_adoption(uow: UnitOfWork, seller_id: UUID, adoption_id: UUID) -> Adoption:
    adoption = await uow.adoptions.get(adoption_id)
    if adoption is None:
        raise NotFound(f"Adoption {adoption_id} not found")
    if adoption.seller_id != seller_id:
        raise PermissionDenied(f"Not allowed to modify adoption {adoption_id}")
    return adoption
