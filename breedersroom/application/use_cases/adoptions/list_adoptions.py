from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from breedersroom.application.interfaces.unit_of_work import UnitOfWork
from breedersroom.application.use_cases.adoptions.rules import parse_status
from breedersroom.domain.models.adoption import Adoption


@dataclass(slots=True)
class ListAdoptionsResult:
    items: list[Adoption]
    total: int
    limit: int | None
    offset: int


async def execute(
    uow: UnitOfWork,
    seller_id: UUID,
    status: str | None = None,
    limit: int | None = None,
    offset: int = 0,
) -> ListAdoptionsResult:
    status = parse_status(status)
    items = await uow.adoptions.list_by_seller(seller_id, status=status, limit=limit, offset=offset)
    total = await uow.adoptions.count_by_seller(seller_id, status=status)
    return ListAdoptionsResult(items=items, total=total, limit=limit, offset=offset)
