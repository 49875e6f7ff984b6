from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from uuid import UUID, uuid4

from breedersroom.domain.value_objects.individual_kind import IndividualKind
from breedersroom.domain.value_objects.sale_status import SaleStatus


@dataclass(slots=True)
class Individual:
    id: UUID
    owner_id: UUID
    kind: str  # IndividualKind
    species: str
    name: str | None = None
    sex: str | None = None  # Sex; None when not yet known
    sale_status: str = SaleStatus.NOT_FOR_SALE.value
    hatched_on: date | None = None
    source_clutch_id: UUID | None = None  # set when minted by hatching

    deleted_at: datetime | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 1

    @classmethod
    def create(
        cls,
        owner_id: UUID,
        species: str,
        kind: str = IndividualKind.PET.value,
        name: str | None = None,
        sex: str | None = None,
        hatched_on: date | None = None,
        source_clutch_id: UUID | None = None,
    ) -> Individual:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            owner_id=owner_id,
            kind=kind,
            species=species,
            name=name,
            sex=sex,
            sale_status=SaleStatus.NOT_FOR_SALE.value,
            hatched_on=hatched_on,
            source_clutch_id=source_clutch_id,
            created_at=now,
            updated_at=now,
            version=1,
        )

    @property
    def is_egg(self) -> bool:
        return self.kind == IndividualKind.EGG.value

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def set_sale_status(self, status: str) -> None:
        self.sale_status = SaleStatus(status).value
        self.bump_version()

    def soft_delete(self) -> None:
        self.deleted_at = datetime.now(timezone.utc)
        self.bump_version()

    def bump_version(self) -> None:
        self.version += 1
        self.updated_at = datetime.now(timezone.utc)
