from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from uuid import UUID, uuid4


@dataclass(slots=True)
class Mating:
    id: UUID
    owner_id: UUID
    mated_on: date
    species: str
    father_id: UUID | None = None
    mother_id: UUID | None = None

    deleted_at: datetime | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 1

    @classmethod
    def create(
        cls,
        owner_id: UUID,
        mated_on: date,
        species: str,
        father_id: UUID | None = None,
        mother_id: UUID | None = None,
    ) -> Mating:
        if father_id is None and mother_id is None:
            raise ValueError("A mating needs at least one parent")
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            owner_id=owner_id,
            mated_on=mated_on,
            species=species,
            father_id=father_id,
            mother_id=mother_id,
            created_at=now,
            updated_at=now,
            version=1,
        )

    @property
    def parent_ids(self) -> tuple[UUID | None, UUID | None]:
        return self.father_id, self.mother_id

    def reassign(
        self,
        father_id: UUID | None,
        mother_id: UUID | None,
        mated_on: date,
        species: str,
    ) -> None:
        if father_id is None and mother_id is None:
            raise ValueError("A mating needs at least one parent")
        self.father_id = father_id
        self.mother_id = mother_id
        self.mated_on = mated_on
        self.species = species
        self.bump_version()

    def soft_delete(self) -> None:
        self.deleted_at = datetime.now(timezone.utc)
        self.bump_version()

    def bump_version(self) -> None:
        self.version += 1
        self.updated_at = datetime.now(timezone.utc)
