from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from uuid import UUID, uuid4


@dataclass(slots=True)
class Clutch:
    """A dated laying event of a mating; ``clutch_order`` is 1-based."""

    id: UUID
    owner_id: UUID
    species: str
    laid_on: date
    clutch_order: int
    mating_id: UUID | None = None  # None only for rows predating matings
    egg_count: int | None = None
    temperature: float | None = None

    deleted_at: datetime | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 1

    @classmethod
    def create(
        cls,
        owner_id: UUID,
        species: str,
        laid_on: date,
        clutch_order: int,
        mating_id: UUID | None = None,
        egg_count: int | None = None,
        temperature: float | None = None,
    ) -> Clutch:
        if clutch_order < 1:
            raise ValueError("clutch order must be positive")
        if egg_count is not None and egg_count < 0:
            raise ValueError("egg count cannot be negative")
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            owner_id=owner_id,
            species=species,
            laid_on=laid_on,
            clutch_order=clutch_order,
            mating_id=mating_id,
            egg_count=egg_count,
            temperature=temperature,
            created_at=now,
            updated_at=now,
            version=1,
        )

    def move_to(self, laid_on: date) -> None:
        self.laid_on = laid_on
        self.bump_version()

    def soft_delete(self) -> None:
        self.deleted_at = datetime.now(timezone.utc)
        self.bump_version()

    def bump_version(self) -> None:
        self.version += 1
        self.updated_at = datetime.now(timezone.utc)
