from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from uuid import UUID, uuid4

from breedersroom.domain.value_objects.egg_status import EggStatus


class EggAlreadyHatched(ValueError):
    def __init__(self, egg_id: UUID) -> None:
        super().__init__(f"Egg {egg_id} has already hatched")
        self.egg_id = egg_id


@dataclass(slots=True)
class Egg:
    """Egg-stage individual: shares its id with an individuals row of kind EGG."""

    id: UUID
    owner_id: UUID
    clutch_id: UUID
    species: str
    position: int
    name: str | None = None
    status: str = EggStatus.FERTILIZED.value
    temperature: float | None = None
    hatched_individual_id: UUID | None = None
    hatched_on: date | None = None

    deleted_at: datetime | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 1

    @classmethod
    def create(
        cls,
        owner_id: UUID,
        clutch_id: UUID,
        species: str,
        position: int,
        name: str | None = None,
        status: str = EggStatus.FERTILIZED.value,
        temperature: float | None = None,
    ) -> Egg:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            owner_id=owner_id,
            clutch_id=clutch_id,
            species=species,
            position=position,
            name=name,
            status=status,
            temperature=temperature,
            created_at=now,
            updated_at=now,
            version=1,
        )

    @property
    def is_hatched(self) -> bool:
        return self.hatched_individual_id is not None

    def change_status(self, status: str) -> None:
        if self.is_hatched:
            raise EggAlreadyHatched(self.id)
        self.status = EggStatus(status).value
        self.bump_version()

    def change_temperature(self, temperature: float | None) -> None:
        if self.is_hatched:
            raise EggAlreadyHatched(self.id)
        self.temperature = temperature
        self.bump_version()

    def mark_hatched(self, individual_id: UUID, hatched_on: date) -> None:
        if self.is_hatched:
            raise EggAlreadyHatched(self.id)
        self.hatched_individual_id = individual_id
        self.hatched_on = hatched_on
        self.bump_version()

    def soft_delete(self) -> None:
        self.deleted_at = datetime.now(timezone.utc)
        self.bump_version()

    def bump_version(self) -> None:
        self.version += 1
        self.updated_at = datetime.now(timezone.utc)
