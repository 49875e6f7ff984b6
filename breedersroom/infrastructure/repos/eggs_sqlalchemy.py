from __future__ import annotations

from collections import defaultdict
from datetime import datetime, timezone
from typing import Iterable
from uuid import UUID

from sqlalchemy import func, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from breedersroom.application.errors import ConflictError
from breedersroom.domain.models.egg import Egg
from breedersroom.domain.value_objects.individual_kind import IndividualKind
from breedersroom.infrastructure.db.orm.clutch import ClutchORM
from breedersroom.infrastructure.db.orm.egg import EggORM
from breedersroom.infrastructure.db.orm.individual import IndividualORM
from breedersroom.infrastructure.db.orm.mating import MatingORM


class EggsSQLAlchemyRepository:
    """Eggs live in two rows: an ``individuals`` row of kind EGG and its ``eggs`` detail."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, individual: IndividualORM, detail: EggORM) -> Egg:
        return Egg(
            id=detail.id,
            owner_id=individual.owner_id,
            clutch_id=detail.clutch_id,
            species=individual.species,
            position=detail.position,
            name=individual.name,
            status=detail.status,
            temperature=detail.temperature,
            hatched_individual_id=detail.hatched_individual_id,
            hatched_on=detail.hatched_on,
            deleted_at=individual.deleted_at,
            created_at=individual.created_at,
            updated_at=detail.updated_at,
            version=detail.version,
        )

    def _joined(self):
        return (
            select(IndividualORM, EggORM)
            .join(EggORM, EggORM.id == IndividualORM.id)
            .where(IndividualORM.deleted_at.is_(None))
        )

    async def add(self, egg: Egg) -> Egg:
        individual = IndividualORM(
            id=egg.id,
            owner_id=egg.owner_id,
            kind=IndividualKind.EGG.value,
            species=egg.species,
            name=egg.name,
            created_at=egg.created_at,
            updated_at=egg.updated_at,
            version=egg.version,
        )
        detail = EggORM(
            id=egg.id,
            clutch_id=egg.clutch_id,
            position=egg.position,
            status=egg.status,
            temperature=egg.temperature,
            updated_at=egg.updated_at,
            version=egg.version,
        )
        self.session.add(individual)
        # Parent row must exist before the detail row references it
        await self.session.flush()
        self.session.add(detail)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError(
                f"Clutch {egg.clutch_id} already has an egg at position {egg.position}"
            ) from exc
        return self._to_domain(individual, detail)

    async def get(self, egg_id: UUID) -> Egg | None:
        stmt = self._joined().where(EggORM.id == egg_id)
        result = await self.session.execute(stmt)
        row = result.one_or_none()
        return self._to_domain(*row) if row else None

    async def update(self, egg: Egg) -> Egg:
        individual = await self.session.get(IndividualORM, egg.id)
        detail = await self.session.get(EggORM, egg.id)
        if not individual or not detail:
            raise ValueError(f"Egg {egg.id} not found")
        individual.name = egg.name
        individual.deleted_at = egg.deleted_at
        individual.updated_at = egg.updated_at
        detail.status = egg.status
        detail.temperature = egg.temperature
        detail.hatched_individual_id = egg.hatched_individual_id
        detail.hatched_on = egg.hatched_on
        detail.updated_at = egg.updated_at
        detail.version = egg.version
        await self.session.flush()
        return self._to_domain(individual, detail)

    async def list_by_clutches(self, clutch_ids: Iterable[UUID]) -> dict[UUID, list[Egg]]:
        ids = set(clutch_ids)
        if not ids:
            return {}
        stmt = self._joined().where(EggORM.clutch_id.in_(ids)).order_by(EggORM.position)
        result = await self.session.execute(stmt)
        grouped: dict[UUID, list[Egg]] = defaultdict(list)
        for individual, detail in result.all():
            grouped[detail.clutch_id].append(self._to_domain(individual, detail))
        return dict(grouped)

    async def count_hatched(self, clutch_id: UUID) -> int:
        stmt = (
            select(func.count())
            .select_from(EggORM)
            .join(IndividualORM, IndividualORM.id == EggORM.id)
            .where(EggORM.clutch_id == clutch_id)
            .where(EggORM.hatched_individual_id.is_not(None))
            .where(IndividualORM.deleted_at.is_(None))
        )
        result = await self.session.execute(stmt)
        return int(result.scalar_one() or 0)

    async def soft_delete_by_clutch(self, clutch_id: UUID) -> list[UUID]:
        live = (
            select(EggORM.id)
            .join(IndividualORM, IndividualORM.id == EggORM.id)
            .where(EggORM.clutch_id == clutch_id)
            .where(IndividualORM.deleted_at.is_(None))
        )
        egg_ids = list((await self.session.execute(live)).scalars())
        if not egg_ids:
            return []
        now = datetime.now(timezone.utc)
        stmt = (
            update(IndividualORM)
            .where(IndividualORM.id.in_(egg_ids))
            .values(deleted_at=now, updated_at=now, version=IndividualORM.version + 1)
            .execution_options(synchronize_session="fetch")
        )
        await self.session.execute(stmt)
        return egg_ids

    async def has_unhatched_for_parent(self, individual_id: UUID) -> bool:
        stmt = (
            select(EggORM.id)
            .join(IndividualORM, IndividualORM.id == EggORM.id)
            .join(ClutchORM, ClutchORM.id == EggORM.clutch_id)
            .join(MatingORM, MatingORM.id == ClutchORM.mating_id)
            .where(or_(MatingORM.father_id == individual_id, MatingORM.mother_id == individual_id))
            .where(MatingORM.deleted_at.is_(None))
            .where(ClutchORM.deleted_at.is_(None))
            .where(IndividualORM.deleted_at.is_(None))
            .where(EggORM.hatched_individual_id.is_(None))
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None
