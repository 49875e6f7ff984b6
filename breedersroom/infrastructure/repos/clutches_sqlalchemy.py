from __future__ import annotations

from collections import defaultdict
from typing import Iterable
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from breedersroom.application.errors import ConflictError
from breedersroom.domain.models.clutch import Clutch
from breedersroom.infrastructure.db.orm.clutch import ClutchORM


class ClutchesSQLAlchemyRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: ClutchORM) -> Clutch:
        return Clutch(
            id=orm.id,
            owner_id=orm.owner_id,
            species=orm.species,
            laid_on=orm.laid_on,
            clutch_order=orm.clutch_order,
            mating_id=orm.mating_id,
            egg_count=orm.egg_count,
            temperature=orm.temperature,
            deleted_at=orm.deleted_at,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
            version=orm.version,
        )

    async def add(self, clutch: Clutch) -> Clutch:
        orm = ClutchORM(
            id=clutch.id,
            mating_id=clutch.mating_id,
            owner_id=clutch.owner_id,
            species=clutch.species,
            laid_on=clutch.laid_on,
            clutch_order=clutch.clutch_order,
            egg_count=clutch.egg_count,
            temperature=clutch.temperature,
            created_at=clutch.created_at,
            updated_at=clutch.updated_at,
            version=clutch.version,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError(
                f"Clutch order {clutch.clutch_order} or date {clutch.laid_on.isoformat()} "
                "already taken for this mating"
            ) from exc
        return self._to_domain(orm)

    async def get(self, clutch_id: UUID) -> Clutch | None:
        stmt = (
            select(ClutchORM)
            .where(ClutchORM.id == clutch_id)
            .where(ClutchORM.deleted_at.is_(None))
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def update(self, clutch: Clutch) -> Clutch:
        orm = await self.session.get(ClutchORM, clutch.id)
        if not orm:
            raise ValueError(f"Clutch {clutch.id} not found")
        orm.laid_on = clutch.laid_on
        orm.egg_count = clutch.egg_count
        orm.temperature = clutch.temperature
        orm.deleted_at = clutch.deleted_at
        orm.updated_at = clutch.updated_at
        orm.version = clutch.version
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError(
                f"Clutch date {clutch.laid_on.isoformat()} already taken for this mating"
            ) from exc
        return self._to_domain(orm)

    async def list_by_mating(self, mating_id: UUID) -> list[Clutch]:
        stmt = (
            select(ClutchORM)
            .where(ClutchORM.mating_id == mating_id)
            .where(ClutchORM.deleted_at.is_(None))
            .order_by(ClutchORM.clutch_order)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def list_by_matings(self, mating_ids: Iterable[UUID]) -> dict[UUID, list[Clutch]]:
        ids = set(mating_ids)
        if not ids:
            return {}
        stmt = (
            select(ClutchORM)
            .where(ClutchORM.mating_id.in_(ids))
            .where(ClutchORM.deleted_at.is_(None))
            .order_by(ClutchORM.clutch_order)
        )
        result = await self.session.execute(stmt)
        grouped: dict[UUID, list[Clutch]] = defaultdict(list)
        for orm in result.scalars().all():
            grouped[orm.mating_id].append(self._to_domain(orm))
        return dict(grouped)
