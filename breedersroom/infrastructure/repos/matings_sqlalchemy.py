from __future__ import annotations

from datetime import date
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from breedersroom.application.errors import ConflictError
from breedersroom.domain.models.mating import Mating
from breedersroom.infrastructure.db.orm.mating import MatingORM


class MatingsSQLAlchemyRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: MatingORM) -> Mating:
        return Mating(
            id=orm.id,
            owner_id=orm.owner_id,
            mated_on=orm.mated_on,
            species=orm.species,
            father_id=orm.father_id,
            mother_id=orm.mother_id,
            deleted_at=orm.deleted_at,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
            version=orm.version,
        )

    async def add(self, mating: Mating) -> Mating:
        orm = MatingORM(
            id=mating.id,
            owner_id=mating.owner_id,
            father_id=mating.father_id,
            mother_id=mating.mother_id,
            mated_on=mating.mated_on,
            species=mating.species,
            created_at=mating.created_at,
            updated_at=mating.updated_at,
            version=mating.version,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Mating already recorded for these parents and date") from exc
        return self._to_domain(orm)

    async def get(self, mating_id: UUID, *, for_update: bool = False) -> Mating | None:
        stmt = (
            select(MatingORM)
            .where(MatingORM.id == mating_id)
            .where(MatingORM.deleted_at.is_(None))
        )
        if for_update:
            # Ignored by SQLite, which serialises writers anyway
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def update(self, mating: Mating) -> Mating:
        orm = await self.session.get(MatingORM, mating.id)
        if not orm:
            raise ValueError(f"Mating {mating.id} not found")
        orm.father_id = mating.father_id
        orm.mother_id = mating.mother_id
        orm.mated_on = mating.mated_on
        orm.species = mating.species
        orm.deleted_at = mating.deleted_at
        orm.updated_at = mating.updated_at
        orm.version = mating.version
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Mating already recorded for these parents and date") from exc
        return self._to_domain(orm)

    async def find_duplicate(
        self,
        owner_id: UUID,
        father_id: UUID | None,
        mother_id: UUID | None,
        mated_on: date,
        *,
        exclude_id: UUID | None = None,
    ) -> Mating | None:
        stmt = (
            select(MatingORM)
            .where(MatingORM.owner_id == owner_id)
            .where(MatingORM.mated_on == mated_on)
            .where(MatingORM.deleted_at.is_(None))
        )
        # NULL parents never collide in a unique index, so compare explicitly
        stmt = stmt.where(
            MatingORM.father_id.is_(None) if father_id is None else MatingORM.father_id == father_id
        )
        stmt = stmt.where(
            MatingORM.mother_id.is_(None) if mother_id is None else MatingORM.mother_id == mother_id
        )
        if exclude_id is not None:
            stmt = stmt.where(MatingORM.id != exclude_id)
        result = await self.session.execute(stmt)
        orm = result.scalars().first()
        return self._to_domain(orm) if orm else None

    def _apply_filters(self, stmt, owner_id, father_id, mother_id, species, date_from, date_to):
        stmt = stmt.where(MatingORM.owner_id == owner_id)
        stmt = stmt.where(MatingORM.deleted_at.is_(None))
        if father_id:
            stmt = stmt.where(MatingORM.father_id == father_id)
        if mother_id:
            stmt = stmt.where(MatingORM.mother_id == mother_id)
        if species:
            stmt = stmt.where(MatingORM.species == species)
        if date_from:
            stmt = stmt.where(MatingORM.mated_on >= date_from)
        if date_to:
            stmt = stmt.where(MatingORM.mated_on <= date_to)
        return stmt

    async def list_by_owner(
        self,
        owner_id: UUID,
        father_id: UUID | None = None,
        mother_id: UUID | None = None,
        species: str | None = None,
        date_from: date | None = None,
        date_to: date | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[Mating]:
        stmt = select(MatingORM)
        stmt = self._apply_filters(
            stmt, owner_id, father_id, mother_id, species, date_from, date_to
        )
        stmt = stmt.order_by(MatingORM.mated_on.desc(), MatingORM.created_at.desc())
        stmt = stmt.offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def count_by_owner(
        self,
        owner_id: UUID,
        father_id: UUID | None = None,
        mother_id: UUID | None = None,
        species: str | None = None,
        date_from: date | None = None,
        date_to: date | None = None,
    ) -> int:
        stmt = select(func.count()).select_from(MatingORM)
        stmt = self._apply_filters(
            stmt, owner_id, father_id, mother_id, species, date_from, date_to
        )
        result = await self.session.execute(stmt)
        return int(result.scalar_one() or 0)
