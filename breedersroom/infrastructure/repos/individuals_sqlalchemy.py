from __future__ import annotations

from typing import Iterable
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from breedersroom.domain.models.individual import Individual
from breedersroom.infrastructure.db.orm.individual import IndividualORM


class IndividualsSQLAlchemyRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: IndividualORM) -> Individual:
        return Individual(
            id=orm.id,
            owner_id=orm.owner_id,
            kind=orm.kind,
            species=orm.species,
            name=orm.name,
            sex=orm.sex,
            sale_status=orm.sale_status,
            hatched_on=orm.hatched_on,
            source_clutch_id=orm.source_clutch_id,
            deleted_at=orm.deleted_at,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
            version=orm.version,
        )

    def _to_orm(self, individual: Individual) -> IndividualORM:
        return IndividualORM(
            id=individual.id,
            owner_id=individual.owner_id,
            kind=individual.kind,
            species=individual.species,
            name=individual.name,
            sex=individual.sex,
            sale_status=individual.sale_status,
            hatched_on=individual.hatched_on,
            source_clutch_id=individual.source_clutch_id,
            deleted_at=individual.deleted_at,
            created_at=individual.created_at,
            updated_at=individual.updated_at,
            version=individual.version,
        )

    async def add(self, individual: Individual) -> Individual:
        orm = self._to_orm(individual)
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def get(self, individual_id: UUID, *, include_deleted: bool = False) -> Individual | None:
        stmt = select(IndividualORM).where(IndividualORM.id == individual_id)
        if not include_deleted:
            stmt = stmt.where(IndividualORM.deleted_at.is_(None))
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def get_many(self, individual_ids: Iterable[UUID]) -> dict[UUID, Individual]:
        """Summaries by id, deleted rows included."""
        ids = set(individual_ids)
        if not ids:
            return {}
        stmt = select(IndividualORM).where(IndividualORM.id.in_(ids))
        result = await self.session.execute(stmt)
        return {orm.id: self._to_domain(orm) for orm in result.scalars().all()}

    async def update(self, individual: Individual) -> Individual:
        orm = await self.session.get(IndividualORM, individual.id)
        if not orm:
            raise ValueError(f"Individual {individual.id} not found")
        orm.name = individual.name
        orm.sex = individual.sex
        orm.sale_status = individual.sale_status
        orm.hatched_on = individual.hatched_on
        orm.deleted_at = individual.deleted_at
        orm.updated_at = individual.updated_at
        orm.version = individual.version
        await self.session.flush()
        return self._to_domain(orm)
