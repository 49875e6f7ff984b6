from __future__ import annotations

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from breedersroom.application.errors import ConflictError
from breedersroom.domain.models.adoption import Adoption
from breedersroom.domain.value_objects.sale_status import SaleStatus
from breedersroom.infrastructure.db.orm.adoption import AdoptionORM


class AdoptionsSQLAlchemyRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: AdoptionORM) -> Adoption:
        return Adoption(
            id=orm.id,
            individual_id=orm.individual_id,
            seller_id=orm.seller_id,
            status=orm.status,
            buyer_id=orm.buyer_id,
            price=orm.price,
            adopted_on=orm.adopted_on,
            memo=orm.memo,
            location=orm.location,
            deleted_at=orm.deleted_at,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
            version=orm.version,
        )

    def _to_orm(self, adoption: Adoption) -> AdoptionORM:
        return AdoptionORM(
            id=adoption.id,
            individual_id=adoption.individual_id,
            seller_id=adoption.seller_id,
            buyer_id=adoption.buyer_id,
            price=adoption.price,
            adopted_on=adoption.adopted_on,
            memo=adoption.memo,
            location=adoption.location,
            status=adoption.status,
            deleted_at=adoption.deleted_at,
            created_at=adoption.created_at,
            updated_at=adoption.updated_at,
            version=adoption.version,
        )

    async def add(self, adoption: Adoption) -> Adoption:
        orm = self._to_orm(adoption)
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError(
                f"Individual {adoption.individual_id} already has an open adoption"
            ) from exc
        return self._to_domain(orm)

    async def get(self, adoption_id: UUID) -> Adoption | None:
        stmt = (
            select(AdoptionORM)
            .where(AdoptionORM.id == adoption_id)
            .where(AdoptionORM.deleted_at.is_(None))
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def update(self, adoption: Adoption) -> Adoption:
        orm = await self.session.get(AdoptionORM, adoption.id)
        if not orm:
            raise ValueError(f"Adoption {adoption.id} not found")
        orm.buyer_id = adoption.buyer_id
        orm.price = adoption.price
        orm.adopted_on = adoption.adopted_on
        orm.memo = adoption.memo
        orm.location = adoption.location
        orm.status = adoption.status
        orm.deleted_at = adoption.deleted_at
        orm.updated_at = adoption.updated_at
        orm.version = adoption.version
        await self.session.flush()
        return self._to_domain(orm)

    async def get_active_for_individual(self, individual_id: UUID) -> Adoption | None:
        stmt = (
            select(AdoptionORM)
            .where(AdoptionORM.individual_id == individual_id)
            .where(AdoptionORM.deleted_at.is_(None))
            .where(AdoptionORM.status != SaleStatus.SOLD.value)
        )
        result = await self.session.execute(stmt)
        orm = result.scalars().first()
        return self._to_domain(orm) if orm else None

    async def list_by_seller(
        self,
        seller_id: UUID,
        status: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[Adoption]:
        stmt = (
            select(AdoptionORM)
            .where(AdoptionORM.seller_id == seller_id)
            .where(AdoptionORM.deleted_at.is_(None))
        )
        if status:
            stmt = stmt.where(AdoptionORM.status == status)
        stmt = stmt.order_by(AdoptionORM.created_at.desc()).offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def count_by_seller(self, seller_id: UUID, status: str | None = None) -> int:
        stmt = (
            select(func.count())
            .select_from(AdoptionORM)
            .where(AdoptionORM.seller_id == seller_id)
            .where(AdoptionORM.deleted_at.is_(None))
        )
        if status:
            stmt = stmt.where(AdoptionORM.status == status)
        result = await self.session.execute(stmt)
        return int(result.scalar_one() or 0)
