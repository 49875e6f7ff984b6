from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from breedersroom.application.errors import ConflictError
from breedersroom.domain.models.parent_link_request import ParentLinkRequest
from breedersroom.domain.value_objects.parent_link import (
    ACTIVE_LINK_STATUSES,
    ParentLinkStatus,
)
from breedersroom.infrastructure.db.orm.parent_link import ParentLinkRequestORM

_ACTIVE = [s.value for s in ACTIVE_LINK_STATUSES]


class ParentLinksSQLAlchemyRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: ParentLinkRequestORM) -> ParentLinkRequest:
        return ParentLinkRequest(
            id=orm.id,
            child_id=orm.child_id,
            parent_id=orm.parent_id,
            role=orm.role,
            status=orm.status,
            message=orm.message,
            reject_reason=orm.reject_reason,
            requested_by=orm.requested_by,
            decided_by=orm.decided_by,
            decided_at=orm.decided_at,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
            version=orm.version,
        )

    async def add(self, link: ParentLinkRequest) -> ParentLinkRequest:
        orm = ParentLinkRequestORM(
            id=link.id,
            child_id=link.child_id,
            parent_id=link.parent_id,
            role=link.role,
            status=link.status,
            message=link.message,
            reject_reason=link.reject_reason,
            requested_by=link.requested_by,
            decided_by=link.decided_by,
            decided_at=link.decided_at,
            created_at=link.created_at,
            updated_at=link.updated_at,
            version=link.version,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError(
                f"Individual {link.child_id} already has an active {link.role} link request"
            ) from exc
        return self._to_domain(orm)

    async def get(self, link_id: UUID) -> ParentLinkRequest | None:
        orm = await self.session.get(ParentLinkRequestORM, link_id)
        return self._to_domain(orm) if orm else None

    async def update(self, link: ParentLinkRequest) -> ParentLinkRequest:
        orm = await self.session.get(ParentLinkRequestORM, link.id)
        if not orm:
            raise ValueError(f"Parent link request {link.id} not found")
        orm.status = link.status
        orm.reject_reason = link.reject_reason
        orm.decided_by = link.decided_by
        orm.decided_at = link.decided_at
        orm.updated_at = link.updated_at
        orm.version = link.version
        await self.session.flush()
        return self._to_domain(orm)

    async def find_pending(
        self, child_id: UUID, parent_id: UUID, role: str
    ) -> ParentLinkRequest | None:
        stmt = select(ParentLinkRequestORM).where(
            ParentLinkRequestORM.child_id == child_id,
            ParentLinkRequestORM.parent_id == parent_id,
            ParentLinkRequestORM.role == role,
            ParentLinkRequestORM.status == ParentLinkStatus.PENDING.value,
        )
        result = await self.session.execute(stmt)
        orm = result.scalars().first()
        return self._to_domain(orm) if orm else None

    async def find_active(self, child_id: UUID, role: str) -> ParentLinkRequest | None:
        stmt = (
            select(ParentLinkRequestORM)
            .where(ParentLinkRequestORM.child_id == child_id)
            .where(ParentLinkRequestORM.role == role)
            .where(ParentLinkRequestORM.status.in_(_ACTIVE))
            .order_by(ParentLinkRequestORM.created_at.desc())
        )
        result = await self.session.execute(stmt)
        orm = result.scalars().first()
        return self._to_domain(orm) if orm else None

    async def list_active_for_child(self, child_id: UUID) -> list[ParentLinkRequest]:
        """Pending and approved links, newest first."""
        stmt = (
            select(ParentLinkRequestORM)
            .where(ParentLinkRequestORM.child_id == child_id)
            .where(ParentLinkRequestORM.status.in_(_ACTIVE))
            .order_by(ParentLinkRequestORM.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def list_for_child(self, child_id: UUID) -> list[ParentLinkRequest]:
        stmt = (
            select(ParentLinkRequestORM)
            .where(ParentLinkRequestORM.child_id == child_id)
            .order_by(ParentLinkRequestORM.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def mark_deleted_for_individual(self, individual_id: UUID) -> int:
        now = datetime.now(timezone.utc)
        stmt = (
            update(ParentLinkRequestORM)
            .where(
                or_(
                    ParentLinkRequestORM.child_id == individual_id,
                    ParentLinkRequestORM.parent_id == individual_id,
                )
            )
            .where(ParentLinkRequestORM.status != ParentLinkStatus.DELETED.value)
            .values(
                status=ParentLinkStatus.DELETED.value,
                updated_at=now,
                version=ParentLinkRequestORM.version + 1,
            )
            .execution_options(synchronize_session="fetch")
        )
        result = await self.session.execute(stmt)
        return int(result.rowcount or 0)
