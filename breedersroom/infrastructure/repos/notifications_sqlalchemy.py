from __future__ import annotations

from uuid import UUID

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from breedersroom.domain.models.notification import Notification
from breedersroom.infrastructure.db.orm.notification import NotificationORM


class NotificationsSQLAlchemyRepository:
    """Inbox rows; ``data`` is stored as a JSON column and copied on every write."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @staticmethod
    def _to_domain(orm: NotificationORM) -> Notification:
        return Notification(
            id=orm.id,
            user_id=orm.user_id,
            type=orm.type,
            title=orm.title,
            message=orm.message,
            sender_id=orm.sender_id,
            target_id=orm.target_id,
            data=dict(orm.data) if orm.data else None,
            read=orm.read,
            created_at=orm.created_at,
            read_at=orm.read_at,
        )

    def _inbox(self, user_id: UUID, unread_only: bool) -> Select:
        stmt = select(NotificationORM).where(NotificationORM.user_id == user_id)
        if unread_only:
            stmt = stmt.where(NotificationORM.read.is_(False))
        return stmt

    async def add(self, notification: Notification) -> Notification:
        orm = NotificationORM(
            id=notification.id,
            user_id=notification.user_id,
            sender_id=notification.sender_id,
            type=notification.type,
            target_id=notification.target_id,
            title=notification.title,
            message=notification.message,
            data=dict(notification.data) if notification.data else None,
            read=notification.read,
            created_at=notification.created_at,
            read_at=notification.read_at,
        )
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def get(self, notification_id: UUID) -> Notification | None:
        orm = await self.session.get(NotificationORM, notification_id)
        return self._to_domain(orm) if orm else None

    async def update(self, notification: Notification) -> Notification:
        orm = await self.session.get(NotificationORM, notification.id)
        if orm is None:
            raise ValueError(f"Notification {notification.id} not found")
        # Reassign so the JSON column registers the change
        orm.data = dict(notification.data) if notification.data else None
        orm.read = notification.read
        orm.read_at = notification.read_at
        await self.session.flush()
        return self._to_domain(orm)

    async def find_latest_for_target(self, type: str, target_id: UUID) -> Notification | None:
        stmt = (
            select(NotificationORM)
            .where(NotificationORM.type == type, NotificationORM.target_id == target_id)
            .order_by(NotificationORM.created_at.desc())
            .limit(1)
        )
        orm = (await self.session.execute(stmt)).scalars().first()
        return self._to_domain(orm) if orm else None

    async def list_by_user(
        self,
        user_id: UUID,
        *,
        unread_only: bool = False,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Notification]:
        stmt = (
            self._inbox(user_id, unread_only)
            .order_by(NotificationORM.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars()]

    async def count_unread(self, user_id: UUID) -> int:
        stmt = select(func.count()).select_from(self._inbox(user_id, True).subquery())
        return int((await self.session.execute(stmt)).scalar_one())
