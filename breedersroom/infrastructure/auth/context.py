from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from breedersroom.application.errors import AuthError
from breedersroom.infrastructure.db.orm.user import UserORM


@dataclass(slots=True)
class AuthContext:
    user_id: UUID
    email: str
    claims: dict[str, Any]


async def load_active_user(session: AsyncSession, user_id: UUID) -> UserORM:
    stmt = select(UserORM).where(UserORM.id == user_id)
    result = await session.execute(stmt)
    user = result.scalar_one_or_none()
    if user is None or not user.is_active:
        raise AuthError("User is inactive or missing")
    return user
