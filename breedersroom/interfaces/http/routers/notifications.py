from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query

from breedersroom.application.use_cases.notifications import list_notifications, mark_read
from breedersroom.config.settings import Settings
from breedersroom.infrastructure.auth.context import AuthContext
from breedersroom.interfaces.http.deps import get_app_settings, get_auth_context, get_uow
from breedersroom.interfaces.http.schemas.notifications import (
    NotificationListResponse,
    NotificationResponse,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("", response_model=NotificationListResponse)
async def list_notifications_endpoint(
    unread_only: bool = Query(False),
    limit: int | None = None,
    offset: int = 0,
    context: AuthContext = Depends(get_auth_context),
    settings: Settings = Depends(get_app_settings),
    uow=Depends(get_uow),
):
    result = await list_notifications.execute(
        uow,
        context.user_id,
        unread_only=unread_only,
        limit=settings.clamp_limit(limit),
        offset=max(offset, 0),
    )
    return {"items": result.items, "unread": result.unread}


@router.post("/{notification_id}/read", response_model=NotificationResponse)
async def mark_notification_read_endpoint(
    notification_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    notification = await mark_read.execute(uow, context.user_id, notification_id)
    await uow.commit()
    return notification
