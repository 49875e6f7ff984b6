from __future__ import annotations

import pytest

from breedersroom.application.errors import NotFound
from breedersroom.application.notifications.trigger import notify
from breedersroom.application.notifications.types import NotificationType
from breedersroom.application.use_cases.notifications import list_notifications, mark_read


async def test_mark_read_updates_unread_count(uow, users):
    first = await notify(uow, users["bob"], NotificationType.PARENT_REQUEST, role="father")
    await notify(uow, users["bob"], NotificationType.PARENT_CANCEL, role="father")

    before = await list_notifications.execute(uow, users["bob"])
    read = await mark_read.execute(uow, users["bob"], first.id)
    after = await list_notifications.execute(uow, users["bob"], unread_only=True)

    assert before.unread == 2
    assert read.read is True
    assert read.read_at is not None
    assert after.unread == 1
    assert [n.type for n in after.items] == ["parent_cancel"]


async def test_other_users_notifications_are_hidden(uow, users):
    note = await notify(uow, users["bob"], NotificationType.PARENT_REQUEST)

    with pytest.raises(NotFound):
        await mark_read.execute(uow, users["alice"], note.id)
    assert (await list_notifications.execute(uow, users["alice"])).items == []
