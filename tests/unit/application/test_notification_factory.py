from __future__ import annotations

from datetime import datetime, timezone
from types import SimpleNamespace
from uuid import uuid4

from breedersroom.application.notifications.factory import build_notification
from breedersroom.application.notifications.types import NotificationType


def individual(name: str):
    return SimpleNamespace(id=uuid4(), name=name, species="Pogona vitticeps", owner_id=uuid4())


def test_parent_request_mentions_both_individuals_and_message():
    child, parent = individual("Sunny"), individual("Blaze")
    request_id = uuid4()
    built = build_notification(
        NotificationType.PARENT_REQUEST,
        child=child,
        parent=parent,
        role="father",
        request_id=request_id,
        status="pending",
        message="same line as yours",
        date_time=datetime(2024, 10, 4, 20, 0, tzinfo=timezone.utc),
    )
    assert built.type == NotificationType.PARENT_REQUEST
    assert "Sunny" in built.message and "Blaze" in built.message
    assert built.message.endswith("same line as yours")
    assert built.data["request_id"] == str(request_id)
    assert built.data["status"] == "pending"
    assert built.data["child"]["id"] == str(child.id)
    # 20:00 UTC is already the next morning in Seoul
    assert built.data["date"] == "Sat 05 Oct"


def test_reject_carries_reason():
    built = build_notification(
        NotificationType.PARENT_REJECT,
        child=individual("Sunny"),
        parent=individual("Blaze"),
        role="mother",
        reject_reason="not my line",
    )
    assert built.data["reject_reason"] == "not my line"
    assert "not my line" in built.message


def test_long_names_are_shortened():
    built = build_notification(
        NotificationType.PARENT_ACCEPT,
        child=individual("A" * 40),
        parent=individual("Blaze"),
        role="father",
    )
    assert "A" * 40 not in built.message
    assert "…" in built.message
