from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from breedersroom.utils.datetime_tz import format_day_date

from .types import NotificationType


@dataclass
class BuiltNotification:
    type: str
    title: str
    message: str
    data: dict[str, Any]


def _short_label(s: str | None, *, max_len: int = 24) -> str | None:
    """Shorten individual names to a safe length with ellipsis."""
    if not s:
        return s
    s = str(s)
    return s if len(s) <= max_len else (s[: max(0, max_len - 1)] + "…")


def _summary(value: Any) -> dict[str, Any] | None:
    if value is None:
        return None
    return {
        "id": str(value.id),
        "name": value.name,
        "species": value.species,
        "owner_id": str(value.owner_id),
    }


def build_notification(ntype: str, **kwargs: Any) -> BuiltNotification:
    """
    Central place to build notification title/message/data from templates.
    Keep strings easy to find and translate.
    """
    child = kwargs.get("child")
    parent = kwargs.get("parent")
    role: str = kwargs.get("role", "parent")
    child_label = _short_label(child.name if child else None) or "your individual"
    parent_label = _short_label(parent.name if parent else None) or "an individual"
    data = {
        "request_id": str(kwargs["request_id"]) if kwargs.get("request_id") else None,
        "child": _summary(child),
        "parent": _summary(parent),
        "role": role,
        "status": kwargs.get("status"),
        "message": kwargs.get("message"),
        "date": format_day_date(kwargs.get("date_time")) or None,
    }

    if ntype == NotificationType.PARENT_REQUEST:
        title = "🧬 New parent link request"
        message = f"{child_label} wants {parent_label} registered as its {role}"
        if kwargs.get("message"):
            message += f": {kwargs['message']}"
        return BuiltNotification(ntype, title, message, data)

    if ntype == NotificationType.PARENT_ACCEPT:
        title = "✅ Parent link approved"
        message = f"{parent_label} is now the {role} of {child_label}"
        return BuiltNotification(ntype, title, message, data)

    if ntype == NotificationType.PARENT_REJECT:
        reason = kwargs.get("reject_reason")
        title = "❌ Parent link rejected"
        message = f"{parent_label} was not accepted as the {role} of {child_label}"
        if reason:
            message += f" • {reason}"
        data["reject_reason"] = reason
        return BuiltNotification(ntype, title, message, data)

    if ntype == NotificationType.PARENT_CANCEL:
        title = "↩️ Parent link request cancelled"
        message = f"The request to register {parent_label} as {role} of {child_label} was withdrawn"
        return BuiltNotification(ntype, title, message, data)

    # Fallback to pass-through
    return BuiltNotification(
        ntype,
        title=str(kwargs.get("title", "Notification")),
        message=str(kwargs.get("message", "")),
        data=dict(kwargs.get("data", {})),
    )
