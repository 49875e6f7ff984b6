from __future__ import annotations


class NotificationType:
    """Canonical notification type names used across backend/frontend."""

    PARENT_REQUEST = "parent_request"
    PARENT_ACCEPT = "parent_accept"
    PARENT_REJECT = "parent_reject"
    PARENT_CANCEL = "parent_cancel"


ALL_TYPES = {
    NotificationType.PARENT_REQUEST,
    NotificationType.PARENT_ACCEPT,
    NotificationType.PARENT_REJECT,
    NotificationType.PARENT_CANCEL,
}

# Decision outcome -> notification sent to the other party
DECISION_TYPES = {
    "approved": NotificationType.PARENT_ACCEPT,
    "rejected": NotificationType.PARENT_REJECT,
    "cancelled": NotificationType.PARENT_CANCEL,
}
