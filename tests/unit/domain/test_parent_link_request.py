from __future__ import annotations

from uuid import uuid4

import pytest

from breedersroom.domain.models.parent_link_request import (
    LinkTransitionError,
    ParentLinkRequest,
    next_status,
)
from breedersroom.domain.value_objects.parent_link import ParentLinkStatus


def make_request(**kwargs) -> ParentLinkRequest:
    return ParentLinkRequest.create(
        child_id=uuid4(), parent_id=uuid4(), role="father", requested_by=uuid4(), **kwargs
    )


def test_new_request_is_pending():
    link = make_request()
    assert link.state is ParentLinkStatus.PENDING
    assert link.decided_by is None


def test_self_owned_request_is_created_approved():
    link = make_request(approved=True)
    assert link.state is ParentLinkStatus.APPROVED
    assert link.decided_by == link.requested_by
    assert link.decided_at is not None


def test_approve_records_decider_and_bumps_version():
    link = make_request()
    decider = uuid4()
    link.approve(decider)
    assert link.status == "approved"
    assert link.decided_by == decider
    assert link.version == 2


def test_reject_keeps_reason():
    link = make_request()
    link.reject(uuid4(), "wrong bird")
    assert link.status == "rejected"
    assert link.reject_reason == "wrong bird"


@pytest.mark.parametrize("current", ["approved", "rejected", "cancelled", "deleted"])
def test_no_decision_leaves_a_terminal_state(current):
    for target in ("approved", "rejected", "cancelled"):
        with pytest.raises(LinkTransitionError):
            next_status(current, target)


def test_revoke_marks_deleted_once():
    link = make_request(approved=True)
    link.revoke()
    assert link.state is ParentLinkStatus.DELETED
    with pytest.raises(LinkTransitionError):
        link.revoke()


def test_terminal_and_active_sets():
    assert ParentLinkStatus.PENDING.is_active
    assert ParentLinkStatus.APPROVED.is_active and ParentLinkStatus.APPROVED.is_terminal
    assert not ParentLinkStatus.DELETED.is_active
    assert not ParentLinkStatus.DELETED.is_terminal
