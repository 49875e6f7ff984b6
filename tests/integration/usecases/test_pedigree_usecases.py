from __future__ import annotations

from uuid import uuid4

import pytest

from breedersroom.application.errors import (
    ConflictError,
    InvalidTransition,
    NotFound,
    PermissionDenied,
    ValidationError,
)
from breedersroom.application.events.models import NotificationCreatedEvent
from breedersroom.application.use_cases.individuals import delete_individual
from breedersroom.application.use_cases.pedigree import (
    decide_link,
    propose_link,
    resolve_parents,
    unlink_parent,
)
from breedersroom.domain.models.individual import Individual
from breedersroom.domain.models.parent_link_request import ParentLinkRequest
from breedersroom.domain.value_objects.individual_kind import IndividualKind

SPECIES = "Pogona vitticeps"


async def add_pet(uow, owner_id, name, *, sex=None, kind=IndividualKind.PET.value):
    return await uow.individuals.add(
        Individual.create(owner_id=owner_id, species=SPECIES, name=name, sex=sex, kind=kind)
    )


async def propose(uow, requester_id, child, parent, role="father", message=None):
    return await propose_link.execute(
        uow,
        requester_id,
        propose_link.ProposeLinkInput(
            child_id=child.id, parent_id=parent.id, role=role, message=message
        ),
    )


async def test_cross_owner_proposal_is_pending_and_notifies_parent_owner(uow, users):
    child = await add_pet(uow, users["alice"], "Sunny")
    sire = await add_pet(uow, users["bob"], "Blaze", sex="M")

    link = await propose(uow, users["alice"], child, sire, message="same morph")

    assert link.status == "pending"
    inbox = await uow.notifications.list_by_user(users["bob"])
    assert [n.type for n in inbox] == ["parent_request"]
    assert inbox[0].target_id == link.id
    assert inbox[0].sender_id == users["alice"]
    assert inbox[0].data["status"] == "pending"
    events = uow.drain_events()
    assert isinstance(events[0], NotificationCreatedEvent)
    assert events[0].user_id == users["bob"]


async def test_self_owned_proposal_is_approved_without_notification(uow, users):
    child = await add_pet(uow, users["alice"], "Sunny")
    dam = await add_pet(uow, users["alice"], "Ember", sex="F")

    link = await propose(uow, users["alice"], child, dam, role="mother")

    assert link.status == "approved"
    assert link.decided_by == users["alice"]
    assert await uow.notifications.list_by_user(users["alice"]) == []
    assert uow.drain_events() == []


async def test_duplicate_pending_and_filled_role_conflict(uow, users):
    child = await add_pet(uow, users["alice"], "Sunny")
    sire = await add_pet(uow, users["bob"], "Blaze")
    other = await add_pet(uow, users["carol"], "Rex")
    await propose(uow, users["alice"], child, sire)

    with pytest.raises(ConflictError):
        await propose(uow, users["alice"], child, sire)
    with pytest.raises(ConflictError):
        await propose(uow, users["alice"], child, other)


async def test_database_rejects_second_pending_request(uow, users):
    child = await add_pet(uow, users["alice"], "Sunny")
    sire = await add_pet(uow, users["bob"], "Blaze")
    await uow.parent_links.add(
        ParentLinkRequest.create(child.id, sire.id, "father", requested_by=users["alice"])
    )

    with pytest.raises(ConflictError):
        await uow.parent_links.add(
            ParentLinkRequest.create(child.id, sire.id, "father", requested_by=users["alice"])
        )


async def test_database_allows_one_active_link_per_role(uow, users):
    child = await add_pet(uow, users["alice"], "Sunny")
    sire = await add_pet(uow, users["bob"], "Blaze")
    other = await add_pet(uow, users["carol"], "Rex")
    stale = ParentLinkRequest.create(child.id, other.id, "father", requested_by=users["alice"])
    stale.reject(users["carol"], "not mine")
    await uow.parent_links.add(stale)
    # Decided requests fall outside the partial indexes
    await uow.parent_links.add(
        ParentLinkRequest.create(child.id, sire.id, "father", approved=True)
    )

    with pytest.raises(ConflictError):
        await uow.parent_links.add(
            ParentLinkRequest.create(child.id, other.id, "father", approved=True)
        )


async def test_proposal_guards(uow, users):
    child = await add_pet(uow, users["alice"], "Sunny")
    hen = await add_pet(uow, users["bob"], "Ember", sex="F")
    egg = await add_pet(uow, users["bob"], "egg", kind=IndividualKind.EGG.value)

    with pytest.raises(ValidationError):
        await propose(uow, users["alice"], child, child)
    with pytest.raises(ValidationError):
        await propose(uow, users["alice"], child, hen, role="father")
    with pytest.raises(ValidationError):
        await propose(uow, users["alice"], child, egg)
    with pytest.raises(PermissionDenied):
        await propose(uow, users["carol"], child, hen, role="mother")


async def test_approval_updates_request_notification_and_informs_requester(uow, users):
    child = await add_pet(uow, users["alice"], "Sunny")
    sire = await add_pet(uow, users["bob"], "Blaze")
    link = await propose(uow, users["alice"], child, sire)

    decided = await decide_link.execute(
        uow, users["bob"], link.id, decide_link.DecideLinkInput(status="approved")
    )

    assert decided.status == "approved"
    assert decided.decided_by == users["bob"]
    request_note = await uow.notifications.find_latest_for_target("parent_request", link.id)
    assert request_note.data["status"] == "approved"
    alice_inbox = await uow.notifications.list_by_user(users["alice"])
    assert [n.type for n in alice_inbox] == ["parent_accept"]


async def test_decision_permissions(uow, users):
    child = await add_pet(uow, users["alice"], "Sunny")
    sire = await add_pet(uow, users["bob"], "Blaze")
    link = await propose(uow, users["alice"], child, sire)

    with pytest.raises(PermissionDenied):
        await decide_link.execute(
            uow, users["carol"], link.id, decide_link.DecideLinkInput(status="approved")
        )
    with pytest.raises(PermissionDenied):
        await decide_link.execute(
            uow, users["alice"], link.id, decide_link.DecideLinkInput(status="approved")
        )
    with pytest.raises(PermissionDenied):
        await decide_link.execute(
            uow, users["bob"], link.id, decide_link.DecideLinkInput(status="cancelled")
        )
    with pytest.raises(ValidationError):
        await decide_link.execute(
            uow, users["bob"], link.id, decide_link.DecideLinkInput(status="pending")
        )


@pytest.mark.parametrize("first", ["approved", "rejected"])
@pytest.mark.parametrize("second", ["approved", "rejected", "cancelled"])
async def test_terminal_requests_cannot_be_decided_again(uow, users, first, second):
    child = await add_pet(uow, users["alice"], "Sunny")
    sire = await add_pet(uow, users["bob"], "Blaze")
    link = await propose(uow, users["alice"], child, sire)
    await decide_link.execute(uow, users["bob"], link.id, decide_link.DecideLinkInput(status=first))

    actor = users["alice"] if second == "cancelled" else users["bob"]
    with pytest.raises(InvalidTransition, match=f"already {first}"):
        await decide_link.execute(uow, actor, link.id, decide_link.DecideLinkInput(status=second))


async def test_reject_keeps_reason_and_notifies_requester(uow, users):
    child = await add_pet(uow, users["alice"], "Sunny")
    sire = await add_pet(uow, users["bob"], "Blaze")
    link = await propose(uow, users["alice"], child, sire)

    decided = await decide_link.execute(
        uow,
        users["bob"],
        link.id,
        decide_link.DecideLinkInput(status="rejected", reject_reason="different locale"),
    )

    assert decided.reject_reason == "different locale"
    alice_inbox = await uow.notifications.list_by_user(users["alice"])
    assert alice_inbox[0].type == "parent_reject"
    assert alice_inbox[0].data["reject_reason"] == "different locale"


async def test_unknown_request_is_not_found(uow, users):
    with pytest.raises(NotFound):
        await decide_link.execute(
            uow, users["bob"], uuid4(), decide_link.DecideLinkInput(status="approved")
        )


async def test_unlink_cancels_pending_and_deletes_approved(uow, users):
    child = await add_pet(uow, users["alice"], "Sunny")
    sire = await add_pet(uow, users["bob"], "Blaze")
    dam = await add_pet(uow, users["alice"], "Ember")
    pending = await propose(uow, users["alice"], child, sire)
    approved = await propose(uow, users["alice"], child, dam, role="mother")

    cancelled = await unlink_parent.execute(uow, users["alice"], child.id, "father")
    deleted = await unlink_parent.execute(uow, users["alice"], child.id, "mother")

    assert (cancelled.id, cancelled.status) == (pending.id, "cancelled")
    assert (deleted.id, deleted.status) == (approved.id, "deleted")
    bob_inbox = await uow.notifications.list_by_user(users["bob"])
    assert {n.type for n in bob_inbox} == {"parent_request", "parent_cancel"}
    with pytest.raises(NotFound):
        await unlink_parent.execute(uow, users["alice"], child.id, "father")


async def test_pending_links_are_private_to_child_owner(uow, users):
    child = await add_pet(uow, users["alice"], "Sunny")
    sire = await add_pet(uow, users["bob"], "Blaze")
    dam = await add_pet(uow, users["alice"], "Ember")
    await propose(uow, users["alice"], child, sire)
    await propose(uow, users["alice"], child, dam, role="mother")

    own_view = await resolve_parents.execute(uow, child.id, users["alice"])
    public_view = await resolve_parents.execute(uow, child.id, users["carol"])

    assert own_view.father.status == "pending"
    assert own_view.father.parent.name == "Blaze"
    assert own_view.mother.status == "approved"
    assert public_view.father is None
    assert public_view.mother.parent.id == dam.id


async def test_deleting_individual_marks_its_links_deleted(uow, users):
    child = await add_pet(uow, users["alice"], "Sunny")
    grandchild = await add_pet(uow, users["carol"], "Pip")
    dam = await add_pet(uow, users["alice"], "Ember")
    as_child = await propose(uow, users["alice"], child, dam, role="mother")
    as_parent = await propose(uow, users["carol"], grandchild, child)

    await delete_individual.execute(uow, users["alice"], child.id)

    for link_id in (as_child.id, as_parent.id):
        assert (await uow.parent_links.get(link_id)).status == "deleted"
    assert await uow.individuals.get(child.id) is None
    # The freed role can be proposed again
    assert await uow.parent_links.find_active(grandchild.id, "father") is None
