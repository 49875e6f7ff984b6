from __future__ import annotations

from decimal import Decimal

API = "/api/v1"


async def test_reservation_then_sale_removes_individual(client, headers, users):
    alice = headers["alice"]
    created = await client.post(
        f"{API}/individuals", json={"species": "Python regius", "name": "Noodle"}, headers=alice
    )
    individual_id = created.json()["individual"]["id"]

    offer = await client.post(
        f"{API}/adoptions",
        json={"individual_id": individual_id, "buyer_id": str(users["bob"]), "price": "250.00"},
        headers=alice,
    )
    assert offer.status_code == 201
    adoption = offer.json()
    assert adoption["status"] == "ON_RESERVATION"
    assert Decimal(str(adoption["price"])) == Decimal("250")

    reserved = await client.get(f"{API}/individuals/{individual_id}", headers=alice)
    assert reserved.json()["sale_status"] == "ON_RESERVATION"

    listing = await client.get(f"{API}/adoptions", params={"status": "ON_RESERVATION"}, headers=alice)
    assert listing.status_code == 200
    assert [a["id"] for a in listing.json()["items"]] == [adoption["id"]]

    sold = await client.patch(
        f"{API}/adoptions/{adoption['id']}", json={"status": "SOLD"}, headers=alice
    )
    assert sold.status_code == 200
    assert sold.json()["status"] == "SOLD"
    # Untouched fields survive a partial update
    assert sold.json()["buyer_id"] == str(users["bob"])

    gone = await client.get(f"{API}/individuals/{individual_id}", headers=alice)
    assert gone.status_code == 404

    second = await client.post(
        f"{API}/adoptions", json={"individual_id": individual_id}, headers=alice
    )
    assert second.status_code == 404


async def test_buyer_with_on_sale_status_is_rejected(client, headers, users):
    alice = headers["alice"]
    created = await client.post(
        f"{API}/individuals", json={"species": "Python regius"}, headers=alice
    )
    individual_id = created.json()["individual"]["id"]

    response = await client.post(
        f"{API}/adoptions",
        json={"individual_id": individual_id, "buyer_id": str(users["bob"]), "status": "ON_SALE"},
        headers=alice,
    )
    assert response.status_code == 422
    assert response.json()["code"] == "validation_error"

    foreign = await client.post(
        f"{API}/adoptions", json={"individual_id": individual_id}, headers=headers["bob"]
    )
    assert foreign.status_code == 403


async def test_deleting_adoption_resets_sale_status(client, headers):
    alice = headers["alice"]
    created = await client.post(
        f"{API}/individuals", json={"species": "Python regius"}, headers=alice
    )
    individual_id = created.json()["individual"]["id"]
    adoption = (
        await client.post(f"{API}/adoptions", json={"individual_id": individual_id}, headers=alice)
    ).json()
    assert adoption["status"] == "ON_SALE"

    blocked = await client.delete(f"{API}/individuals/{individual_id}", headers=alice)
    assert blocked.status_code == 409

    deleted = await client.delete(f"{API}/adoptions/{adoption['id']}", headers=alice)
    assert deleted.status_code == 204

    individual = await client.get(f"{API}/individuals/{individual_id}", headers=alice)
    assert individual.json()["sale_status"] == "NOT_FOR_SALE"
    missing = await client.get(f"{API}/adoptions/{adoption['id']}", headers=alice)
    assert missing.status_code == 404
