from __future__ import annotations

from uuid import uuid4

API = "/api/v1"


async def test_health_is_public(client):
    response = await client.get(f"{API}/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


async def test_missing_token_is_rejected(client):
    response = await client.get(f"{API}/matings")
    assert response.status_code == 401
    assert response.json()["code"] == "auth_error"


async def test_malformed_header_is_rejected(client):
    response = await client.get(f"{API}/matings", headers={"Authorization": "Token abc"})
    assert response.status_code == 401


async def test_token_for_unknown_user_is_rejected(app, client, users):
    token = app.state.jwt_service.issue(uuid4())
    response = await client.get(f"{API}/matings", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


async def test_missing_individual_is_not_found(client, headers):
    response = await client.get(f"{API}/individuals/{uuid4()}", headers=headers["alice"])
    assert response.status_code == 404
    assert response.json()["code"] == "not_found"


async def test_malformed_payload_uses_validation_error_shape(client, headers):
    response = await client.post(
        f"{API}/matings", json={"mated_on": "not-a-date"}, headers=headers["alice"]
    )
    assert response.status_code == 422
    body = response.json()
    assert body["code"] == "validation_error"
    assert body["details"]["errors"][0]["loc"][-1] == "mated_on"
