from __future__ import annotations

from uuid import uuid4

import pytest
from jose import jwt

from breedersroom.application.errors import AuthError
from breedersroom.infrastructure.auth.jwt_service import JWTService


def make_service(**overrides) -> JWTService:
    options = dict(
        secret_key="unit-secret",
        algorithm="HS256",
        access_token_expires_minutes=5,
        issuer="breedersroom",
        audience="breedersroom-api",
    )
    options.update(overrides)
    return JWTService(**options)


def test_issued_token_round_trips_user_and_extra_claims():
    service = make_service()
    user_id = uuid4()

    claims = service.verify(service.issue(user_id, extra_claims={"email": "a@b.test"}))

    assert claims.user_id == user_id
    assert claims.raw["email"] == "a@b.test"
    assert claims.raw["iss"] == "breedersroom"


def test_extra_claims_cannot_override_subject():
    service = make_service()
    user_id = uuid4()

    claims = service.verify(service.issue(user_id, extra_claims={"sub": "someone-else"}))

    assert claims.user_id == user_id


def test_token_signed_with_other_key_is_rejected():
    token = make_service(secret_key="other").issue(uuid4())

    with pytest.raises(AuthError):
        make_service().verify(token)


def test_non_access_token_is_rejected():
    service = make_service(issuer=None, audience=None)
    token = jwt.encode({"sub": str(uuid4()), "typ": "refresh"}, "unit-secret", algorithm="HS256")

    with pytest.raises(AuthError, match="Not an access token"):
        service.verify(token)


def test_subject_must_be_a_uuid():
    service = make_service(issuer=None, audience=None)
    token = jwt.encode({"sub": "breeder-7", "typ": "access"}, "unit-secret", algorithm="HS256")

    with pytest.raises(AuthError):
        service.verify(token)
