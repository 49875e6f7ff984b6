from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Mapping
from uuid import UUID

from jose import jwt
from jose.exceptions import JWTError

from breedersroom.application.errors import AuthError

ACCESS_TOKEN_TYPE = "access"


@dataclass(frozen=True, slots=True)
class AccessClaims:
    user_id: UUID
    raw: dict[str, Any]


class JWTService:
    """Issues and verifies the bearer tokens breeders use against the API."""

    def __init__(
        self,
        *,
        secret_key: str,
        algorithm: str,
        access_token_expires_minutes: int,
        issuer: str | None = None,
        audience: str | None = None,
    ) -> None:
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.ttl = timedelta(minutes=access_token_expires_minutes)
        self.issuer = issuer
        self.audience = audience

    def issue(self, user_id: UUID, *, extra_claims: Mapping[str, Any] | None = None) -> str:
        issued_at = datetime.now(timezone.utc)
        claims: dict[str, Any] = dict(extra_claims or {})
        claims.update(
            sub=str(user_id),
            typ=ACCESS_TOKEN_TYPE,
            iat=int(issued_at.timestamp()),
            exp=int((issued_at + self.ttl).timestamp()),
        )
        # Optional registered claims are only set when configured
        for name, value in (("iss", self.issuer), ("aud", self.audience)):
            if value:
                claims[name] = value
        return jwt.encode(claims, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> AccessClaims:
        try:
            raw = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                issuer=self.issuer,
                audience=self.audience,
            )
        except JWTError as exc:
            raise AuthError("Token validation failed") from exc
        if raw.get("typ") != ACCESS_TOKEN_TYPE:
            raise AuthError("Not an access token")
        try:
            user_id = UUID(str(raw["sub"]))
        except (KeyError, ValueError) as exc:
            raise AuthError("Token subject is not a user id") from exc
        return AccessClaims(user_id=user_id, raw=raw)
