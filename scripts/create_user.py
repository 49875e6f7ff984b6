#!/usr/bin/env python3
"""
Create a breeder account (or reuse an existing one) and print an access token.

Accounts are provisioned by the identity service in production; this script is
for local development and smoke tests.

Usage:
  python scripts/create_user.py --email breeder@example.com [--name "Jane"]
"""

import argparse
import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from breedersroom.config.settings import get_settings  # noqa: E402
from breedersroom.domain.models.user import User  # noqa: E402
from breedersroom.infrastructure.auth.jwt_service import JWTService  # noqa: E402
from breedersroom.infrastructure.db.session import (  # noqa: E402
    SQLAlchemyUnitOfWork,
    create_engine,
    create_session_factory,
)


async def create_user(email: str, name: str | None) -> None:
    settings = get_settings()
    engine = create_engine(settings.database_url)
    session_factory = create_session_factory(engine)
    jwt_service = JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        algorithm=settings.jwt_algorithm,
        access_token_expires_minutes=settings.jwt_access_token_expires_minutes,
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
    )

    try:
        uow = SQLAlchemyUnitOfWork(session_factory)
        async with uow:
            user = await uow.users.get_by_email(email)
            if user:
                print(f"User {email} already exists (ID: {user.id})")
            else:
                user = await uow.users.add(User.create(email, name))
                await uow.commit()
                print(f"Created user {user.email} (ID: {user.id})")

        token = jwt_service.issue(user.id, extra_claims={"email": user.email})
        print("\nAccess token:")
        print(f"  {token}")
    finally:
        await engine.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create a breeder account")
    parser.add_argument("--email", required=True, help="Account email")
    parser.add_argument("--name", help="Display name")
    args = parser.parse_args()

    asyncio.run(create_user(args.email, args.name))
