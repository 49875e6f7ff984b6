from __future__ import annotations

import logging

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse, Response

from breedersroom.application.errors import AuthError
from breedersroom.config.settings import Settings
from breedersroom.infrastructure.auth.context import AuthContext, load_active_user

logger = logging.getLogger(__name__)

PUBLIC_PREFIXES: tuple[str, ...] = (
    "/api/v1/health",
    "/docs",
    "/openapi.json",
    "/redoc",
)


def bearer_token(request: Request) -> str:
    header = request.headers.get("Authorization")
    if not header:
        raise AuthError("Missing Authorization header")
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise AuthError("Authorization header must carry a bearer token")
    return token.strip()


class AuthMiddleware(BaseHTTPMiddleware):
    """Resolve the acting breeder for every non-public request."""

    def __init__(self, app, *, settings: Settings) -> None:
        super().__init__(app)
        self.settings = settings

    def is_public(self, request: Request) -> bool:
        # CORS preflight carries no credentials
        return request.method == "OPTIONS" or request.url.path.startswith(PUBLIC_PREFIXES)

    async def authenticate(self, request: Request) -> AuthContext:
        state = request.app.state
        claims = state.jwt_service.verify(bearer_token(request))
        async with state.session_factory() as session:
            user = await load_active_user(session, claims.user_id)
        return AuthContext(user_id=user.id, email=user.email, claims=claims.raw)

    async def dispatch(self, request: Request, call_next) -> Response:
        if self.is_public(request):
            return await call_next(request)
        try:
            request.state.auth_context = await self.authenticate(request)
        except AuthError as exc:
            logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.message)
            body = {"code": exc.code, "message": exc.message}
            if exc.details is not None:
                body["details"] = exc.details
            return JSONResponse(status_code=exc.status_code, content=body)
        return await call_next(request)
