"""
===============================================================================
CRC CARD — identity/auth_users.py
===============================================================================

Module:
    User authentication (JWT bearer tokens)

Responsibilities:
    - Issue signed access tokens with expiry.
    - Decode and validate tokens (signature, exp, minimal claims).
    - Resolve the current user (token -> user_id -> repository).
    - Expose the FastAPI dependency require_user().

Collaborators:
    - crosscutting.config.get_settings: secret and TTL.
    - crosscutting.envelope: unauthorized() envelope error.
    - container.get_user_repository: user lookup.
    - context.set_user_context: log correlation.

Design decisions:
    - Crypto lives here (identity edge), never in domain.
    - Minimal claims: sub, role, iat, exp, typ.
    - Never log secrets or tokens.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable

import jwt
from fastapi import Header, Request

from ..context import set_user_context
from ..crosscutting.config import get_settings
from ..crosscutting.envelope import unauthorized
from ..crosscutting.logger import logger
from ..domain.entities import UserRecord

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

JWT_ALGORITHM: str = "HS256"

CLAIM_SUB: str = "sub"
CLAIM_ROLE: str = "role"
CLAIM_IAT: str = "iat"
CLAIM_EXP: str = "exp"
CLAIM_TYP: str = "typ"

TOKEN_TYPE_ACCESS: str = "access"

UNAUTHENTICATED_MESSAGE = "Unauthenticated."


@dataclass(frozen=True, slots=True)
class AuthSettings:
    """Auth settings snapshot."""

    jwt_secret: str
    jwt_access_ttl_minutes: int


@dataclass(frozen=True, slots=True)
class TokenPayload:
    user_id: int
    role: str


def get_auth_settings() -> AuthSettings:
    s = get_settings()
    return AuthSettings(
        jwt_secret=s.jwt_secret,
        jwt_access_ttl_minutes=s.jwt_access_ttl_minutes,
    )


# ---------------------------------------------------------------------------
# JWT (issue / decode)
# ---------------------------------------------------------------------------


def create_access_token(
    user: UserRecord, settings: AuthSettings | None = None
) -> tuple[str, int]:
    """
    Sign an access token for user.

    Returns:
        (token, expires_in_seconds)
    """
    auth_settings = settings or get_auth_settings()

    now = datetime.now(timezone.utc)
    expires_in = int(auth_settings.jwt_access_ttl_minutes * 60)

    payload: dict[str, object] = {
        CLAIM_SUB: str(user.id),
        CLAIM_ROLE: user.role.value,
        CLAIM_IAT: int(now.timestamp()),
        CLAIM_EXP: int((now + timedelta(seconds=expires_in)).timestamp()),
        CLAIM_TYP: TOKEN_TYPE_ACCESS,
    }

    token = jwt.encode(payload, auth_settings.jwt_secret, algorithm=JWT_ALGORITHM)
    return token, expires_in


def decode_access_token(
    token: str, settings: AuthSettings | None = None
) -> TokenPayload:
    """Validate a token; every failure is a 401 envelope."""
    auth_settings = settings or get_auth_settings()

    try:
        payload = jwt.decode(
            token,
            auth_settings.jwt_secret,
            algorithms=[JWT_ALGORITHM],
            options={"require": [CLAIM_SUB, CLAIM_EXP]},
        )
    except jwt.ExpiredSignatureError as exc:
        raise unauthorized("Token expired.") from exc
    except jwt.InvalidTokenError as exc:
        raise unauthorized("Invalid token.") from exc

    token_type = payload.get(CLAIM_TYP)
    if token_type is not None and token_type != TOKEN_TYPE_ACCESS:
        raise unauthorized("Invalid token type.")

    try:
        user_id = int(payload[CLAIM_SUB])
    except (TypeError, ValueError) as exc:
        raise unauthorized("Invalid token.") from exc

    return TokenPayload(user_id=user_id, role=str(payload.get(CLAIM_ROLE) or ""))


def get_current_user(token: str) -> UserRecord:
    """Resolve the active user behind a token."""
    from ..container import get_user_repository

    payload = decode_access_token(token)
    user = get_user_repository().get_user(payload.user_id)
    if user is None or not user.is_active:
        logger.warning("auth failed: unknown or inactive user")
        raise unauthorized(UNAUTHENTICATED_MESSAGE)
    return user


def _extract_bearer_token(authorization: str | None) -> str | None:
    """Token from `Authorization: Bearer <token>`."""
    if not authorization:
        return None
    parts = authorization.strip().split(" ", 1)
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    return parts[1].strip() or None


# ---------------------------------------------------------------------------
# FastAPI dependencies
# ---------------------------------------------------------------------------


def require_user() -> Callable:
    """FastAPI dependency: authenticated user via bearer JWT."""

    async def dependency(
        request: Request,
        authorization: str | None = Header(None, alias="Authorization"),
    ) -> UserRecord:
        token = _extract_bearer_token(authorization)
        if not token:
            raise unauthorized(UNAUTHENTICATED_MESSAGE)

        user = get_current_user(token)
        request.state.user = user
        set_user_context(user.id)
        return user

    return dependency
