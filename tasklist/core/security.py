"""JWT session credential creation and verification."""

from datetime import UTC, datetime, timedelta
from typing import Any

import jwt
from pydantic import ValidationError

from tasklist.core.config import Settings, get_settings
from tasklist.models.user import Identity, User


def create_access_token(
    user: User | Identity,
    settings: Settings | None = None,
    now: datetime | None = None,
) -> str:
    """Create a JWT carrying username and role, valid for JWT_EXPIRE_MINUTES from now."""
    settings = settings or get_settings()
    now = now or datetime.now(UTC)
    expire = now + timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    payload: dict[str, Any] = {
        "username": user.username,
        "role": user.role.value,
        "exp": expire,
        "iat": now,
    }
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.encode(
        payload,
        secret,
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str, settings: Settings | None = None) -> dict[str, Any]:
    """
    Decode and validate JWT; return payload (username, role, exp, iat).
    Raises jwt.PyJWTError on invalid or expired token.
    """
    settings = settings or get_settings()
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.decode(
        token,
        secret,
        algorithms=[settings.JWT_ALGORITHM],
        options={"require": ["exp", "iat"]},
    )


def verify_access_token(token: str, settings: Settings | None = None) -> Identity | None:
    """
    Return the caller identity carried by a valid token, or None.

    Bad signatures, malformed or expired tokens and unusable claims all
    degrade to None (anonymous); nothing is raised.
    """
    try:
        payload = decode_access_token(token, settings)
    except jwt.PyJWTError:
        return None
    try:
        return Identity(username=payload.get("username"), role=payload.get("role"))
    except ValidationError:
        return None
