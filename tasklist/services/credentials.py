"""Credential service: check username/password against the user registry and issue session credentials."""

from __future__ import annotations

import hmac
import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from tasklist.core.errors import INVALID_CREDENTIALS, Failure
from tasklist.core.security import create_access_token
from tasklist.models.user import DEFAULT_USERS, User
from tasklist.schemas.auth import LoginResponse, UserOut

if TYPE_CHECKING:
    from tasklist.core.config import Settings

logger = logging.getLogger(__name__)


def _same(a: str, b: str) -> bool:
    # surrogatepass: lone surrogates are legal in JSON strings and must not raise.
    return hmac.compare_digest(
        a.encode("utf-8", "surrogatepass"), b.encode("utf-8", "surrogatepass")
    )


class UserRegistry:
    """Fixed, read-only set of users seeded at startup."""

    def __init__(self, users: Iterable[User] = DEFAULT_USERS) -> None:
        self._users: tuple[User, ...] = tuple(users)
        names = [u.username for u in self._users]
        if len(names) != len(set(names)):
            raise ValueError("usernames in the user registry must be unique")

    def __len__(self) -> int:
        return len(self._users)

    def authenticate(self, username: str, password: str) -> User | Failure:
        """
        Return the user matching both username and password exactly (case-sensitive),
        or the INVALID_CREDENTIALS failure.
        """
        for user in self._users:
            # Compare both fields for every candidate so timing does not reveal which one matched.
            name_ok = _same(user.username, username)
            password_ok = _same(user.password, password)
            if name_ok and password_ok:
                return user
        return INVALID_CREDENTIALS


def login(
    registry: UserRegistry,
    username: str,
    password: str,
    settings: Settings | None = None,
) -> LoginResponse | Failure:
    """Authenticate and, on success, issue a session credential for the user."""
    logger.info("login_attempt", extra={"has_user": bool(username)})
    result = registry.authenticate(username, password)
    if isinstance(result, Failure):
        logger.warning("login_failed", extra={"failed": True})
        return result
    token = create_access_token(result, settings)
    # Role only: no username or other PII in logs.
    logger.info("login_success", extra={"role": result.role.value})
    return LoginResponse(token=token, user=UserOut.model_validate(result.identity()))
