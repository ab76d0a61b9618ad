"""User records and caller identities for authentication and role checks."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Role(str, Enum):
    """Closed set of roles; ADMIN is the only elevated one."""

    USER = "USER"
    ADMIN = "ADMIN"


class Identity(BaseModel):
    """Caller identity decoded from a verified session credential."""

    model_config = ConfigDict(frozen=True)

    username: str
    role: Role


class User(BaseModel):
    """
    Seeded user account. Immutable; there is no create/update/delete.

    password is stored and compared in plaintext (documented baseline).
    """

    model_config = ConfigDict(frozen=True)

    username: str
    password: str
    role: Role

    def identity(self) -> Identity:
        """Return the password-free view of this user."""
        return Identity(username=self.username, role=self.role)


DEFAULT_USERS: tuple[User, ...] = (
    User(username="user", password="password", role=Role.USER),
    User(username="admin", password="admin", role=Role.ADMIN),
)
