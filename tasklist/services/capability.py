"""Capability gate: decide whether a caller may invoke an operation."""

from enum import Enum

from tasklist.core.errors import ADMIN_REQUIRED, NOT_AUTHENTICATED, Failure
from tasklist.models.user import Identity, Role


class CapabilityLevel(str, Enum):
    """Minimum authorization an operation requires."""

    NONE = "none"
    AUTHENTICATED = "authenticated"
    ADMIN = "admin"


def check_capability(identity: Identity | None, level: CapabilityLevel) -> Failure | None:
    """
    Return None when ``identity`` satisfies ``level``, otherwise the failure.

    Authentication is always checked before role, so an anonymous caller on an
    admin-only operation gets NOT_AUTHENTICATED rather than ADMIN_REQUIRED.
    """
    if level is CapabilityLevel.NONE:
        return None
    if identity is None:
        return NOT_AUTHENTICATED
    if level is CapabilityLevel.ADMIN and identity.role is not Role.ADMIN:
        return ADMIN_REQUIRED
    return None
