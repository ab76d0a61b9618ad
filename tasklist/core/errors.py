"""Typed failure values returned by the credential service, capability gate and task store.

Core operations return either their result or a ``Failure``; they never raise
for caller errors. The HTTP layer is the only place a ``Failure`` becomes an
``HTTPException`` (see ``tasklist.api.v1.errors``).
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class FailureKind(str, Enum):
    """Every way an operation can be refused. None of these are retryable."""

    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    NOT_AUTHENTICATED = "NOT_AUTHENTICATED"
    ADMIN_REQUIRED = "ADMIN_REQUIRED"
    NOT_FOUND = "NOT_FOUND"


DEFAULT_MESSAGES: dict[FailureKind, str] = {
    FailureKind.INVALID_CREDENTIALS: "Invalid credentials",
    FailureKind.NOT_AUTHENTICATED: "Not authenticated",
    FailureKind.ADMIN_REQUIRED: "Admin only",
    FailureKind.NOT_FOUND: "Not found",
}


class Failure(BaseModel):
    """An operation-level refusal: what went wrong and a caller-safe message."""

    model_config = ConfigDict(frozen=True)

    kind: FailureKind
    message: str

    @classmethod
    def of(cls, kind: FailureKind) -> "Failure":
        return cls(kind=kind, message=DEFAULT_MESSAGES[kind])


INVALID_CREDENTIALS = Failure.of(FailureKind.INVALID_CREDENTIALS)
NOT_AUTHENTICATED = Failure.of(FailureKind.NOT_AUTHENTICATED)
ADMIN_REQUIRED = Failure.of(FailureKind.ADMIN_REQUIRED)
NOT_FOUND = Failure.of(FailureKind.NOT_FOUND)
