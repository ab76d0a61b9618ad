"""Map typed failures from the core onto HTTP errors."""

from fastapi import HTTPException, status

from tasklist.core.errors import Failure, FailureKind

FAILURE_STATUS: dict[FailureKind, int] = {
    FailureKind.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    FailureKind.NOT_AUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
    FailureKind.ADMIN_REQUIRED: status.HTTP_403_FORBIDDEN,
    FailureKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


def http_error(failure: Failure) -> HTTPException:
    """Build the HTTPException a route raises for ``failure``."""
    headers = None
    if failure.kind is FailureKind.NOT_AUTHENTICATED:
        headers = {"WWW-Authenticate": "Bearer"}
    return HTTPException(
        status_code=FAILURE_STATUS[failure.kind],
        detail=failure.message,
        headers=headers,
    )
