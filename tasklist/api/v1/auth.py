"""Login, current user, and request-scoped auth dependencies."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from tasklist.api.v1.errors import http_error
from tasklist.core.config import Settings
from tasklist.core.errors import Failure
from tasklist.core.security import verify_access_token
from tasklist.models.user import Identity
from tasklist.schemas.auth import LoginRequest, LoginResponse, UserOut
from tasklist.services.credentials import UserRegistry, login as login_user
from tasklist.services.tasks import TaskStore

router = APIRouter()
security = HTTPBearer(auto_error=False)


def get_user_registry(request: Request) -> UserRegistry:
    """Dependency: the user registry owned by this application instance."""
    return request.app.state.user_registry


def get_task_store(request: Request) -> TaskStore:
    """Dependency: the task store owned by this application instance."""
    return request.app.state.task_store


def get_app_settings(request: Request) -> Settings:
    """Dependency: settings this application instance was built with."""
    return request.app.state.settings


def get_current_identity(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> Identity | None:
    """
    Dependency: caller identity from a Bearer token, or None.

    Missing, malformed, tampered and expired tokens all mean anonymous; each
    operation decides through the capability gate whether that is enough.
    """
    if credentials is None:
        return None
    return verify_access_token(credentials.credentials, settings)


@router.post("/login", response_model=LoginResponse)
def login(
    body: LoginRequest,
    registry: Annotated[UserRegistry, Depends(get_user_registry)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> LoginResponse:
    """
    Authenticate with username and password; returns a session token and the user.
    Include the token in the Authorization header as: Bearer <token>
    """
    result = login_user(registry, body.username, body.password, settings)
    if isinstance(result, Failure):
        raise http_error(result)
    return result


@router.get("/me", response_model=UserOut | None)
def me(
    identity: Annotated[Identity | None, Depends(get_current_identity)],
) -> UserOut | None:
    """Current caller, or null when anonymous."""
    if identity is None:
        return None
    return UserOut.model_validate(identity)
