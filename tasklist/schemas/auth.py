"""Request/response schemas for auth endpoints."""

from pydantic import BaseModel, Field

from tasklist.models.user import Role


class LoginRequest(BaseModel):
    """Credentials for login."""

    username: str = Field(..., description="Username")
    password: str = Field(..., description="Password")


class UserOut(BaseModel):
    """Public view of a user (no password)."""

    username: str
    role: Role

    model_config = {"from_attributes": True}


class LoginResponse(BaseModel):
    """Session credential returned after successful login."""

    token: str = Field(..., description="JWT session credential; send as 'Authorization: Bearer <token>'")
    user: UserOut
