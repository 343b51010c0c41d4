"""Authentication schemas for sessions and the auth endpoints."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from tenantgate.core.constants import ADMIN_ROLES


class SessionData(BaseModel):
    """Data carried by an admin session token.

    Attributes:
        user_id: The user's UUID
        email: The user's email at login time
        role: The user's role at login time
        exp: Session expiration time
    """

    user_id: UUID
    email: str
    role: str
    exp: datetime

    @property
    def is_admin(self) -> bool:
        return self.role in ADMIN_ROLES


class LoginRequest(BaseModel):
    """Login body. Both fields are checked by the handler for a clear 400."""

    email: str | None = None
    password: str | None = None


class SessionUser(BaseModel):
    """Public view of the signed-in user."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    email: str
    role: str


class LoginResponse(BaseModel):
    """Successful login response."""

    message: str
    user: SessionUser


class MessageResponse(BaseModel):
    """Plain message response."""

    message: str


class AuthCheckResponse(BaseModel):
    """Result of checking the current session."""

    authenticated: bool
    role: str | None = None
