"""Pluggable admin authenticators.

The admin gate only depends on the ``Authenticator`` protocol; the
application factory picks the implementation and stores it on
``app.state.authenticator``.
"""

from typing import TYPE_CHECKING, Protocol

from fastapi import Request, Response

from tenantgate.config import Settings
from tenantgate.core.auth.backend import create_session_token, decode_session_token
from tenantgate.core.auth.schemas import SessionData


if TYPE_CHECKING:
    from tenantgate.modules.users.models import User


class Authenticator(Protocol):
    """Capability check gating admin operations."""

    async def authenticate(self, request: Request) -> SessionData | None:
        """Return the session carried by the request, or None."""
        ...

    def issue(self, response: Response, user: "User") -> None:
        """Attach a new session for ``user`` to the response."""
        ...

    def clear(self, response: Response) -> None:
        """Remove the session from the client."""
        ...


class CookieSessionAuthenticator:
    """Signed, expiring session token stored in an HttpOnly cookie.

    Attributes:
        cookie_name: Name of the session cookie
        max_age: Session lifetime in seconds (cookie Max-Age and token exp)
        secure: Whether the cookie is restricted to HTTPS
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        cookie_name: str = "admin-auth-token",
        max_age: int = 86400,
        secure: bool = False,
    ) -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm
        self.cookie_name = cookie_name
        self.max_age = max_age
        self.secure = secure

    @classmethod
    def from_settings(cls, settings: Settings) -> "CookieSessionAuthenticator":
        return cls(
            secret_key=settings.secret_key,
            algorithm=settings.jwt_algorithm,
            cookie_name=settings.session_cookie_name,
            max_age=settings.session_max_age,
            secure=settings.is_production,
        )

    async def authenticate(self, request: Request) -> SessionData | None:
        token = request.cookies.get(self.cookie_name)
        if not token:
            return None
        return decode_session_token(token, self._secret_key, self._algorithm)

    def issue(self, response: Response, user: "User") -> None:
        token = create_session_token(
            user_id=user.id,
            email=user.email,
            role=user.role,
            secret_key=self._secret_key,
            algorithm=self._algorithm,
            max_age=self.max_age,
        )
        response.set_cookie(
            key=self.cookie_name,
            value=token,
            max_age=self.max_age,
            path="/",
            httponly=True,
            samesite="strict",
            secure=self.secure,
        )

    def clear(self, response: Response) -> None:
        response.delete_cookie(
            key=self.cookie_name,
            path="/",
            httponly=True,
            samesite="strict",
            secure=self.secure,
        )
