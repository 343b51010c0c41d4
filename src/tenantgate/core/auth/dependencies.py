"""FastAPI dependencies for the admin session gate.

This module provides dependency injection functions for:
- Reaching the configured authenticator
- Reading the current session, if any
- Requiring an admin session
"""

from typing import Annotated

import structlog
from fastapi import Depends, Request

from tenantgate.core.auth.authenticator import Authenticator
from tenantgate.core.auth.schemas import SessionData
from tenantgate.core.errors import ForbiddenError, UnauthorizedError


def get_authenticator(request: Request) -> Authenticator:
    """Get the authenticator the application was built with."""
    return request.app.state.authenticator


AuthenticatorDep = Annotated[Authenticator, Depends(get_authenticator)]


async def get_optional_session(
    request: Request,
    authenticator: AuthenticatorDep,
) -> SessionData | None:
    """Get the current session if the request carries a valid one.

    Args:
        request: The incoming request
        authenticator: The configured authenticator

    Returns:
        SessionData if authenticated, None otherwise
    """
    return await authenticator.authenticate(request)


OptionalSession = Annotated[SessionData | None, Depends(get_optional_session)]


async def require_admin(
    request: Request,
    session: OptionalSession,
) -> SessionData:
    """Require an authenticated admin session.

    Args:
        request: The incoming request
        session: The current session, if any

    Returns:
        The admin session

    Raises:
        UnauthorizedError: If no valid session is present
        ForbiddenError: If the session does not carry an admin role
    """
    if session is None:
        raise UnauthorizedError("Unauthorized", error_code="unauthorized")

    if not session.is_admin:
        raise ForbiddenError(
            "Admin access required",
            error_code="not_admin",
            details={"role": session.role},
        )

    request.state.user_id = session.user_id
    structlog.contextvars.bind_contextvars(user_id=str(session.user_id))
    return session


AdminSession = Annotated[SessionData, Depends(require_admin)]
