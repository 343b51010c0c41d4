"""Authentication API routes.

Provides endpoints for:
- Admin login (sets the session cookie)
- Logout (clears the session cookie)
- Session check
"""

from fastapi import APIRouter, Response

from tenantgate.core.auth.dependencies import AuthenticatorDep, OptionalSession
from tenantgate.core.auth.schemas import (
    AuthCheckResponse,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    SessionUser,
)
from tenantgate.core.auth.service import AuthSvc
from tenantgate.core.errors import BadRequestError


router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Admin login",
    description="Authenticate with email and password. Sets the admin session cookie.",
)
async def login(
    data: LoginRequest,
    service: AuthSvc,
    authenticator: AuthenticatorDep,
    response: Response,
) -> LoginResponse:
    """Login with email and password."""
    if not data.email or not data.password:
        raise BadRequestError(
            "Email and password are required",
            error_code="missing_credentials",
        )

    user = await service.login(email=data.email, password=data.password)
    authenticator.issue(response, user)

    return LoginResponse(
        message="Login successful",
        user=SessionUser.model_validate(user),
    )


@router.post(
    "/logout",
    response_model=MessageResponse,
    summary="Logout",
    description="Clear the admin session cookie.",
)
async def logout(
    authenticator: AuthenticatorDep,
    response: Response,
) -> MessageResponse:
    """Logout by clearing the session cookie."""
    authenticator.clear(response)
    return MessageResponse(message="Logout successful")


@router.get(
    "/check",
    response_model=AuthCheckResponse,
    summary="Check session",
    description="Report whether the request carries a valid admin session.",
)
async def check(session: OptionalSession) -> AuthCheckResponse:
    """Check the current session."""
    if session is None or not session.is_admin:
        return AuthCheckResponse(authenticated=False, role=None)
    return AuthCheckResponse(authenticated=True, role=session.role)
