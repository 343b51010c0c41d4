"""Authentication module - admin sessions and password handling."""

from tenantgate.core.auth.authenticator import Authenticator, CookieSessionAuthenticator
from tenantgate.core.auth.backend import (
    create_session_token,
    decode_session_token,
    hash_password,
    verify_password,
)
from tenantgate.core.auth.dependencies import (
    AdminSession,
    AuthenticatorDep,
    OptionalSession,
    get_authenticator,
    require_admin,
)
from tenantgate.core.auth.schemas import SessionData


__all__ = [
    # Dependencies
    "AdminSession",
    # Authenticators
    "Authenticator",
    "AuthenticatorDep",
    "CookieSessionAuthenticator",
    "OptionalSession",
    # Schemas
    "SessionData",
    # Token utilities
    "create_session_token",
    "decode_session_token",
    "get_authenticator",
    # Password utilities
    "hash_password",
    "require_admin",
    "verify_password",
]
