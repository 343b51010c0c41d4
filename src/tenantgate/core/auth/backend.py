"""Authentication backend for password and session-token handling.

This module provides core authentication utilities including:
- Password hashing with bcrypt
- Signed, expiring session tokens (JWT) for the admin cookie
"""

from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import UUID

from jose import JWTError, jwt
from passlib.context import CryptContext

from tenantgate.core.auth.schemas import SessionData
from tenantgate.core.constants import BCRYPT_ROUNDS, SESSION_TOKEN_TYPE


pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=BCRYPT_ROUNDS,
)


# ============================================================
# Password Utilities
# ============================================================


def hash_password(password: str) -> str:
    """Hash a password using bcrypt.

    Args:
        password: Plain text password

    Returns:
        Bcrypt hash of the password
    """
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash.

    Args:
        plain_password: Plain text password to verify
        hashed_password: Bcrypt hash to verify against

    Returns:
        True if password matches, False otherwise
    """
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        # Malformed or unknown hash format
        return False


# ============================================================
# Session Token Utilities
# ============================================================


def create_session_token(
    user_id: UUID,
    email: str,
    role: str,
    secret_key: str,
    algorithm: str,
    max_age: int,
) -> str:
    """Create a signed session token for the admin cookie.

    Args:
        user_id: The user's UUID
        email: The user's email
        role: The user's role
        secret_key: Signing key
        algorithm: JWT signing algorithm
        max_age: Lifetime in seconds

    Returns:
        Encoded JWT
    """
    now = datetime.now(UTC)
    to_encode: dict[str, Any] = {
        "sub": str(user_id),
        "email": email,
        "role": role,
        "type": SESSION_TOKEN_TYPE,
        "iat": now,
        "exp": now + timedelta(seconds=max_age),
    }
    return jwt.encode(to_encode, secret_key, algorithm=algorithm)


def decode_session_token(
    token: str,
    secret_key: str,
    algorithm: str,
) -> SessionData | None:
    """Decode and validate a session token.

    Args:
        token: The JWT to decode
        secret_key: Signing key
        algorithm: Expected JWT algorithm

    Returns:
        SessionData if valid, None if invalid, expired or of the wrong type
    """
    try:
        payload = jwt.decode(token, secret_key, algorithms=[algorithm])

        user_id = payload.get("sub")
        exp = payload.get("exp")
        if not user_id or exp is None:
            return None
        if payload.get("type") != SESSION_TOKEN_TYPE:
            return None

        return SessionData(
            user_id=UUID(user_id),
            email=payload.get("email", ""),
            role=payload.get("role", ""),
            exp=datetime.fromtimestamp(exp, tz=UTC),
        )

    except (JWTError, ValueError):
        return None
