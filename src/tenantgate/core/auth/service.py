"""Authentication service for admin login and bootstrap."""

from datetime import UTC, datetime
from typing import Annotated

import structlog
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from tenantgate.api.dependencies import DBSession
from tenantgate.core.auth.backend import hash_password, verify_password
from tenantgate.core.constants import DEFAULT_ADMIN_ROLE
from tenantgate.core.errors import UnauthorizedError
from tenantgate.modules.users.models import User
from tenantgate.modules.users.repos import UserRepository


logger = structlog.get_logger()


class AuthService:
    """Service for authentication operations."""

    def __init__(self, db: DBSession) -> None:
        self.db = db
        self.user_repo = UserRepository(db)

    async def login(self, email: str, password: str) -> User:
        """Authenticate an admin with email and password.

        The same error is raised for unknown emails, wrong passwords and
        deactivated accounts so responses do not reveal which accounts exist.

        Args:
            email: User's email address
            password: Plain text password

        Returns:
            The authenticated user, with last_login_at updated

        Raises:
            UnauthorizedError: If credentials are invalid
        """
        user = await self.user_repo.get_by_email(email)

        if (
            user is None
            or not user.is_active
            or not verify_password(password, user.password_hash)
        ):
            logger.warning("login_failed", email=email)
            raise UnauthorizedError(
                "Invalid credentials",
                error_code="invalid_credentials",
            )

        user.last_login_at = datetime.now(UTC)
        user = await self.user_repo.update(user)

        logger.info("login_succeeded", user_id=str(user.id), role=user.role)
        return user


async def ensure_admin_user(
    session: AsyncSession,
    email: str,
    password: str,
    role: str = DEFAULT_ADMIN_ROLE,
) -> tuple[User, bool]:
    """Create the bootstrap admin unless a user with that email exists.

    An existing user is left untouched, password included.

    Args:
        session: Database session; the caller commits
        email: Admin email address
        password: Plain text password to hash
        role: Role for a newly created user

    Returns:
        Tuple of (user, was_created)
    """
    repo = UserRepository(session)
    existing = await repo.get_by_email(email)
    if existing is not None:
        return existing, False

    user = User(
        email=email.strip().lower(),
        password_hash=hash_password(password),
        role=role,
        is_active=True,
    )
    user = await repo.create(user)
    logger.info("admin_user_created", user_id=str(user.id), email=user.email)
    return user, True


# Type alias for dependency injection
AuthSvc = Annotated[AuthService, Depends(AuthService)]
