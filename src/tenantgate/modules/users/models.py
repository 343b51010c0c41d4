"""User database models."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from tenantgate.core.constants import (
    DEFAULT_ADMIN_ROLE,
    MAX_EMAIL_LENGTH,
    MAX_ROLE_NAME_LENGTH,
)
from tenantgate.core.database.base import Base, TimestampMixin, UUIDMixin


class User(Base, UUIDMixin, TimestampMixin):
    """Platform user allowed into the admin area.

    Attributes:
        email: Unique email address, stored lowercased
        password_hash: Bcrypt-hashed password
        role: Role name; admin roles are listed in ADMIN_ROLES
        is_active: Whether the user can log in
        last_login_at: Time of the most recent successful login
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(
        String(MAX_EMAIL_LENGTH),
        nullable=False,
        unique=True,
        index=True,
    )
    password_hash: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    role: Mapped[str] = mapped_column(
        String(MAX_ROLE_NAME_LENGTH),
        default=DEFAULT_ADMIN_ROLE,
        nullable=False,
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean,
        default=True,
        nullable=False,
    )
    last_login_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email}, role={self.role})>"
