"""Tenant database models."""

from enum import Enum

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from tenantgate.core.constants import (
    MAX_NAME_LENGTH,
    MAX_SLUG_LENGTH,
    MAX_STATUS_LENGTH,
)
from tenantgate.core.database.base import Base, TimestampMixin, UUIDMixin


class TenantStatus(str, Enum):
    """Lifecycle states an admin can put a tenant in."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"


class Tenant(Base, UUIDMixin, TimestampMixin):
    """Tenant model representing an organization/workspace.

    The slug is derived from the name once, at creation, and never changes.
    """

    __tablename__ = "tenants"

    name: Mapped[str] = mapped_column(
        String(MAX_NAME_LENGTH),
        nullable=False,
        index=True,
    )
    slug: Mapped[str] = mapped_column(
        String(MAX_SLUG_LENGTH),
        nullable=False,
        unique=True,
        index=True,
    )
    status: Mapped[str] = mapped_column(
        String(MAX_STATUS_LENGTH),
        default=TenantStatus.ACTIVE.value,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Tenant(id={self.id}, name={self.name}, slug={self.slug}, status={self.status})>"
