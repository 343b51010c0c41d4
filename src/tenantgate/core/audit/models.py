"""Audit log database model.

Stores append-only entries recording who did what to which resource.
"""

from datetime import datetime
from typing import Any
from uuid import UUID

from sqlalchemy import JSON, DateTime, String, Text, func
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from tenantgate.core.constants import (
    MAX_AUDIT_ACTION_LENGTH,
    MAX_AUDIT_RESOURCE_LENGTH,
    MAX_IPV6_LENGTH,
)
from tenantgate.core.database.base import Base, UUIDMixin


# JSONB on PostgreSQL, plain JSON elsewhere (SQLite in tests)
JSONType = JSON().with_variant(JSONB(), "postgresql")


class AuditLog(Base, UUIDMixin):
    """Audit log entry.

    Rows carry no foreign keys so entries outlive the tenants and users
    they mention.

    Attributes:
        action: Type of action (CREATE, UPDATE_STATUS, DELETE, ...)
        resource: Type of resource affected (tenant, user, ...)
        resource_id: ID of the affected resource
        actor_id: The admin user who acted (None for public actions)
        request_id: Correlation ID for request tracing
        ip_address: Client IP address
        user_agent: Client user agent string
        metadata_: Additional context about the action
        created_at: When the action occurred
    """

    __tablename__ = "audit_logs"

    action: Mapped[str] = mapped_column(
        String(MAX_AUDIT_ACTION_LENGTH),
        nullable=False,
        index=True,
    )
    resource: Mapped[str] = mapped_column(
        String(MAX_AUDIT_RESOURCE_LENGTH),
        nullable=False,
        index=True,
    )
    resource_id: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        index=True,
    )
    actor_id: Mapped[UUID | None] = mapped_column(
        nullable=True,
        index=True,
    )

    # Request context
    request_id: Mapped[str | None] = mapped_column(
        String(64),
        nullable=True,
    )
    ip_address: Mapped[str | None] = mapped_column(
        String(MAX_IPV6_LENGTH),
        nullable=True,
    )
    user_agent: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
    )

    metadata_: Mapped[dict[str, Any] | None] = mapped_column(
        "metadata",  # Column name in database
        JSONType,
        nullable=True,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return (
            f"<AuditLog(id={self.id}, action={self.action}, "
            f"resource={self.resource}, resource_id={self.resource_id})>"
        )
