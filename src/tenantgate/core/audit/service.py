"""Audit service for recording actions.

Entries are added to the caller's session, so they commit or roll back
together with the change they describe.
"""

from typing import Annotated, Any
from uuid import UUID

import structlog
from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from tenantgate.api.dependencies import DBSession
from tenantgate.core.audit.models import AuditLog
from tenantgate.core.logging import get_client_ip


log = structlog.get_logger()


class AuditContext:
    """Request-level information attached to every entry of a request."""

    def __init__(
        self,
        ip_address: str | None = None,
        user_agent: str | None = None,
        request_id: str | None = None,
    ) -> None:
        self.ip_address = ip_address
        self.user_agent = user_agent
        self.request_id = request_id

    @classmethod
    def from_request(cls, request: Request) -> "AuditContext":
        """Build a context from the incoming request."""
        return cls(
            ip_address=get_client_ip(request),
            user_agent=request.headers.get("User-Agent"),
            request_id=getattr(request.state, "request_id", None),
        )


class AuditService:
    """Service for creating audit log entries."""

    def __init__(
        self,
        session: AsyncSession,
        context: AuditContext | None = None,
    ) -> None:
        self.session = session
        self.context = context or AuditContext()

    async def log(
        self,
        action: str,
        resource: str,
        resource_id: str | None = None,
        actor_id: UUID | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> AuditLog:
        """Create an audit log entry in the current transaction.

        Args:
            action: Type of action (e.g., "CREATE", "DELETE")
            resource: Type of resource (e.g., "tenant")
            resource_id: ID of the affected resource
            actor_id: The acting user, if any
            metadata: Additional context data

        Returns:
            Created audit log entry

        Example:
            await audit.log(
                action="CREATE",
                resource="tenant",
                resource_id=str(tenant.id),
                metadata={"name": tenant.name, "slug": tenant.slug},
            )
        """
        entry = AuditLog(
            action=action,
            resource=resource,
            resource_id=resource_id,
            actor_id=actor_id,
            request_id=self.context.request_id,
            ip_address=self.context.ip_address,
            user_agent=self.context.user_agent,
            metadata_=metadata,
        )

        self.session.add(entry)
        await self.session.flush()

        log.info(
            "audit_log_created",
            action=action,
            resource=resource,
            resource_id=resource_id,
            actor_id=str(actor_id) if actor_id else None,
        )

        return entry


def get_audit_service(db: DBSession, request: Request) -> AuditService:
    """Dependency that provides an audit service bound to the request."""
    return AuditService(db, AuditContext.from_request(request))


# Type alias for dependency injection
AuditSvc = Annotated[AuditService, Depends(get_audit_service)]
