"""Tenant service for business logic."""

from typing import Annotated
from uuid import UUID

import structlog
from fastapi import Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tenantgate.api.dependencies import AppSettings
from tenantgate.config import Settings
from tenantgate.core.audit import AuditService, AuditSvc
from tenantgate.core.constants import (
    MAX_SLUG_ATTEMPTS,
    MAX_TENANT_NAME_LENGTH,
    MIN_TENANT_NAME_LENGTH,
    RESERVED_SLUGS,
)
from tenantgate.core.errors import BadRequestError, ConflictError, NotFoundError
from tenantgate.core.utils import generate_slug, resolve_unique_slug
from tenantgate.modules.tenants.models import Tenant, TenantStatus
from tenantgate.modules.tenants.repos import TenantRepo, TenantRepository


logger = structlog.get_logger()

VALID_STATUSES = frozenset(status.value for status in TenantStatus)


class TenantService:
    """Service for tenant management operations.

    Contains business logic for tenant creation (name validation and
    unique slug assignment), lookup, status changes and deletion.
    Every mutation writes an audit entry in the same transaction.
    """

    def __init__(
        self,
        repo: TenantRepo,
        audit: AuditSvc,
        settings: AppSettings,
    ) -> None:
        self.repo = repo
        self.audit = audit
        self.settings = settings

    async def create_tenant(
        self,
        name: str | None,
        actor_id: UUID | None = None,
    ) -> Tenant:
        """Create a new tenant from a display name.

        Args:
            name: Raw tenant name from the request
            actor_id: Admin performing the action, if any

        Returns:
            The created tenant

        Raises:
            BadRequestError: If the name is missing, out of bounds or reserved
            ConflictError: If no unique slug could be assigned
        """
        name = _validate_name(name)

        base_slug = generate_slug(name)
        if not base_slug:
            raise BadRequestError("Invalid tenant name", error_code="invalid_name")
        if base_slug in RESERVED_SLUGS:
            raise BadRequestError(
                f'"{name}" is a reserved name',
                error_code="reserved_name",
                details={"slug": base_slug},
            )

        slug = await resolve_unique_slug(
            base_slug,
            self.repo.slug_exists,
            max_attempts=MAX_SLUG_ATTEMPTS,
        )

        try:
            tenant = await self.repo.create(Tenant(name=name, slug=slug))
        except IntegrityError as e:
            # Another request claimed the slug between the check and the insert
            await self.repo.session.rollback()
            logger.warning("tenant_slug_conflict", slug=slug)
            raise ConflictError(
                "A tenant with this name already exists",
                error_code="slug_taken",
                details={"slug": slug},
            ) from e

        await self.audit.log(
            action="CREATE",
            resource="tenant",
            resource_id=str(tenant.id),
            actor_id=actor_id,
            metadata={"name": tenant.name, "slug": tenant.slug},
        )

        logger.info("tenant_created", tenant_id=str(tenant.id), slug=tenant.slug)
        return tenant

    async def get_tenant_by_slug(self, slug: str) -> Tenant:
        """Get a tenant by slug.

        Raises:
            NotFoundError: If no tenant has that slug
        """
        tenant = await self.repo.get_by_slug(slug)
        if tenant is None:
            raise NotFoundError(
                "Tenant not found",
                resource="tenant",
                resource_id=slug,
            )
        return tenant

    async def get_tenant(self, tenant_id: UUID) -> Tenant:
        """Get a tenant by ID.

        Raises:
            NotFoundError: If no tenant has that ID
        """
        tenant = await self.repo.get_by_id(tenant_id)
        if tenant is None:
            raise NotFoundError(
                "Tenant not found",
                resource="tenant",
                resource_id=str(tenant_id),
            )
        return tenant

    async def list_tenants(self) -> list[Tenant]:
        return await self.repo.list_all()

    async def update_status(
        self,
        tenant_id: UUID,
        status: str | None,
        actor_id: UUID | None = None,
    ) -> Tenant:
        """Change a tenant's status.

        Args:
            tenant_id: Tenant to update
            status: One of active, inactive, suspended
            actor_id: Admin performing the action

        Returns:
            The updated tenant

        Raises:
            BadRequestError: If the status is not recognized
            NotFoundError: If the tenant doesn't exist
        """
        if status not in VALID_STATUSES:
            raise BadRequestError(
                "Invalid status. Must be active, inactive, or suspended",
                error_code="invalid_status",
                details={"requested_status": status},
            )

        tenant = await self.get_tenant(tenant_id)
        old_status = tenant.status
        tenant.status = status
        tenant = await self.repo.update(tenant)

        await self.audit.log(
            action="UPDATE_STATUS",
            resource="tenant",
            resource_id=str(tenant.id),
            actor_id=actor_id,
            metadata={"old_status": old_status, "new_status": status},
        )

        logger.info(
            "tenant_status_updated",
            tenant_id=str(tenant.id),
            old_status=old_status,
            new_status=status,
        )
        return tenant

    async def delete_tenant(
        self,
        tenant_id: UUID,
        actor_id: UUID | None = None,
    ) -> None:
        """Delete a tenant.

        Raises:
            NotFoundError: If the tenant doesn't exist
        """
        tenant = await self.get_tenant(tenant_id)
        metadata = {"name": tenant.name, "slug": tenant.slug}

        await self.repo.delete(tenant)
        await self.audit.log(
            action="DELETE",
            resource="tenant",
            resource_id=str(tenant_id),
            actor_id=actor_id,
            metadata=metadata,
        )

        logger.info("tenant_deleted", tenant_id=str(tenant_id), slug=metadata["slug"])

    def url_hint(self, slug: str) -> str:
        """Host a browser can use to reach the tenant."""
        return tenant_url_hint(slug, self.settings)


def tenant_url_hint(slug: str, settings: Settings) -> str:
    if settings.is_development:
        return f"{slug}.localhost:{settings.dev_port}"
    return f"{slug}.{settings.root_domain}"


def _validate_name(name: str | None) -> str:
    if name is None or not name.strip():
        raise BadRequestError("Tenant name is required", error_code="name_required")

    name = name.strip()
    if len(name) < MIN_TENANT_NAME_LENGTH:
        raise BadRequestError(
            f"Tenant name must be at least {MIN_TENANT_NAME_LENGTH} characters",
            error_code="name_too_short",
        )
    if len(name) > MAX_TENANT_NAME_LENGTH:
        raise BadRequestError(
            f"Tenant name must not exceed {MAX_TENANT_NAME_LENGTH} characters",
            error_code="name_too_long",
        )
    return name


def build_tenant_service(
    session: AsyncSession,
    settings: Settings,
    audit: AuditService | None = None,
) -> TenantService:
    """Build a service outside of a request, e.g. from the CLI."""
    return TenantService(TenantRepository(session), audit or AuditService(session), settings)


# Type alias for dependency injection
TenantSvc = Annotated[TenantService, Depends(TenantService)]
