"""Tenant repository for database operations."""

from typing import Annotated
from uuid import UUID

from fastapi import Depends
from sqlalchemy import exists, select

from tenantgate.api.dependencies import DBSession
from tenantgate.modules.tenants.models import Tenant


class TenantRepository:
    """Repository for Tenant database operations.

    The only component that reads or writes the tenants table.
    """

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def create(self, tenant: Tenant) -> Tenant:
        """Insert a tenant.

        Args:
            tenant: Tenant instance to create

        Returns:
            The created tenant with server defaults loaded

        Raises:
            sqlalchemy.exc.IntegrityError: If the slug is already taken
        """
        self.session.add(tenant)
        await self.session.flush()
        await self.session.refresh(tenant)
        return tenant

    async def get_by_id(self, tenant_id: UUID) -> Tenant | None:
        """Get a tenant by ID."""
        return await self.session.get(Tenant, tenant_id)

    async def get_by_slug(self, slug: str) -> Tenant | None:
        """Get a tenant by slug.

        Args:
            slug: The tenant's slug

        Returns:
            Tenant if found, None otherwise
        """
        stmt = select(Tenant).where(Tenant.slug == slug)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def slug_exists(self, slug: str) -> bool:
        """Check whether a slug is already taken."""
        stmt = select(exists().where(Tenant.slug == slug))
        result = await self.session.execute(stmt)
        return bool(result.scalar())

    async def list_all(self) -> list[Tenant]:
        """List every tenant, newest first."""
        stmt = select(Tenant).order_by(Tenant.created_at.desc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def update(self, tenant: Tenant) -> Tenant:
        """Flush pending changes on a tenant and reload it."""
        await self.session.flush()
        await self.session.refresh(tenant)
        return tenant

    async def delete(self, tenant: Tenant) -> None:
        """Delete a tenant."""
        await self.session.delete(tenant)
        await self.session.flush()


# Type alias for dependency injection
TenantRepo = Annotated[TenantRepository, Depends(TenantRepository)]
