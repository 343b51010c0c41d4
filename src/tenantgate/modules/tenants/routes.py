"""Tenant API routes.

Public routes let anyone look up or register a tenant; admin routes add
status changes and deletion behind the session gate.
"""

from uuid import UUID

from fastapi import APIRouter, status

from tenantgate.core.auth import AdminSession
from tenantgate.modules.tenants.models import Tenant
from tenantgate.modules.tenants.schemas import (
    TenantCreate,
    TenantCreatedResponse,
    TenantDeletedResponse,
    TenantEnvelope,
    TenantListResponse,
    TenantResponse,
    TenantStatusUpdate,
)
from tenantgate.modules.tenants.services import TenantService, TenantSvc


public_router = APIRouter(prefix="/tenants", tags=["tenants"])
admin_router = APIRouter(prefix="/admin/tenants", tags=["admin"])


def _created(service: TenantService, tenant: Tenant) -> TenantCreatedResponse:
    return TenantCreatedResponse(
        tenant=TenantResponse.model_validate(tenant),
        url_hint=service.url_hint(tenant.slug),
    )


@public_router.get(
    "",
    response_model=TenantListResponse,
    summary="List tenants",
)
async def list_tenants(service: TenantSvc) -> TenantListResponse:
    tenants = await service.list_tenants()
    return TenantListResponse(
        tenants=[TenantResponse.model_validate(t) for t in tenants]
    )


@public_router.get(
    "/{slug}",
    response_model=TenantEnvelope,
    summary="Get tenant by slug",
)
async def get_tenant(slug: str, service: TenantSvc) -> TenantEnvelope:
    """Look up a single tenant by its slug."""
    tenant = await service.get_tenant_by_slug(slug)
    return TenantEnvelope(tenant=TenantResponse.model_validate(tenant))


@public_router.post(
    "",
    response_model=TenantCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create tenant",
    description="Create a tenant; the slug is derived from the name.",
)
async def create_tenant(
    data: TenantCreate,
    service: TenantSvc,
) -> TenantCreatedResponse:
    tenant = await service.create_tenant(data.name)
    return _created(service, tenant)


@admin_router.get(
    "",
    response_model=TenantListResponse,
    summary="List tenants (admin)",
)
async def admin_list_tenants(
    session: AdminSession,
    service: TenantSvc,
) -> TenantListResponse:
    tenants = await service.list_tenants()
    return TenantListResponse(
        tenants=[TenantResponse.model_validate(t) for t in tenants]
    )


@admin_router.post(
    "",
    response_model=TenantCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create tenant (admin)",
)
async def admin_create_tenant(
    data: TenantCreate,
    session: AdminSession,
    service: TenantSvc,
) -> TenantCreatedResponse:
    """Create a tenant on behalf of the signed-in admin."""
    tenant = await service.create_tenant(data.name, actor_id=session.user_id)
    return _created(service, tenant)


@admin_router.patch(
    "/{tenant_id}",
    response_model=TenantEnvelope,
    summary="Update tenant status",
)
async def update_tenant_status(
    tenant_id: UUID,
    data: TenantStatusUpdate,
    session: AdminSession,
    service: TenantSvc,
) -> TenantEnvelope:
    """Set a tenant's status to active, inactive or suspended."""
    tenant = await service.update_status(
        tenant_id,
        data.status,
        actor_id=session.user_id,
    )
    return TenantEnvelope(tenant=TenantResponse.model_validate(tenant))


@admin_router.delete(
    "/{tenant_id}",
    response_model=TenantDeletedResponse,
    summary="Delete tenant",
)
async def delete_tenant(
    tenant_id: UUID,
    session: AdminSession,
    service: TenantSvc,
) -> TenantDeletedResponse:
    await service.delete_tenant(tenant_id, actor_id=session.user_id)
    return TenantDeletedResponse(message="Tenant deleted successfully")
