"""Pydantic schemas for tenant operations.

Responses use camelCase keys to match the browser client.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema serialized with camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class TenantCreate(BaseModel):
    """Body for creating a tenant; the name is validated by the service."""

    name: str | None = None


class TenantStatusUpdate(BaseModel):
    """Body for changing a tenant's status; the value is validated by the service."""

    status: str | None = None


class TenantResponse(CamelModel):
    """Public view of a tenant."""

    id: UUID
    name: str
    slug: str
    status: str
    created_at: datetime


class TenantEnvelope(CamelModel):
    tenant: TenantResponse


class TenantCreatedResponse(CamelModel):
    """Created tenant plus the host it can be reached at."""

    tenant: TenantResponse
    url_hint: str


class TenantListResponse(CamelModel):
    tenants: list[TenantResponse]


class TenantDeletedResponse(BaseModel):
    message: str
