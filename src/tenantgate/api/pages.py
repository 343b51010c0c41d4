"""Page routes.

These back the browser-facing pages and return the page context as JSON;
rendering is left to the frontend. Tenant subdomains reach the
``/tenant/{slug}`` routes through ``TenantRoutingMiddleware``.
"""

from typing import Any
from urllib.parse import quote

from fastapi import APIRouter, Request
from fastapi.responses import RedirectResponse

from tenantgate.api.dependencies import AppSettings
from tenantgate.core.auth import OptionalSession
from tenantgate.modules.tenants.schemas import TenantResponse
from tenantgate.modules.tenants.services import TenantSvc


router = APIRouter(include_in_schema=False)


@router.get("/")
async def landing(settings: AppSettings) -> dict[str, Any]:
    """Public landing page."""
    return {
        "page": "landing",
        "app_name": settings.app_name,
        "links": {
            "create_tenant": "/api/tenants",
            "admin": "/admin",
            "login": "/login",
        },
    }


@router.get("/tenant/{slug}")
@router.get("/tenant/{slug}/{path:path}")
async def tenant_page(
    slug: str,
    service: TenantSvc,
    path: str = "",
) -> dict[str, Any]:
    """Tenant dashboard; unknown slugs are a 404."""
    tenant = await service.get_tenant_by_slug(slug)
    return {
        "page": "tenant",
        "path": f"/{path}",
        "tenant": TenantResponse.model_validate(tenant).model_dump(
            mode="json",
            by_alias=True,
        ),
    }


@router.get("/login")
async def login_page(next: str = "/admin") -> dict[str, Any]:
    return {"page": "login", "next": next}


@router.get("/admin", response_model=None)
@router.get("/admin/{path:path}", response_model=None)
async def admin_page(
    request: Request,
    session: OptionalSession,
    service: TenantSvc,
    path: str = "",
) -> dict[str, Any] | RedirectResponse:
    """Admin dashboard.

    Browsers without an admin session are sent to the login page, which
    returns them here afterwards.
    """
    if session is None or not session.is_admin:
        return RedirectResponse(
            url=f"/login?next={quote(request.url.path)}",
            status_code=307,
        )

    tenants = await service.list_tenants()
    return {
        "page": "admin",
        "path": f"/{path}",
        "session": {
            "user_id": str(session.user_id),
            "email": session.email,
            "role": session.role,
        },
        "tenants": [
            TenantResponse.model_validate(t).model_dump(mode="json", by_alias=True)
            for t in tenants
        ],
    }
