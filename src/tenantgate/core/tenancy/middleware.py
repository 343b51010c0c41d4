"""Subdomain routing middleware.

Requests addressed to ``<slug>.<domain>`` are served by the tenant pages
under ``/tenant/<slug>``. The middleware rewrites the ASGI path before
routing happens and passes the slug downstream as request state, a
request header, and structlog context.
"""

from typing import TYPE_CHECKING

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from tenantgate.core.constants import TENANT_SLUG_HEADER
from tenantgate.core.tenancy.hostname import HostnamePolicy, resolve_tenant_slug


if TYPE_CHECKING:
    from starlette.types import ASGIApp


logger = structlog.get_logger()

TENANT_PATH_PREFIX = "/tenant"


def rewrite_path(path: str, slug: str) -> str:
    """Map a public path onto the tenant page tree.

    Examples:
        >>> rewrite_path("/", "acme")
        '/tenant/acme'
        >>> rewrite_path("/settings/billing", "acme")
        '/tenant/acme/settings/billing'
    """
    base = f"{TENANT_PATH_PREFIX}/{slug}"
    if not path or path == "/":
        return base
    return f"{base}{path}"


class TenantRoutingMiddleware(BaseHTTPMiddleware):
    """Rewrites subdomain requests to tenant-scoped page paths.

    Attributes:
        policy: Domain layout used by the hostname resolver
        exclude_paths: Path prefixes that are never rewritten
    """

    def __init__(
        self,
        app: "ASGIApp",
        policy: HostnamePolicy,
        exclude_paths: list[str] | None = None,
    ) -> None:
        super().__init__(app)
        self.policy = policy
        self.exclude_paths = exclude_paths or [
            "/api",
            "/docs",
            "/redoc",
            "/openapi.json",
            f"{TENANT_PATH_PREFIX}/",
        ]

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Resolve the tenant and rewrite the path when one is addressed.

        Args:
            request: The incoming request
            call_next: The next middleware/handler

        Returns:
            The response, tagged with the tenant slug header when rewritten
        """
        path = request.url.path
        if any(path.startswith(prefix) for prefix in self.exclude_paths):
            return await call_next(request)

        slug = resolve_tenant_slug(
            request.headers.get("host", ""),
            str(request.url),
            self.policy,
        )
        if slug is None:
            return await call_next(request)

        new_path = rewrite_path(path, slug)
        request.scope["path"] = new_path
        request.scope["raw_path"] = new_path.encode()
        request.scope["headers"] = [
            (name, value)
            for name, value in request.scope["headers"]
            if name != TENANT_SLUG_HEADER.encode()
        ] + [(TENANT_SLUG_HEADER.encode(), slug.encode())]
        request.state.tenant_slug = slug

        structlog.contextvars.bind_contextvars(tenant_slug=slug)
        logger.debug("tenant_route_rewritten", path=path, rewritten_path=new_path)

        response = await call_next(request)
        response.headers[TENANT_SLUG_HEADER] = slug
        return response
