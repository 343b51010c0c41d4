"""Tenant resolution from hostnames and subdomain routing."""

from tenantgate.core.tenancy.hostname import (
    HostnamePolicy,
    resolve_tenant_slug,
    split_host,
)
from tenantgate.core.tenancy.middleware import TenantRoutingMiddleware, rewrite_path


__all__ = [
    "HostnamePolicy",
    "TenantRoutingMiddleware",
    "resolve_tenant_slug",
    "rewrite_path",
    "split_host",
]
