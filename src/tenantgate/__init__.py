"""TenantGate - multi-tenant site with subdomain routing and an admin area."""

__version__ = "0.1.0"
