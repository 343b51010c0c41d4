"""Test data factories."""

from tests.factories.tenant import TenantFactory
from tests.factories.user import AdminSeedFactory


__all__ = ["AdminSeedFactory", "TenantFactory"]
