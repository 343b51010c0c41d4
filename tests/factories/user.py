"""Factory for admin user test data."""

from uuid import uuid4

from polyfactory.factories.pydantic_factory import ModelFactory
from pydantic import BaseModel


class AdminSeed(BaseModel):
    """Credentials for a user created through ensure_admin_user."""

    email: str
    password: str
    role: str = "super_admin"


class AdminSeedFactory(ModelFactory[AdminSeed]):
    """Factory for generating admin credentials."""

    __model__ = AdminSeed

    @classmethod
    def email(cls) -> str:
        """Generate a unique email."""
        return f"admin-{uuid4().hex[:8]}@example.com"

    @classmethod
    def password(cls) -> str:
        return "AdminPass123!"

    @classmethod
    def role(cls) -> str:
        return "super_admin"
