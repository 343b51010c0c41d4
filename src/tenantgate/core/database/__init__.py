"""Database layer - engine ownership, session dependency, base models and mixins."""

from tenantgate.core.database.base import Base, TimestampMixin, UUIDMixin
from tenantgate.core.database.session import Database, get_db


__all__ = [
    "Base",
    "Database",
    "TimestampMixin",
    "UUIDMixin",
    "get_db",
]
