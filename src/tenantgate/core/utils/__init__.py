"""Shared utilities."""

from tenantgate.core.utils.text import generate_slug, resolve_unique_slug


__all__ = [
    "generate_slug",
    "resolve_unique_slug",
]
