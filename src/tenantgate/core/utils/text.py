"""Text processing utilities."""

import re
from collections.abc import Awaitable, Callable

from tenantgate.core.constants import MAX_SLUG_ATTEMPTS, MAX_SLUG_LENGTH
from tenantgate.core.errors import ConflictError


_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")


def generate_slug(name: str, max_length: int = MAX_SLUG_LENGTH) -> str:
    """Generate a URL-safe slug from a name.

    Converts the input string to a URL-friendly slug by:
    - Converting to lowercase and trimming
    - Replacing whitespace, quotes and any other character outside
      ``[a-z0-9]`` with a hyphen
    - Collapsing hyphen runs and stripping leading/trailing hyphens
    - Truncating to max_length

    The result is idempotent: slugifying a slug returns it unchanged.
    An empty string means the name had nothing worth keeping.

    Args:
        name: The input string to slugify
        max_length: Maximum length of output slug (default 63)

    Returns:
        URL-safe lowercase slug, possibly empty

    Examples:
        >>> generate_slug("Acme Inc.")
        'acme-inc'
        >>> generate_slug("Hello! World@2024")
        'hello-world-2024'
    """
    slug = _NON_SLUG_CHARS.sub("-", name.lower().strip()).strip("-")
    return slug[:max_length].rstrip("-")


def _with_suffix(base_slug: str, counter: int, max_length: int) -> str:
    suffix = f"-{counter}"
    return f"{base_slug[: max_length - len(suffix)].rstrip('-')}{suffix}"


async def resolve_unique_slug(
    base_slug: str,
    exists: Callable[[str], Awaitable[bool]],
    max_attempts: int = MAX_SLUG_ATTEMPTS,
    max_length: int = MAX_SLUG_LENGTH,
) -> str:
    """Find the first free slug in the sequence base, base-2, base-3, ...

    Args:
        base_slug: Slug generated from the tenant name
        exists: Async predicate telling whether a slug is taken
        max_attempts: How many candidates to try before giving up
        max_length: Candidates are trimmed to fit this length

    Returns:
        A slug for which ``exists`` returned False

    Raises:
        ConflictError: If every candidate up to max_attempts is taken
    """
    candidate = base_slug
    for counter in range(2, max_attempts + 2):
        if not await exists(candidate):
            return candidate
        candidate = _with_suffix(base_slug, counter, max_length)

    raise ConflictError(
        "Could not find an available slug for this tenant name",
        error_code="slug_exhausted",
        details={"slug": base_slug, "attempts": max_attempts},
    )
