"""Hostname to tenant resolution.

Maps the Host header (or, failing that, the request URL) to a tenant slug.
Three deployment shapes are recognised, checked in this order:

1. Local development: ``acme.localhost:3001``
2. Preview deployments: ``acme.<preview-suffix>`` or
   ``acme---some-branch.<preview-suffix>``
3. The production root domain: ``acme.example.com``

Everything here is pure string handling with no I/O.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from urllib.parse import urlsplit

from tenantgate.config import Settings
from tenantgate.core.constants import DEFAULT_RESERVED_SUBDOMAINS


LOOPBACK_MARKERS = ("localhost", "127.0.0.1")
LOCALHOST_SUFFIX = ".localhost"
BRANCH_SEPARATOR = "---"


@dataclass(frozen=True)
class HostnamePolicy:
    """Domain layout used to pull a tenant slug out of a hostname.

    Attributes:
        root_domain: Production apex domain, e.g. ``example.com``
        preview_suffix: Domain shared by preview deployments, or None to
            disable preview handling
        reserved: Labels that never name a tenant (the empty label is
            always reserved)
    """

    root_domain: str
    preview_suffix: str | None = None
    reserved: frozenset[str] = field(
        default_factory=lambda: frozenset(DEFAULT_RESERVED_SUBDOMAINS)
    )

    @classmethod
    def from_settings(cls, settings: Settings) -> "HostnamePolicy":
        return cls(
            root_domain=settings.root_domain,
            preview_suffix=settings.preview_domain_suffix,
            reserved=_normalize_reserved(settings.reserved_subdomains),
        )


def _normalize_reserved(labels: Iterable[str]) -> frozenset[str]:
    return frozenset(label.strip().lower() for label in labels)


def split_host(host: str) -> str:
    """Return the hostname part of a Host header value, lowercased.

    Strips the port, a trailing FQDN dot, and keeps IPv6 brackets.

    Examples:
        >>> split_host("Acme.Example.com:443")
        'acme.example.com'
        >>> split_host("[::1]:8000")
        '[::1]'
    """
    host = host.strip().lower()
    if host.startswith("["):
        end = host.find("]")
        hostname = host[: end + 1] if end != -1 else host
    else:
        hostname = host.split(":", 1)[0]
    return hostname.rstrip(".")


def _hostname_from(host: str, url: str) -> str:
    hostname = split_host(host)
    if hostname:
        return hostname
    try:
        return (urlsplit(url).hostname or "").rstrip(".")
    except ValueError:
        return ""


def _loopback_label(hostname: str) -> str | None:
    if not hostname.endswith(LOCALHOST_SUFFIX):
        return None
    label = hostname[: -len(LOCALHOST_SUFFIX)]
    # Only a single label in front of localhost counts
    if "." in label:
        return None
    return label


def _preview_label(hostname: str, suffix: str) -> str | None:
    if hostname == suffix:
        return None
    leftmost = hostname[: -len(suffix) - 1].split(".", 1)[0]
    if BRANCH_SEPARATOR in leftmost:
        return leftmost.split(BRANCH_SEPARATOR, 1)[0]
    return leftmost


def _root_domain_label(hostname: str, root_domain: str) -> str | None:
    if hostname in (root_domain, f"www.{root_domain}"):
        return None
    if not hostname.endswith(f".{root_domain}"):
        return None
    return hostname[: -len(root_domain) - 1]


def resolve_tenant_slug(host: str, url: str, policy: HostnamePolicy) -> str | None:
    """Resolve the tenant slug addressed by a request.

    Args:
        host: Raw Host header value, possibly with a port; may be empty
        url: Full request URL, consulted when the Host header is empty
        policy: Domain layout and reserved labels

    Returns:
        The tenant slug, or None for root/admin context

    Examples:
        >>> policy = HostnamePolicy(root_domain="example.com", preview_suffix="vercel.app")
        >>> resolve_tenant_slug("acme.localhost:3001", "http://acme.localhost:3001/", policy)
        'acme'
        >>> resolve_tenant_slug("acme---main.vercel.app", "", policy)
        'acme'
        >>> resolve_tenant_slug("www.example.com", "", policy) is None
        True
    """
    hostname = _hostname_from(host, url)

    if any(marker in hostname for marker in LOOPBACK_MARKERS):
        label = _loopback_label(hostname)
    elif policy.preview_suffix and (
        hostname == policy.preview_suffix
        or hostname.endswith(f".{policy.preview_suffix}")
    ):
        label = _preview_label(hostname, policy.preview_suffix)
    else:
        label = _root_domain_label(hostname, policy.root_domain)

    if not label or label in policy.reserved:
        return None
    return label
