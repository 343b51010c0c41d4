"""Command: tenantgate resolve-host - Show which tenant a hostname routes to."""

from dataclasses import replace

import typer
from rich.console import Console


console = Console()


def resolve_host(
    host: str = typer.Argument(..., help="Host header value, e.g. acme.localhost:3001"),
    url: str = typer.Option("", "--url", "-u", help="Full request URL, if known"),
    root_domain: str | None = typer.Option(
        None, "--root-domain", help="Override ROOT_DOMAIN"
    ),
    preview_suffix: str | None = typer.Option(
        None, "--preview-suffix", help="Override PREVIEW_DOMAIN_SUFFIX"
    ),
) -> None:
    """Print the tenant slug a request to HOST would be routed to."""
    from tenantgate.config import get_settings
    from tenantgate.core.tenancy import HostnamePolicy, resolve_tenant_slug

    policy = HostnamePolicy.from_settings(get_settings())
    if root_domain:
        policy = replace(policy, root_domain=root_domain.lower())
    if preview_suffix:
        policy = replace(policy, preview_suffix=preview_suffix.lower())

    slug = resolve_tenant_slug(host, url, policy)
    if slug is None:
        console.print("[yellow]no tenant[/yellow]")
    else:
        console.print(f"[bold cyan]{slug}[/bold cyan]")
