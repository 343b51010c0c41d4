"""Command: tenantgate init-admin - Create the bootstrap admin user."""

import asyncio
from typing import TYPE_CHECKING

import typer
from rich.console import Console


if TYPE_CHECKING:
    from tenantgate.config import Settings


console = Console()


def init_admin(
    email: str | None = typer.Option(
        None, "--email", "-e", help="Admin email (defaults to ADMIN_EMAIL)"
    ),
    password: str | None = typer.Option(
        None, "--password", "-p", help="Admin password (defaults to ADMIN_PASSWORD)"
    ),
    role: str | None = typer.Option(
        None, "--role", "-r", help="Role for a new admin (defaults to ADMIN_ROLE)"
    ),
) -> None:
    """Create the bootstrap admin user.

    Does nothing if a user with that email already exists.
    """
    from tenantgate.config import get_settings

    settings = get_settings()
    email = email or settings.admin_email
    password = password or settings.admin_password
    role = role or settings.admin_role

    if not email or not password:
        console.print(
            "[red]Error:[/red] An email and password are required.\n"
            "Pass --email/--password or set ADMIN_EMAIL and ADMIN_PASSWORD."
        )
        raise typer.Exit(1)

    created = asyncio.run(_init_admin(settings, email, password, role))
    if created:
        console.print(f"[green]✓[/green] Created admin user {email}")
    else:
        console.print(f"[yellow]Admin user {email} already exists.[/yellow]")


async def _init_admin(settings: "Settings", email: str, password: str, role: str) -> bool:
    from tenantgate.core.auth.service import ensure_admin_user
    from tenantgate.core.database import Database

    database = Database(settings)
    try:
        async with database.session_factory() as session:
            _, created = await ensure_admin_user(session, email, password, role)
            await session.commit()
    finally:
        await database.dispose()
    return created
