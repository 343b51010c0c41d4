"""Command: tenantgate seed - Load demo data for development."""

import asyncio
from typing import TYPE_CHECKING

import typer
from rich.console import Console
from rich.table import Table


if TYPE_CHECKING:
    from tenantgate.core.database import Database


console = Console()

DEMO_TENANTS = [
    {"name": "Demo Company", "slug": "demo-company"},
    {"name": "Test Corp", "slug": "test-corp"},
]


def seed(
    scenario: str = typer.Option(
        "demo", "--scenario", "-s", help="Seed scenario to run (demo)"
    ),
) -> None:
    """Seed the database with demo tenants.

    Existing tenants with the same slug are left untouched.
    """
    from tenantgate.config import get_settings
    from tenantgate.core.database import Database

    if scenario != "demo":
        console.print(f"[red]Error:[/red] Unknown scenario '{scenario}'.")
        console.print("Available scenarios: demo")
        raise typer.Exit(1)

    async def run() -> list[tuple[str, str, bool]]:
        database = Database(get_settings())
        try:
            return await seed_demo(database)
        finally:
            await database.dispose()

    results = asyncio.run(run())

    table = Table(title="Seeded Tenants", show_header=True)
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Slug")
    table.add_column("Status", no_wrap=True)
    for name, slug, created in results:
        table.add_row(name, slug, "[green]created[/green]" if created else "exists")

    console.print()
    console.print(table)
    console.print()


async def seed_demo(database: "Database") -> list[tuple[str, str, bool]]:
    """Upsert the demo tenants.

    Returns:
        (name, slug, created) for every demo tenant
    """
    from tenantgate.modules.tenants.models import Tenant
    from tenantgate.modules.tenants.repos import TenantRepository

    results: list[tuple[str, str, bool]] = []
    async with database.session_factory() as session:
        repo = TenantRepository(session)
        for data in DEMO_TENANTS:
            existing = await repo.get_by_slug(data["slug"])
            if existing:
                results.append((existing.name, existing.slug, False))
                continue

            tenant = await repo.create(Tenant(name=data["name"], slug=data["slug"]))
            results.append((tenant.name, tenant.slug, True))

        await session.commit()
    return results
