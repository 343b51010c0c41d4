"""TenantGate command line interface."""

import typer
from rich.console import Console

from tenantgate import __version__
from tenantgate.commands import admin, resolve, seed, serve


console = Console()

app = typer.Typer(
    name="tenantgate",
    help="Run and manage the TenantGate service.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Register commands
app.command(name="serve")(serve.serve)
app.command(name="init-admin")(admin.init_admin)
app.command(name="seed")(seed.seed)
app.command(name="resolve-host")(resolve.resolve_host)


@app.callback(invoke_without_command=True)
def version_callback(
    version: bool = typer.Option(
        False, "--version", "-v", help="Show version and exit."
    ),
) -> None:
    """TenantGate CLI - run the server and manage tenants."""
    if version:
        console.print(f"[bold cyan]tenantgate[/bold cyan] version {__version__}")
        raise typer.Exit()


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
