"""Command: tenantgate serve - Run the API server."""

import typer
from rich.console import Console


console = Console()


def serve(
    host: str = typer.Option("127.0.0.1", "--host", "-h", help="Interface to bind"),
    port: int = typer.Option(4000, "--port", "-p", help="Port to listen on"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Run the API server with uvicorn."""
    import uvicorn

    console.print(
        f"[bold cyan]Starting TenantGate[/bold cyan] on http://{host}:{port}"
    )
    uvicorn.run(
        "tenantgate.main:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
    )
