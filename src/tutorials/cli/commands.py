"""CLI commands for the tutorials service.

Commands:
- serve: Run the REST API with uvicorn
- config: Show the effective configuration
"""

import typer
import uvicorn
import yaml
from rich.console import Console

from tutorials.config.app_config import CONFIG_FILE, load_app_config
from tutorials.core.memory_store import InMemoryTutorialStore
from tutorials.web.api import create_app

app = typer.Typer(
    name="tutorials",
    help="REST API for managing tutorial records.",
    no_args_is_help=True,
)

console = Console()


@app.command()
def serve(
    host: str | None = typer.Option(None, "--host", help="Bind address"),
    port: int | None = typer.Option(None, "--port", "-p", help="Bind port"),
    memory: bool = typer.Option(
        False, "--memory", help="Use an in-memory store instead of MongoDB"
    ),
) -> None:
    """Run the tutorials API."""
    config = load_app_config()
    bind_host = host or config.server.host
    bind_port = port or config.server.port

    store = InMemoryTutorialStore() if memory else None
    api = create_app(store=store, config=config)

    backend = "memory" if memory else config.database.get_database_name()
    console.print(
        f"[green]✓ Serving tutorials API on http://{bind_host}:{bind_port}[/green]"
    )
    console.print(f"  [dim]store:[/dim] {backend}")

    uvicorn.run(api, host=bind_host, port=bind_port)


@app.command(name="config")
def show_config() -> None:
    """Show the effective configuration."""
    config = load_app_config()
    source = str(CONFIG_FILE) if CONFIG_FILE.exists() else "built-in defaults"
    console.print(f"[dim]source:[/dim] {source}")
    console.print(yaml.safe_dump(config.to_dict(), sort_keys=False).rstrip())


if __name__ == "__main__":
    app()
