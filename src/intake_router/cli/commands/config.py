"""
Routing config commands.
Inspect and initialize routing thresholds.
"""

from pathlib import Path
from typing import Optional

import typer
from rich import box
from rich.console import Console
from rich.table import Table

from intake_router.cli.commands.route import resolve_config
from intake_router.routing.infrastructure.config_loader import create_default_config
from intake_router.shared.domain.exceptions import ConfigurationError

app = typer.Typer(help="Inspect and initialize routing configuration")
console = Console()


@app.command()
def show(
    config_file: Optional[Path] = typer.Option(None, "--config", "-c", help="Routing config YAML"),
):
    """Show the effective routing thresholds."""
    try:
        config = resolve_config(config_file)
    except ConfigurationError as e:
        console.print(f"[red]Configuration Error:[/red] {e}")
        raise typer.Exit(code=1)

    table = Table(title="Routing Thresholds", box=box.ROUNDED)
    table.add_column("Threshold", style="cyan bold")
    table.add_column("Value", justify="right")
    for name, value in config.thresholds.model_dump().items():
        table.add_row(name, str(value))
    table.add_row("default_time_to_market", str(config.default_time_to_market))
    table.add_row("unknown_classification", config.unknown_classification.value)
    console.print(table)


@app.command()
def init(
    path: Path = typer.Argument(Path(".intake-router/routing.yaml"), help="Where to write the config"),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file"),
):
    """Write the default routing configuration as YAML."""
    if path.exists() and not force:
        console.print(f"[yellow]Config already exists:[/yellow] {path} (use --force to overwrite)")
        raise typer.Exit(code=1)

    create_default_config(path)
    console.print(f"[green]Wrote default routing config to[/green] {path}")
