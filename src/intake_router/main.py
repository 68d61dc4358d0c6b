"""
Intake Router CLI
=================

Entry point for the intake-router command.
Routes structured specs to delivery paths and manages routing configuration.
"""

import sys

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from intake_router import __version__
from intake_router.cli.commands import config as config_commands
from intake_router.cli.commands.route import route
from intake_router.shared.infrastructure.logging import configure_logging

app = typer.Typer(
    name="intake-router",
    help="Route software intake requests to a delivery path",
    add_completion=False,
    no_args_is_help=True,
)

app.command(name="route")(route)
app.add_typer(config_commands.app, name="config")

console = Console()


@app.callback()
def _setup():
    configure_logging()


@app.command()
def version():
    """Show intake-router version info."""
    table = Table(show_header=False, box=None)
    table.add_row("Intake Router", f"[bold green]v{__version__}[/bold green]")
    table.add_row("Python", sys.version.split()[0])
    table.add_row("Platform", sys.platform)

    console.print(Panel(table, title="[bold blue]Intake Router[/bold blue]", expand=False))


def main():
    app()


if __name__ == "__main__":
    main()
