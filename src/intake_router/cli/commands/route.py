"""
Route command.
Score a structured spec file and print the delivery-path decision.
"""

import json
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import typer
import yaml
from rich import box
from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table

from intake_router.routing import (
    approval_requirements,
    compute_routing,
    load_routing_config,
    normalize_spec,
    score_level,
)
from intake_router.routing.domain.config import RoutingConfig
from intake_router.routing.domain.models import FACTOR_LABELS, FACTOR_ORDER, RoutingResult
from intake_router.shared.domain.exceptions import IntakeRouterError
from intake_router.shared.infrastructure.config import settings
from intake_router.shared.infrastructure.logging import get_logger

console = Console()
logger = get_logger(__name__)

_LEVEL_STYLES = {"Low": "green", "Medium": "yellow", "High": "red"}
_OUTPUT_FORMATS = ("table", "markdown", "md", "json")


def load_spec_file(spec_path: Path) -> Dict[str, Any]:
    """Read a spec from JSON or YAML (chosen by file suffix)."""
    content = spec_path.read_text(encoding="utf-8")
    if spec_path.suffix.lower() in (".yaml", ".yml"):
        data = yaml.safe_load(content)
    else:
        data = json.loads(content)
    if not isinstance(data, dict):
        raise ValueError(f"Spec file must contain an object, got {type(data).__name__}")
    return data


def resolve_config(config_file: Optional[Path]) -> RoutingConfig:
    """Explicit --config wins over INTAKE_ROUTER_ROUTING_CONFIG_PATH."""
    if config_file is not None:
        return load_routing_config(config_file)
    if settings.routing_config_path:
        return load_routing_config(Path(settings.routing_config_path))
    return load_routing_config(None)


def _render_table(result: RoutingResult, config: RoutingConfig) -> Table:
    table = Table(title="Score Breakdown", box=box.ROUNDED)
    table.add_column("Factor", style="cyan bold")
    table.add_column("Score", justify="right")
    table.add_column("Level")

    for name in FACTOR_ORDER:
        value = getattr(result.breakdown, name)
        level = score_level(value, config).value
        table.add_row(FACTOR_LABELS[name], str(value), f"[{_LEVEL_STYLES[level]}]{level}[/{_LEVEL_STYLES[level]}]")

    table.add_row(FACTOR_LABELS["time_to_market"], str(result.breakdown.time_to_market), "[dim]input[/dim]")
    return table


def route(
    spec_file: Path = typer.Argument(..., help="Structured spec file (JSON or YAML)"),
    time_to_market: Optional[float] = typer.Option(
        None, "--time-to-market", "-t", help="Time-to-market urgency 0-100 (default from config)"
    ),
    config_file: Optional[Path] = typer.Option(None, "--config", "-c", help="Routing config YAML"),
    format: str = typer.Option("table", "--format", "-f", help="Output format: table, markdown, json"),
):
    """
    Route a structured spec to a delivery path.

    Examples:
        intake-router route spec.json
        intake-router route spec.yaml --time-to-market 90
        intake-router route spec.json --format json
    """
    fmt = format.lower().strip()
    if fmt not in _OUTPUT_FORMATS:
        raise typer.BadParameter(
            f"must be one of: {', '.join(_OUTPUT_FORMATS)}", param_hint="'--format'"
        )

    if not spec_file.exists():
        console.print(f"[red]Error:[/red] File not found: {spec_file}")
        raise typer.Exit(code=1)

    try:
        raw = load_spec_file(spec_file)
    except (ValueError, yaml.YAMLError) as e:
        console.print(f"[red]Spec File Error:[/red] {e}")
        raise typer.Exit(code=1)

    try:
        config = resolve_config(config_file)
        spec = normalize_spec(raw, config)
        result = compute_routing(spec, time_to_market=time_to_market, config=config)
    except IntakeRouterError as e:
        logger.error("routing_failed", spec_file=str(spec_file), error=str(e), **e.context)
        console.print(f"[red]Routing Error:[/red] {e}")
        raise typer.Exit(code=1)

    approval = approval_requirements(result, spec, config)

    if fmt == "json":
        payload = result.to_json()
        payload["approval"] = approval.to_json()
        sys.stdout.write(json.dumps(payload, indent=2, ensure_ascii=False) + "\n")
        return
    if fmt in ("md", "markdown"):
        sys.stdout.write(result.explanation)
        return

    console.print(Panel.fit(
        f"[bold cyan]{result.path.label}[/bold cyan]\n"
        f"[dim]Path:[/dim] {result.path.value}   [dim]Score:[/dim] {result.score}",
        title="Routing Recommendation",
        border_style="cyan",
    ))
    console.print(_render_table(result, config))
    console.print(Markdown(result.explanation))

    approvers = ", ".join(role.value for role in approval.approvers)
    status = "[green]auto-approve[/green]" if approval.auto_approve else "[yellow]manual approval[/yellow]"
    console.print(f"\n[bold]Approval:[/bold] {approvers} ({status})")
    for reason in approval.reasons:
        console.print(f"  [dim]- {reason}[/dim]")
