"""
Human-readable output formatting.

Centralizes all CLI output so commands stay thin. Results go to stdout,
errors to stderr.
"""
from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..models import PathSet, Wildcard
from ..schema import Configuration
from .facade import DeployResult

_console = Console()
_err_console = Console(stderr=True)


def print_configuration(config: Configuration) -> None:
    """Print the resolved configuration as a two-column table."""
    table = Table(title="Configuration")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="yellow")

    for name, value in config.model_dump(by_alias=True, mode="json").items():
        if isinstance(value, list):
            value = " ".join(value) or "(none)"
        elif value is None:
            value = "(none)"
        table.add_row(name, escape(str(value)))

    _console.print(table)


def print_changes(result: DeployResult) -> None:
    """List the changes reported by the sync."""
    if not result.changes:
        _console.print("No changes.")
        return

    _console.print(f"[bold]Changes:[/] {len(result.changes)}")
    for change in result.changes:
        _console.print(f"  {change.kind.value:<8} {escape(change.path)}")


def print_plan(result: DeployResult) -> None:
    """Describe the invalidation plan and whether it was applied."""
    plan = result.plan
    if isinstance(plan, Wildcard):
        label = "wildcard (/*)"
    elif isinstance(plan, PathSet) and plan.is_empty():
        label = "none"
    else:
        label = f"{len(plan.paths)} path(s)"

    _console.print(f"[bold]Invalidation:[/] {label}")
    if isinstance(plan, PathSet):
        for path in plan.paths:
            _console.print(f"  {escape(path)}")


def print_deploy_summary(result: DeployResult) -> None:
    print_changes(result)
    print_plan(result)
    if result.invalidated:
        _console.print("[green]Invalidation requested.[/]")
    elif not result.plan.is_empty():
        _console.print("[dim]Preview only; nothing was invalidated.[/]")


def print_error(exc: BaseException) -> None:
    """Print an exception's diagnostic text to stderr."""
    _err_console.print(f"[bold red]Error:[/] {escape(str(exc))}")
