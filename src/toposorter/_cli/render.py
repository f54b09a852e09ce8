"""Rich rendering of validation reports."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from rich.console import Console

    from toposorter._keyed import KeyedReport


def _join(keys: list[str]) -> str:
    return escape(" -> ".join(keys))


def render_report(report: KeyedReport[str], console: Console) -> None:
    """Render cycles and roots found by the validator.

    Args:
        report: The validator's report.
        console: Rich Console to output to.

    """
    if report.success:
        console.print(f"[green]✓ Graph is valid ({len(report.order)} vertices)[/green]")
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Problem", style="bold")
    table.add_column("Keys")

    for cycle in report.cycles:
        table.add_row("[red]cycle[/red]", _join(cycle))
    if len(report.roots) > 1:
        table.add_row("[yellow]multiple roots[/yellow]", escape(", ".join(report.roots)))

    console.print(table)
