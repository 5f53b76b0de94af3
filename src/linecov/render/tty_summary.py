from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING

from rich import box
from rich.console import Console
from rich.table import Table

from linecov.core.counts import total_count
from linecov.core.metrics import get_coverage

if TYPE_CHECKING:
    from collections.abc import Sequence

    from linecov.core.config import Settings
    from linecov.core.types import ReportRow


def _style_percent(pct: float, green: float, yellow: float) -> str:
    v = round(pct, 1)
    if v >= green:
        return f"[green]{v}%[/green]"
    if v >= yellow:
        return f"[yellow]{v}%[/yellow]"
    return f"[red]{v}%[/red]"


def _style_miss(n: int) -> str:
    return f"[red]{n}[/red]" if n else f"[green]{n}[/green]"


def render_tty_summary(
    rows: Sequence[ReportRow],
    settings: Settings,
    *,
    color: bool = True,
    green: float = 90.0,
    yellow: float = 75.0,
) -> str:
    """Render a Rich coverage table for already-sorted *rows*.

    Same data as the fixed-width summary; the total row is computed from
    summed counts.
    """
    no_relevant_as_covered = settings.coverage_options.no_relevant_as_covered
    table = Table(title="Test Coverage", box=box.SIMPLE_HEAVY, header_style="bold")

    table.add_column("Cov.", justify="right")
    table.add_column("File", overflow="fold", max_width=settings.file_column_width)
    table.add_column("Lines", justify="right")
    table.add_column("Relevant", justify="right")
    table.add_column("Missed", justify="right")

    for r in rows:
        pct = get_coverage(r.count.relevant, r.count.covered, no_relevant_as_covered=no_relevant_as_covered)
        table.add_row(
            _style_percent(pct, green, yellow),
            r.name,
            str(r.count.lines),
            str(r.count.relevant),
            _style_miss(r.count.missed),
        )

    table.add_section()

    totals = total_count(rows)
    total_pct = get_coverage(totals.relevant, totals.covered, no_relevant_as_covered=no_relevant_as_covered)
    table.add_row(
        f"[bold]{_style_percent(total_pct, green, yellow)}[/bold]",
        "[bold]TOTAL[/bold]",
        f"[bold]{totals.lines}[/bold]",
        f"[bold]{totals.relevant}[/bold]",
        f"[bold]{totals.missed}[/bold]",
    )

    buf = StringIO()
    console = Console(file=buf, force_terminal=color, no_color=not color, width=120)
    console.print(table)
    return buf.getvalue().rstrip()


__all__ = ["render_tty_summary"]
