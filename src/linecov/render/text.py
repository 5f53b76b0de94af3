"""Fixed-width text rendering of the coverage summary.

Layout in table mode::

    ----------------
    COV    FILE                                        LINES RELEVANT   MISSED
     50.0% lib/app.py                                      4        2        1
    [TOTAL]  50.0%
    ----------------

followed, when enabled, by a yellow ``UNCOVERED FILES`` block. A file joins
that block when its unrounded percentage is below 100, so 99.96% is listed
there as ``100.0%``. With
``print_files`` off only ``Test Coverage [TOTAL]  50.0%`` is produced.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from linecov.core.counts import total_count, uncovered_line_numbers
from linecov.core.metrics import FULL_COVERAGE, get_coverage
from linecov.render.colors import colors

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from linecov.core.config import Settings
    from linecov.core.types import FileCount, FileRecord, ReportRow

RULE = "-" * 16
PCT_WIDTH = 5
NUM_WIDTH = 8


# --------------------------- Column helpers ----------------------------------
def fit_left(text: str, width: int) -> str:
    """Left-align *text* in exactly *width* columns, truncating if longer."""
    return text[:width].ljust(width)


def fit_right(text: str, width: int) -> str:
    """Right-align *text* in at least *width* columns."""
    return text.rjust(width)


def _table_percent(value: float) -> str:
    # shortest repr of the one-decimal value: "50.0", "100.0", "33.3"
    return repr(round(value, 1))


def _percent(count: FileCount, settings: Settings) -> float:
    return get_coverage(
        count.relevant,
        count.covered,
        no_relevant_as_covered=settings.coverage_options.no_relevant_as_covered,
    )


# --------------------------- Table -------------------------------------------
def _header(width: int) -> str:
    return " ".join([
        fit_left("COV", PCT_WIDTH + 1),
        fit_left("FILE", width),
        fit_right("LINES", NUM_WIDTH),
        fit_right("RELEVANT", NUM_WIDTH),
        fit_right("MISSED", NUM_WIDTH),
    ])


def _body_line(row: ReportRow, settings: Settings) -> str:
    count = row.count
    pct = fit_right(_table_percent(_percent(count, settings)), PCT_WIDTH)
    return " ".join([
        f"{pct}%",
        fit_left(row.name, settings.file_column_width),
        fit_right(str(count.lines), NUM_WIDTH),
        fit_right(str(count.relevant), NUM_WIDTH),
        fit_right(str(count.missed), NUM_WIDTH),
    ])


def _total_line(rows: Sequence[ReportRow], settings: Settings) -> str:
    pct = _percent(total_count(rows), settings)
    return f"[TOTAL] {fit_right(_table_percent(pct), PCT_WIDTH)}%"


# --------------------------- Uncovered block ---------------------------------
def _format_line_numbers(record: FileRecord) -> str:
    return ", ".join(f"L{number}" for number in uncovered_line_numbers(record))


def _uncovered_line(row: ReportRow, settings: Settings) -> str:
    pct = _percent(row.count, settings)
    return f"{pct:5.1f}% {fit_left(row.name, settings.file_column_width)} {_format_line_numbers(row.record)}"


def _uncovered_block(rows: Sequence[ReportRow], settings: Settings, *, color: bool) -> str:
    if not settings.coverage_options.report_uncovered:
        return ""
    lines = [
        _uncovered_line(row, settings) for row in rows if _percent(row.count, settings) < FULL_COVERAGE
    ]
    if not lines:
        return ""
    c = colors(enabled=color)
    return f"\n{c['YELLOW']}UNCOVERED FILES\n" + "\n".join(lines) + f"{c['RESET']}\n"


# --------------------------- Entry points ------------------------------------
def render_coverage(rows: Sequence[ReportRow], settings: Settings, *, color: bool = True) -> str:
    """Return the summary for already-sorted *rows*.

    The total is computed from summed raw counts, never from averaging
    per-file percentages.
    """
    if not settings.print_files:
        return f"Test Coverage {_total_line(rows, settings)}\n"

    body = "\n".join(_body_line(row, settings) for row in rows)
    return (
        f"{RULE}\n"
        f"{_header(settings.file_column_width)}\n"
        f"{body}\n"
        f"{_total_line(rows, settings)}\n"
        f"{RULE}"
        f"{_uncovered_block(rows, settings, color=color)}"
    )


def render_warnings(records: Iterable[FileRecord], *, color: bool = True) -> str:
    """Return collector warnings as ``warning: <message>`` / ``  <file>:<line>`` pairs."""
    c = colors(enabled=color)
    return "".join(
        f"{c['YELLOW']}warning:{c['RESET']} {w.message}\n  {record.name}:{w.line_number + 1}\n"
        for record in records
        for w in record.warnings
    )


__all__ = ["fit_left", "fit_right", "render_coverage", "render_warnings"]
