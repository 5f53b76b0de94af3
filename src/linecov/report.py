"""Print the local coverage summary, optional source detail, and apply the gate.

This is the orchestration layer: it turns records into sorted rows, hands
them to the renderers, writes the result, and raises
:class:`~linecov.errors.CoverageGateError` when total coverage falls short.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Literal, TextIO

from linecov._meta import logger
from linecov.core.config import Settings
from linecov.core.counts import build_rows, total_count
from linecov.core.guard import SUMMARY_GUARD
from linecov.core.metrics import get_coverage
from linecov.core.sorting import sort_rows
from linecov.core.thresholds import GateResult, evaluate_minimum
from linecov.errors import CoverageGateError
from linecov.render.source import highlight
from linecov.render.text import render_coverage, render_warnings
from linecov.render.tty_summary import render_tty_summary

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from linecov.core.guard import SummaryGuard
    from linecov.core.types import FileRecord, ReportRow

SummaryFormat = Literal["text", "rich"]


def report_rows(records: Iterable[FileRecord], settings: Settings, sort: str | None = None) -> list[ReportRow]:
    """Aggregate and order *records*; invalid coverage data aborts the whole report."""
    return sort_rows(
        build_rows(records),
        sort,
        no_relevant_as_covered=settings.coverage_options.no_relevant_as_covered,
    )


def coverage(
    records: Iterable[FileRecord],
    settings: Settings | None = None,
    sort: str | None = None,
    *,
    color: bool = True,
) -> str:
    """Format the coverage stats of *records* into the summary text."""
    settings = settings or Settings()
    return render_coverage(report_rows(records, settings, sort), settings, color=color)


def warnings(records: Iterable[FileRecord], *, color: bool = True) -> str:
    return render_warnings(records, color=color)


def source(records: Iterable[FileRecord], patterns: Sequence[str] | None = None, *, color: bool = True) -> str:
    """Format the source of files matching *patterns* with coverage colouring."""
    return highlight(records, patterns, color=color)


def total_coverage(records: Iterable[FileRecord], settings: Settings | None = None) -> float:
    settings = settings or Settings()
    totals = total_count(build_rows(records))
    return get_coverage(
        totals.relevant,
        totals.covered,
        no_relevant_as_covered=settings.coverage_options.no_relevant_as_covered,
    )


def print_summary(
    records: Sequence[FileRecord],
    settings: Settings | None = None,
    *,
    sort: str | None = None,
    guard: SummaryGuard | None = None,
    out: TextIO | None = None,
    color: bool = True,
    fmt: SummaryFormat = "text",
) -> bool:
    """Print the summary and warnings at most once per *guard* lifetime.

    Returns ``True`` if anything was printed.
    """
    settings = settings or Settings()
    guard = guard or SUMMARY_GUARD
    out = out or sys.stdout
    if not settings.print_summary:
        return False
    if guard.already_printed():
        logger.debug("summary already printed; skipping")
        return False

    # render before claiming so invalid data leaves the guard untouched
    rows = report_rows(records, settings, sort)
    if fmt == "rich":
        text = render_tty_summary(rows, settings, color=color)
    else:
        text = render_coverage(rows, settings, color=color)
    if not guard.claim():
        return False
    print(text, file=out)
    print(render_warnings(records, color=color), end="", file=out)
    return True


def ensure_minimum_coverage(
    records: Iterable[FileRecord],
    settings: Settings | None = None,
    *,
    out: TextIO | None = None,
) -> GateResult:
    """Compare total coverage against ``minimum_coverage``.

    Raises
    ------
    CoverageGateError
        After printing the failure message, when coverage is below the minimum.
    """
    settings = settings or Settings()
    result = evaluate_minimum(total_coverage(records, settings), settings.coverage_options.minimum_coverage)
    logger.debug("coverage gate: actual=%s minimum=%s passed=%s", result.actual, result.minimum, result.passed)
    if not result.passed:
        print(result.message, file=out or sys.stdout)
        raise CoverageGateError(result)
    return result


def execute(
    records: Sequence[FileRecord],
    settings: Settings | None = None,
    *,
    sort: str | None = None,
    detail: bool = False,
    patterns: Sequence[str] | None = None,
    guard: SummaryGuard | None = None,
    out: TextIO | None = None,
    color: bool = True,
    fmt: SummaryFormat = "text",
) -> GateResult:
    """Print the summary, optionally the highlighted source, then apply the gate."""
    settings = settings or Settings()
    out = out or sys.stdout
    print_summary(records, settings, sort=sort, guard=guard, out=out, color=color, fmt=fmt)
    if detail:
        print(source(records, patterns, color=color), file=out)
    return ensure_minimum_coverage(records, settings, out=out)


__all__ = [
    "coverage",
    "ensure_minimum_coverage",
    "execute",
    "print_summary",
    "report_rows",
    "source",
    "total_coverage",
    "warnings",
]
