"""Pure coverage aggregation engine (no printing, no CLI)."""

from linecov.core.counts import calculate_count, total_count, uncovered_line_numbers
from linecov.core.metrics import get_coverage
from linecov.core.sorting import SortKey, SortStep, parse_sort_spec, sort_rows
from linecov.core.thresholds import GateResult, evaluate_minimum
from linecov.core.types import CoverageCell, FileCount, FileRecord, FileWarning, ReportRow

__all__ = [
    "CoverageCell",
    "FileCount",
    "FileRecord",
    "FileWarning",
    "GateResult",
    "ReportRow",
    "SortKey",
    "SortStep",
    "calculate_count",
    "evaluate_minimum",
    "get_coverage",
    "parse_sort_spec",
    "sort_rows",
    "total_count",
    "uncovered_line_numbers",
]
