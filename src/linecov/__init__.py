"""Local coverage reporting from per-line hit counts."""

from linecov._meta import __version__, logger
from linecov.core.config import CoverageOptions, Settings, load_settings
from linecov.core.guard import SUMMARY_GUARD, SummaryGuard
from linecov.core.types import FileCount, FileRecord, ReportRow
from linecov.report import coverage, ensure_minimum_coverage, execute, print_summary, source

__all__ = [
    "SUMMARY_GUARD",
    "CoverageOptions",
    "FileCount",
    "FileRecord",
    "ReportRow",
    "Settings",
    "SummaryGuard",
    "__version__",
    "coverage",
    "ensure_minimum_coverage",
    "execute",
    "load_settings",
    "logger",
    "print_summary",
    "source",
]
