"""Shared record types used across linecov."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

# ---------------------------------------------------------------------------
# Common type aliases
# ---------------------------------------------------------------------------

CoverageCell: TypeAlias = int | float | None
"""Per-line signal: ``None`` irrelevant, ``0`` uncovered, positive hit count covered."""


# ---------------------------------------------------------------------------
# Input records
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class FileWarning:
    """Collector warning attached to a 0-indexed line of a file."""

    line_number: int
    message: str


@dataclass(frozen=True, slots=True)
class FileRecord:
    """One source file as produced by the collection step.

    ``coverage`` is positional: cell ``i`` belongs to line ``i + 1`` of
    ``source``. The two sequences are zipped, never assumed equal in length.
    """

    name: str
    source: str
    coverage: tuple[CoverageCell, ...]
    warnings: tuple[FileWarning, ...] = ()

    @property
    def lines(self) -> list[str]:
        return self.source.split("\n")


# ---------------------------------------------------------------------------
# Derived counts
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class FileCount:
    """Line totals for one file (or the sum over many)."""

    lines: int = 0
    relevant: int = 0
    covered: int = 0

    @property
    def missed(self) -> int:
        return self.relevant - self.covered

    def __add__(self, other: FileCount) -> FileCount:
        return FileCount(
            lines=self.lines + other.lines,
            relevant=self.relevant + other.relevant,
            covered=self.covered + other.covered,
        )


@dataclass(frozen=True, slots=True)
class ReportRow:
    """A file record paired with its counts; the unit sorted and rendered."""

    record: FileRecord
    count: FileCount

    @property
    def name(self) -> str:
        return self.record.name


__all__ = ["CoverageCell", "FileCount", "FileRecord", "FileWarning", "ReportRow"]
