"""Per-line classification and per-file aggregation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from linecov.core.types import FileCount, ReportRow
from linecov.errors import InvalidCoverageDataError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from linecov.core.types import FileRecord


def _is_number(value: object) -> bool:
    # bool is an int subclass but never a hit count
    return isinstance(value, int | float) and not isinstance(value, bool)


def calculate_count(coverage: Iterable[object]) -> FileCount:
    """Fold a file's coverage cells into a :class:`FileCount`.

    ``None`` is irrelevant, ``0`` is uncovered and any other number is covered.

    Raises
    ------
    InvalidCoverageDataError
        On the first cell that is neither ``None`` nor a number.
        Nothing is returned for the file in that case.
    """
    lines = relevant = covered = 0
    for cell in coverage:
        lines += 1
        if cell is None:
            continue
        if not _is_number(cell):
            raise InvalidCoverageDataError(cell)
        relevant += 1
        if cell != 0:
            covered += 1
    return FileCount(lines=lines, relevant=relevant, covered=covered)


def build_rows(records: Iterable[FileRecord]) -> list[ReportRow]:
    """Pair every record with its counts, in input order."""
    return [ReportRow(record=rec, count=calculate_count(rec.coverage)) for rec in records]


def total_count(rows: Iterable[ReportRow]) -> FileCount:
    """Sum raw counts over *rows*."""
    return sum((row.count for row in rows), FileCount())


def uncovered_line_numbers(record: FileRecord) -> list[int]:
    """Return 1-indexed numbers of source lines whose cell is exactly zero."""
    return [
        number
        for number, (_line, cell) in enumerate(zip(record.lines, record.coverage, strict=False), start=1)
        if _is_number(cell) and cell == 0
    ]


__all__ = ["build_rows", "calculate_count", "total_count", "uncovered_line_numbers"]
