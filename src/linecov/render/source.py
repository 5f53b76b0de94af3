from __future__ import annotations

from typing import TYPE_CHECKING

from linecov.render.colors import colors

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from linecov.core.types import CoverageCell, FileRecord


def filter_records(records: Iterable[FileRecord], patterns: Sequence[str] | None) -> list[FileRecord]:
    """Keep records whose name contains any of *patterns*; no patterns keeps all."""
    if not patterns:
        return list(records)
    return [rec for rec in records if any(pattern in rec.name for pattern in patterns)]


def _colorize_line(line: str, cell: CoverageCell, c: dict[str, str]) -> str:
    if cell is None:
        return line
    if cell == 0:
        return f"{c['RED']}{line}{c['RESET']}"
    return f"{c['GREEN']}{line}{c['RESET']}"


def _format_source(record: FileRecord, c: dict[str, str]) -> str:
    banner = f"\n{c['YELLOW']}--------{record.name}--------{c['RESET']}\n"
    body = "\n".join(
        _colorize_line(line, cell, c) for line, cell in zip(record.lines, record.coverage, strict=False)
    )
    return banner + body


def highlight(
    records: Iterable[FileRecord],
    patterns: Sequence[str] | None = None,
    *,
    color: bool = True,
) -> str:
    """Render source text of matching files, red for uncovered and green for covered lines.

    Lines and cells are paired by position; surplus on either side is dropped.
    """
    c = colors(enabled=color)
    return "\n".join(_format_source(rec, c) for rec in filter_records(records, patterns))


__all__ = ["filter_records", "highlight"]
