"""Ordering of report rows.

Without a sort chain rows are ordered by file name. A chain such as
``"cov:asc,missed:desc"`` is applied as a series of stable sorts, one per
key in listed order, so the *last* listed key is the primary key and earlier
keys only break its ties.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from linecov.core.metrics import get_coverage
from linecov.errors import SortSpecError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from linecov.core.types import ReportRow

logger = logging.getLogger(__name__)


class SortKey(StrEnum):
    """Sortable report columns."""

    COV = "cov"
    FILE = "file"
    LINES = "lines"
    RELEVANT = "relevant"
    MISSED = "missed"


class SortDirection(StrEnum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True, slots=True)
class SortStep:
    key: SortKey
    direction: SortDirection = SortDirection.DESC


def parse_sort_spec(spec: str) -> list[SortStep]:
    """Parse a comma-separated ``key[:direction]`` chain, in listed order.

    A missing direction means descending.

    Raises
    ------
    SortSpecError
        If the chain is empty or any token has an unknown key or direction.
    """
    if not spec or not spec.strip():
        msg = "sort specification must be non-empty"
        raise SortSpecError(msg)

    steps: list[SortStep] = []
    for raw in spec.split(","):
        token = raw.strip()
        parts = token.split(":")
        if len(parts) > 2 or not parts[0]:  # noqa: PLR2004
            msg = f"invalid sort token: {token!r}"
            raise SortSpecError(msg)
        try:
            key = SortKey(parts[0].lower())
        except ValueError as exc:
            choices = ", ".join(k.value for k in SortKey)
            msg = f"unknown sort key {parts[0]!r} in {token!r}. Available keys: {choices}"
            raise SortSpecError(msg) from exc
        if len(parts) == 1:
            steps.append(SortStep(key))
            continue
        try:
            direction = SortDirection(parts[1].lower())
        except ValueError as exc:
            msg = f"unknown sort direction {parts[1]!r} in {token!r}; expected 'asc' or 'desc'"
            raise SortSpecError(msg) from exc
        steps.append(SortStep(key, direction))
    return steps


def _accessor(key: SortKey, *, no_relevant_as_covered: bool) -> Callable[[ReportRow], float | int | str]:
    if key is SortKey.COV:
        return lambda row: get_coverage(
            row.count.relevant, row.count.covered, no_relevant_as_covered=no_relevant_as_covered
        )
    if key is SortKey.FILE:
        return lambda row: row.name
    if key is SortKey.LINES:
        return lambda row: row.count.lines
    if key is SortKey.RELEVANT:
        return lambda row: row.count.relevant
    return lambda row: row.count.missed


def sort_rows(
    rows: Iterable[ReportRow],
    spec: str | None = None,
    *,
    no_relevant_as_covered: bool = True,
) -> list[ReportRow]:
    """Return *rows* ordered by name, or by the sort chain *spec* if given."""
    if not spec:
        return sorted(rows, key=lambda row: row.name)

    steps = parse_sort_spec(spec)
    ordered = list(rows)
    for step in steps:
        accessor = _accessor(step.key, no_relevant_as_covered=no_relevant_as_covered)
        ordered.sort(key=accessor, reverse=step.direction is SortDirection.DESC)
    logger.debug("sorted %d rows by %s", len(ordered), ", ".join(f"{s.key}:{s.direction}" for s in steps))
    return ordered


__all__ = ["SortDirection", "SortKey", "SortStep", "parse_sort_spec", "sort_rows"]
