import math

import pytest

from linecov.core.counts import build_rows, calculate_count, total_count, uncovered_line_numbers
from linecov.core.types import FileCount
from linecov.errors import InvalidCoverageDataError
from tests.conftest import make_record


def test_calculate_count_classifies_lines() -> None:
    assert calculate_count([0, 1, None, None]) == FileCount(lines=4, relevant=2, covered=1)


def test_calculate_count_empty() -> None:
    assert calculate_count([]) == FileCount(lines=0, relevant=0, covered=0)


def test_calculate_count_hit_counts_above_one_are_covered() -> None:
    assert calculate_count([12, 0.5, 3, None]) == FileCount(lines=4, relevant=3, covered=3)


@pytest.mark.parametrize(
    "cells",
    [
        [None, None, None],
        [0, 0, 0],
        [1, 0, None, 7, 0, None, 2],
        [0.0, 3.0, None],
    ],
)
def test_calculate_count_invariants(cells: list[object]) -> None:
    count = calculate_count(cells)
    uncovered = sum(1 for c in cells if c == 0)
    assert count.relevant == count.covered + uncovered
    assert 0 <= count.covered <= count.relevant <= count.lines == len(cells)


@pytest.mark.parametrize("bad", ["invalid", True, "3", [1], {"hits": 1}])
def test_calculate_count_rejects_invalid_cells(bad: object) -> None:
    with pytest.raises(InvalidCoverageDataError, match="Invalid coverage data") as excinfo:
        calculate_count([0, 1, None, bad])
    assert excinfo.value.value is bad


def test_build_rows_aborts_on_any_invalid_file() -> None:
    records = [make_record("a.ex"), make_record("b.ex", coverage=[0, 1, None, "invalid"])]
    with pytest.raises(InvalidCoverageDataError):
        build_rows(records)


def test_total_count_sums_raw_counts() -> None:
    rows = build_rows([make_record("a.ex"), make_record("b.ex", coverage=[1, 1, None, None])])
    assert total_count(rows) == FileCount(lines=8, relevant=4, covered=3)
    assert total_count([]) == FileCount()


def test_uncovered_line_numbers_are_one_indexed() -> None:
    record = make_record(coverage=[0, 1, None, 0])
    assert uncovered_line_numbers(record) == [1, 4]


def test_uncovered_line_numbers_drop_excess_cells() -> None:
    # two source lines, four cells: cells past the source are ignored
    record = make_record(source="a\nb", coverage=[1, 0, 0, 0])
    assert uncovered_line_numbers(record) == [2]


@pytest.mark.parametrize("odd", [-1, -0.5, math.nan, math.inf])
def test_calculate_count_any_nonzero_number_is_covered(odd: float) -> None:
    assert calculate_count([0, 1, None, odd]) == FileCount(lines=4, relevant=3, covered=2)


def test_uncovered_line_numbers_only_exact_zero() -> None:
    record = make_record(coverage=[0.0, -1, None, 0])
    assert uncovered_line_numbers(record) == [1, 4]
