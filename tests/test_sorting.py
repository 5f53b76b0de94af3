import pytest

from linecov.core.counts import build_rows
from linecov.core.sorting import SortDirection, SortKey, SortStep, parse_sort_spec, sort_rows
from linecov.core.types import ReportRow
from linecov.errors import SortSpecError
from tests.conftest import make_record


def _rows(spec: dict[str, list[object]]) -> list[ReportRow]:
    return build_rows(
        make_record(name, source="\n".join("x" for _ in cells), coverage=cells) for name, cells in spec.items()
    )


def _names(rows: list[ReportRow]) -> list[str]:
    return [row.name for row in rows]


@pytest.fixture
def rows() -> list[ReportRow]:
    return _rows({
        "a.ex": [0, 1],  # 50%, missed 1, lines 2
        "b.ex": [0],  # 0%, missed 1, lines 1
        "c.ex": [0, 0, 1],  # 33%, missed 2, lines 3
        "d.ex": [1, None, None, None],  # 100%, missed 0, lines 4
    })


@pytest.mark.parametrize(
    ("spec", "expected"),
    [
        ("cov", [SortStep(SortKey.COV, SortDirection.DESC)]),
        ("file:asc", [SortStep(SortKey.FILE, SortDirection.ASC)]),
        (
            "cov:asc,missed:desc",
            [SortStep(SortKey.COV, SortDirection.ASC), SortStep(SortKey.MISSED, SortDirection.DESC)],
        ),
        (" Lines : ASC ", [SortStep(SortKey.LINES, SortDirection.ASC)]),
    ],
)
def test_parse_sort_spec(spec: str, expected: list[SortStep]) -> None:
    assert parse_sort_spec(spec) == expected


@pytest.mark.parametrize(
    ("spec", "pattern"),
    [
        ("", "non-empty"),
        ("coverage", "unknown sort key"),
        ("cov:up", "unknown sort direction"),
        ("cov:asc:again", "invalid sort token"),
        ("cov,", "invalid sort token"),
        (":asc", "invalid sort token"),
    ],
)
def test_parse_sort_spec_rejects_invalid(spec: str, pattern: str) -> None:
    with pytest.raises(SortSpecError, match=pattern):
        parse_sort_spec(spec)


def test_sort_rows_defaults_to_file_name(rows: list[ReportRow]) -> None:
    assert _names(sort_rows(reversed(rows))) == ["a.ex", "b.ex", "c.ex", "d.ex"]


def test_sort_rows_single_key_defaults_to_descending(rows: list[ReportRow]) -> None:
    assert _names(sort_rows(rows, "lines")) == ["d.ex", "c.ex", "a.ex", "b.ex"]
    assert _names(sort_rows(rows, "file")) == ["d.ex", "c.ex", "b.ex", "a.ex"]


def test_sort_rows_last_key_is_primary(rows: list[ReportRow]) -> None:
    # missed desc first; the a/b tie is broken by cov asc
    assert _names(sort_rows(rows, "cov:asc,missed:desc")) == ["c.ex", "b.ex", "a.ex", "d.ex"]


def test_sort_rows_reversed_chain_changes_primary_key(rows: list[ReportRow]) -> None:
    assert _names(sort_rows(rows, "missed:desc,cov:asc")) == ["b.ex", "c.ex", "a.ex", "d.ex"]


def test_sort_rows_ties_keep_previous_order() -> None:
    tied = _rows({"z.ex": [1], "m.ex": [1], "a.ex": [1]})
    assert _names(sort_rows(tied, "cov:desc")) == ["z.ex", "m.ex", "a.ex"]
    assert _names(sort_rows(tied, "file:asc,cov:asc")) == ["a.ex", "m.ex", "z.ex"]


def test_sort_rows_cov_key_follows_no_relevant_policy() -> None:
    mixed = _rows({"empty.ex": [None, None], "half.ex": [0, 1]})
    assert _names(sort_rows(mixed, "cov:asc")) == ["half.ex", "empty.ex"]
    assert _names(sort_rows(mixed, "cov:asc", no_relevant_as_covered=False)) == ["empty.ex", "half.ex"]


def test_sort_rows_rejects_bad_spec(rows: list[ReportRow]) -> None:
    with pytest.raises(SortSpecError):
        sort_rows(rows, "name:asc")
