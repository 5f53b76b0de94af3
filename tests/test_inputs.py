from collections.abc import Callable
from pathlib import Path

import pytest

from linecov.core.types import FileRecord, FileWarning
from linecov.errors import CoverageInputNotFoundError, InvalidCoverageInputError
from linecov.inputs.records import load_records, records_from_document


def test_load_records_from_source_files(coverage_json_file: Callable[..., Path]) -> None:
    path = coverage_json_file({
        "source_files": [
            {
                "name": "lib/a.ex",
                "source": "a\nb",
                "coverage": [0, None],
                "warnings": [{"line_number": 1, "message": "unused"}],
            }
        ]
    })
    assert load_records(path) == [
        FileRecord(
            name="lib/a.ex",
            source="a\nb",
            coverage=(0, None),
            warnings=(FileWarning(line_number=1, message="unused"),),
        )
    ]


def test_load_records_accepts_bare_list(coverage_json_file: Callable[..., Path]) -> None:
    path = coverage_json_file({"source_files": []})
    assert load_records(path) == []
    bare = coverage_json_file([{"name": "x", "source": "", "coverage": []}], filename="bare.json")
    assert [r.name for r in load_records(bare)] == ["x"]


def test_load_records_keeps_cells_for_the_aggregator(coverage_json_file: Callable[..., Path]) -> None:
    path = coverage_json_file({"source_files": [{"name": "x", "source": "a", "coverage": ["invalid"]}]})
    assert load_records(path)[0].coverage == ("invalid",)


def test_load_records_missing_file(tmp_path: Path) -> None:
    with pytest.raises(CoverageInputNotFoundError, match="not found"):
        load_records(tmp_path / "missing.json")


def test_load_records_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "coverage.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(InvalidCoverageInputError, match="invalid JSON"):
        load_records(path)


@pytest.mark.parametrize(
    "document",
    [
        {"files": []},
        {"source_files": [{"name": "x", "source": "a"}]},
        {"source_files": [{"name": 1, "source": "a", "coverage": []}]},
        [{"name": "x", "source": "a", "coverage": [], "warnings": [{"message": "m"}]}],
        "nope",
    ],
)
def test_records_from_document_rejects_bad_structure(document: object) -> None:
    with pytest.raises(InvalidCoverageInputError, match="invalid coverage document"):
        records_from_document(document)
