from __future__ import annotations

import json
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner

from linecov.core.config import CoverageOptions, Settings
from linecov.core.guard import SummaryGuard
from linecov.core.types import FileRecord

CONTENT = "defmodule Test do\n  def test do\n  end\nend\n"
COUNTS = (0, 1, None, None)


def make_record(
    name: str = "test/fixtures/test.ex",
    coverage: Sequence[object] = COUNTS,
    source: str = CONTENT,
    **kwargs: Any,
) -> FileRecord:
    return FileRecord(name=name, source=source, coverage=tuple(coverage), **kwargs)


def make_settings(**coverage_options: Any) -> Settings:
    return Settings(file_column_width=40, coverage_options=CoverageOptions(**coverage_options))


@pytest.fixture
def source_info() -> list[FileRecord]:
    return [make_record()]


@pytest.fixture
def guard() -> SummaryGuard:
    return SummaryGuard()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Typer CLI runner for invoking the command-line interface."""
    return CliRunner()


@pytest.fixture
def coverage_json_file(tmp_path: Path) -> Callable[..., Path]:
    def write(document: Any, *, filename: str = "coverage.json") -> Path:
        path = tmp_path / filename
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return write
