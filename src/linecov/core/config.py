"""Central configuration and constants for ``linecov``.

Settings are read from the ``[tool.linecov]`` table of ``pyproject.toml``::

    [tool.linecov]
    print_summary = true
    print_files = true
    file_column_width = 40

    [tool.linecov.coverage_options]
    report_uncovered = false
    minimum_coverage = 90
    treat_no_relevant_lines_as_covered = true
"""

from __future__ import annotations

import json
import logging
import tomllib
from dataclasses import dataclass, field, fields
from functools import cache
from importlib import resources
from pathlib import Path
from typing import Any

from linecov.errors import ConfigError

logger = logging.getLogger(__name__)

# Default logging format used by the CLI entry point.
LOG_FORMAT = "%(levelname)s: %(message)s"

DEFAULT_FILE_COLUMN_WIDTH = 40


@dataclass(frozen=True, slots=True)
class CoverageOptions:
    """Options governing percentages, the gate, and the uncovered block."""

    report_uncovered: bool = False
    minimum_coverage: float | None = None
    # tri-state: None behaves like True
    treat_no_relevant_lines_as_covered: bool | None = None

    @property
    def no_relevant_as_covered(self) -> bool:
        return self.treat_no_relevant_lines_as_covered is not False


@dataclass(frozen=True, slots=True)
class Settings:
    """Everything the report needs to know about presentation and gating."""

    print_summary: bool = True
    print_files: bool = True
    file_column_width: int = DEFAULT_FILE_COLUMN_WIDTH
    coverage_options: CoverageOptions = field(default_factory=CoverageOptions)


def _check_bool(table: str, key: str, value: Any) -> bool:
    if not isinstance(value, bool):
        msg = f"[{table}] {key} must be a boolean, got {value!r}"
        raise ConfigError(msg)
    return value


def _check_number(table: str, key: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, int | float):
        msg = f"[{table}] {key} must be a number, got {value!r}"
        raise ConfigError(msg)
    return float(value)


def _coverage_options_from_table(data: dict[str, Any]) -> CoverageOptions:
    table = "tool.linecov.coverage_options"
    known = {f.name for f in fields(CoverageOptions)}
    for key in sorted(set(data) - known):
        logger.warning("Ignoring unknown option [%s] %s", table, key)

    minimum = data.get("minimum_coverage")
    treat = data.get("treat_no_relevant_lines_as_covered")
    return CoverageOptions(
        report_uncovered=_check_bool(table, "report_uncovered", data.get("report_uncovered", False)),
        minimum_coverage=None if minimum is None else _check_number(table, "minimum_coverage", minimum),
        treat_no_relevant_lines_as_covered=(
            None if treat is None else _check_bool(table, "treat_no_relevant_lines_as_covered", treat)
        ),
    )


def settings_from_mapping(data: dict[str, Any]) -> Settings:
    """Build :class:`Settings` from an already-parsed ``[tool.linecov]`` table."""
    table = "tool.linecov"
    width = data.get("file_column_width", DEFAULT_FILE_COLUMN_WIDTH)
    if isinstance(width, bool) or not isinstance(width, int) or width < 1:
        msg = f"[{table}] file_column_width must be a positive integer, got {width!r}"
        raise ConfigError(msg)
    options = data.get("coverage_options", {})
    if not isinstance(options, dict):
        msg = f"[{table}] coverage_options must be a table, got {options!r}"
        raise ConfigError(msg)
    return Settings(
        print_summary=_check_bool(table, "print_summary", data.get("print_summary", True)),
        print_files=_check_bool(table, "print_files", data.get("print_files", True)),
        file_column_width=width,
        coverage_options=_coverage_options_from_table(options),
    )


def load_settings(pyproject: Path | None = None) -> Settings:
    """Return settings from *pyproject* (default ``./pyproject.toml``).

    A missing file or a missing ``[tool.linecov]`` table yields defaults; an
    unparsable file is logged and also yields defaults.
    """
    path = pyproject if pyproject is not None else Path("./pyproject.toml").resolve()
    if not path.exists():
        logger.debug("No configuration file at %s; using defaults", path)
        return Settings()
    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Failed to parse %s: %s", path, e)
        return Settings()

    section = data.get("tool", {}).get("linecov")
    if section is None:
        return Settings()
    if not isinstance(section, dict):
        msg = f"[tool.linecov] in {path} must be a table"
        raise ConfigError(msg)
    logger.debug("Using settings from %s", path)
    return settings_from_mapping(section)


@cache
def get_schema() -> dict[str, object]:
    """Load and cache the JSON schema for coverage input documents."""
    return json.loads(resources.files("linecov.data").joinpath("schema.json").read_text(encoding="utf-8"))


__all__ = [
    "DEFAULT_FILE_COLUMN_WIDTH",
    "LOG_FORMAT",
    "CoverageOptions",
    "Settings",
    "get_schema",
    "load_settings",
    "settings_from_mapping",
]
