"""Centralised exception hierarchy for linecov."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from linecov.core.thresholds import GateResult


class LinecovError(Exception):
    """Base class for all custom linecov exceptions."""


class InvalidCoverageDataError(LinecovError):
    """A coverage cell is neither absent nor a usable hit count."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Invalid coverage data - {value!r}")
        self.value = value


class SortSpecError(LinecovError, ValueError):
    """The ``--sort`` chain names an unknown key or is malformed."""


class ConfigError(LinecovError):
    """A configuration value has the wrong type or is out of range."""


class CoverageInputError(LinecovError):
    """Base class for errors related to the coverage input document."""


class CoverageInputNotFoundError(CoverageInputError):
    """Coverage input file could not be located on disk."""


class InvalidCoverageInputError(CoverageInputError):
    """Coverage input file was found but is not a valid coverage document."""


class CoverageGateError(LinecovError):
    """Total coverage is below the configured minimum."""

    def __init__(self, result: GateResult) -> None:
        super().__init__(result.message)
        self.result = result


__all__ = [
    "ConfigError",
    "CoverageGateError",
    "CoverageInputError",
    "CoverageInputNotFoundError",
    "InvalidCoverageDataError",
    "InvalidCoverageInputError",
    "LinecovError",
    "SortSpecError",
]
