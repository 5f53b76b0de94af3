"""Minimum total coverage gate."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GateResult:
    """Outcome of comparing total coverage against a configured minimum."""

    actual: float
    minimum: float | None
    passed: bool

    @property
    def message(self) -> str:
        if self.passed:
            return ""
        required = format_percent(self.minimum)
        actual = format_percent(self.actual)
        if actual == required:
            # rounding must not hide the shortfall
            actual = repr(float(self.actual))
        return f"FAILED: Expected minimum coverage of {required}%, got {actual}%."


def format_percent(value: float | None) -> str:
    """Render *value* rounded to one decimal, dropping a trailing ``.0``."""
    if value is None:
        return "n/a"
    rounded = round(float(value), 1)
    return str(int(rounded)) if rounded.is_integer() else str(rounded)


def evaluate_minimum(actual: float, minimum: float | None) -> GateResult:
    """Pass unless a *minimum* is configured and *actual* is strictly below it."""
    if minimum is None:
        return GateResult(actual=actual, minimum=None, passed=True)
    return GateResult(actual=actual, minimum=float(minimum), passed=not actual < minimum)


__all__ = ["GateResult", "evaluate_minimum", "format_percent"]
