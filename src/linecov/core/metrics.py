from __future__ import annotations

FULL_COVERAGE = 100.0
NO_COVERAGE = 0.0


def get_coverage(relevant: int, covered: int, *, no_relevant_as_covered: bool = True) -> float:
    """Return the coverage percentage for *covered* out of *relevant* lines.

    A file without relevant lines is neither proven broken nor proven
    correct; *no_relevant_as_covered* decides between 100.0 and 0.0.
    The value is not rounded; rounding happens at display time.
    """
    if relevant == 0:
        return FULL_COVERAGE if no_relevant_as_covered else NO_COVERAGE
    return FULL_COVERAGE * covered / relevant


__all__ = ["FULL_COVERAGE", "NO_COVERAGE", "get_coverage"]
