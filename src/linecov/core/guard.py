from __future__ import annotations

import threading


class SummaryGuard:
    """Process-lifetime "summary already printed" flag.

    ``claim`` performs the check-then-set under a lock so concurrent callers
    cannot both print.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._printed = False

    def already_printed(self) -> bool:
        with self._lock:
            return self._printed

    def mark_printed(self) -> None:
        with self._lock:
            self._printed = True

    def claim(self) -> bool:
        """Set the flag and return ``True`` if it was not already set."""
        with self._lock:
            if self._printed:
                return False
            self._printed = True
            return True

    def reset(self) -> None:
        with self._lock:
            self._printed = False


SUMMARY_GUARD = SummaryGuard()

__all__ = ["SUMMARY_GUARD", "SummaryGuard"]
