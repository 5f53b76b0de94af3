from __future__ import annotations

from colorama import Fore, Style


def colors(*, enabled: bool = True) -> dict[str, str]:
    """Return the ANSI escape table, or blanks when colour is disabled."""
    if not enabled:
        return {"RESET": "", "YELLOW": "", "GREEN": "", "RED": ""}
    return {
        "RESET": Style.RESET_ALL,
        "YELLOW": Fore.YELLOW,
        "GREEN": Fore.GREEN,
        "RED": Fore.RED,
    }


__all__ = ["colors"]
