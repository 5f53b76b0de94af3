import sys
from pathlib import Path


def write_output(text: str, destination: Path | None) -> None:
    """Write *text* verbatim to stdout or a file (PATH or '-' for stdout)."""
    if destination is None or destination == Path("-"):
        sys.stdout.write(text)
        return
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(text, encoding="utf-8")


def stdout_is_tty() -> bool:
    try:
        return bool(getattr(sys.stdout, "isatty", lambda: False)())
    except OSError:
        return False
