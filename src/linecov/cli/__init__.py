from linecov.cli.entry import app, cli, create_app, main
from linecov.cli.exit_codes import EXIT_CONFIG, EXIT_DATAERR, EXIT_NOINPUT, EXIT_OK, EXIT_THRESHOLD

__all__ = [
    "EXIT_CONFIG",
    "EXIT_DATAERR",
    "EXIT_NOINPUT",
    "EXIT_OK",
    "EXIT_THRESHOLD",
    "app",
    "cli",
    "create_app",
    "main",
]
