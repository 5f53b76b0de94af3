from __future__ import annotations

from typing import Annotated

import typer
from typer.main import get_command

from linecov import __version__
from linecov.cli import report


def _version_callback(value: bool) -> None:  # noqa: FBT001
    if value:
        typer.echo(f"linecov {__version__}")
        raise typer.Exit


def create_app() -> typer.Typer:
    app = typer.Typer(help="Local test coverage report from per-line hit counts.")

    @app.callback()
    def _root(
        *,
        version: Annotated[
            bool,
            typer.Option("--version", help="Show version and exit", callback=_version_callback, is_eager=True),
        ] = False,
    ) -> None:
        del version

    report.register(app)

    return app


app = create_app()


def main() -> None:
    get_command(app)()


# Click-compatible object for tooling that imports it
cli = get_command(app)

__all__ = ["app", "cli", "create_app", "main"]
