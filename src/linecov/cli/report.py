from __future__ import annotations

import sys
from dataclasses import replace
from io import StringIO
from pathlib import Path
from typing import Annotated

import click.utils as click_utils
import typer

from linecov._meta import logger
from linecov.cli._shared import configure_logging, resolve_use_color
from linecov.cli.exit_codes import EXIT_CONFIG, EXIT_DATAERR, EXIT_NOINPUT, EXIT_OK, EXIT_THRESHOLD
from linecov.core.config import Settings, load_settings
from linecov.core.guard import SummaryGuard
from linecov.core.sorting import parse_sort_spec
from linecov.errors import (
    ConfigError,
    CoverageGateError,
    CoverageInputNotFoundError,
    InvalidCoverageDataError,
    InvalidCoverageInputError,
    SortSpecError,
)
from linecov.inputs.records import load_records
from linecov.io import stdout_is_tty, write_output
from linecov.report import execute

_BOOL_FALSE = False


def _fail(message: str, code: int) -> typer.Exit:
    typer.echo(f"ERROR: {message}", err=True)
    return typer.Exit(code=code)


def _apply_overrides(
    settings: Settings,
    *,
    minimum_coverage: float | None,
    report_uncovered: bool | None,
    print_files: bool | None,
    file_column_width: int | None,
) -> Settings:
    options = settings.coverage_options
    if minimum_coverage is not None:
        options = replace(options, minimum_coverage=minimum_coverage)
    if report_uncovered is not None:
        options = replace(options, report_uncovered=report_uncovered)
    settings = replace(settings, coverage_options=options)
    if print_files is not None:
        settings = replace(settings, print_files=print_files)
    if file_column_width is not None:
        settings = replace(settings, file_column_width=file_column_width)
    return settings


def report_cmd(
    coverage: Annotated[
        Path,
        typer.Argument(help="Coverage JSON document ({'source_files': [...]})."),
    ],
    sort: Annotated[
        str | None,
        typer.Option(
            "--sort",
            help="Sort chain such as 'cov:asc,missed:desc'; the last key is the primary key.",
        ),
    ] = None,
    detail: Annotated[
        bool,
        typer.Option("--detail", help="Also print the source of each file with coverage colouring."),
    ] = _BOOL_FALSE,
    filter_: Annotated[
        list[str] | None,
        typer.Option("--filter", "-f", help="Only show --detail source for names containing PATTERN."),
    ] = None,
    fmt: Annotated[
        str,
        typer.Option("--format", help="Summary layout: 'text' (fixed width) or 'rich'."),
    ] = "text",
    config: Annotated[
        Path | None,
        typer.Option("--config", help="pyproject.toml to read [tool.linecov] from."),
    ] = None,
    minimum_coverage: Annotated[
        float | None,
        typer.Option("--minimum-coverage", help="Fail if total coverage % is below this value."),
    ] = None,
    report_uncovered: Annotated[
        bool | None,
        typer.Option("--report-uncovered/--no-report-uncovered", help="List files below 100%."),
    ] = None,
    print_files: Annotated[
        bool | None,
        typer.Option("--print-files/--no-print-files", help="Print the per-file table."),
    ] = None,
    file_column_width: Annotated[
        int | None,
        typer.Option("--file-column-width", help="Width of the FILE column.", min=1),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", help="Write output to PATH (use '-' for stdout)."),
    ] = None,
    color: Annotated[
        bool,
        typer.Option("--color", help="Force color output"),
    ] = _BOOL_FALSE,
    no_color: Annotated[
        bool,
        typer.Option("--no-color", help="Disable color output"),
    ] = _BOOL_FALSE,
    quiet: Annotated[
        bool,
        typer.Option("-q", "--quiet", help="Emit only errors"),
    ] = _BOOL_FALSE,
    verbose: Annotated[
        bool,
        typer.Option("-v", "--verbose", help="Emit diagnostic logging"),
    ] = _BOOL_FALSE,
) -> None:
    """Print the coverage summary and fail when total coverage is below the minimum."""
    configure_logging(quiet=quiet, verbose=verbose)

    if fmt not in {"text", "rich"}:
        raise _fail(f"Unsupported format: {fmt!r}", EXIT_CONFIG)

    try:
        settings = _apply_overrides(
            load_settings(config),
            minimum_coverage=minimum_coverage,
            report_uncovered=report_uncovered,
            print_files=print_files,
            file_column_width=file_column_width,
        )
        if sort:
            parse_sort_spec(sort)
    except (ConfigError, SortSpecError) as exc:
        raise _fail(str(exc), EXIT_CONFIG) from exc

    try:
        records = load_records(coverage)
    except CoverageInputNotFoundError as exc:
        raise _fail(str(exc), EXIT_NOINPUT) from exc
    except InvalidCoverageInputError as exc:
        raise _fail(str(exc), EXIT_DATAERR) from exc

    is_tty_like = stdout_is_tty() and (output is None or output == Path("-"))
    color_allowed = bool(is_tty_like and not click_utils.should_strip_ansi(sys.stdout))
    use_color = resolve_use_color(color=color, no_color=no_color, color_allowed=color_allowed)

    buf = StringIO()
    try:
        execute(
            records,
            settings,
            sort=sort,
            detail=detail,
            patterns=filter_ or None,
            guard=SummaryGuard(),  # one invocation, one summary
            out=buf,
            color=use_color,
            fmt="rich" if fmt == "rich" else "text",
        )
    except InvalidCoverageDataError as exc:
        write_output(buf.getvalue(), output)
        raise _fail(str(exc), EXIT_DATAERR) from exc
    except CoverageGateError as exc:
        write_output(buf.getvalue(), output)
        logger.debug("coverage gate failed: %s", exc)
        raise typer.Exit(code=EXIT_THRESHOLD) from exc

    write_output(buf.getvalue(), output)
    raise typer.Exit(code=EXIT_OK)


def register(app: typer.Typer) -> None:
    app.command("report")(report_cmd)


__all__ = ["register"]
