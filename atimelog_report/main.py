from __future__ import annotations

import logging
from importlib import metadata
from pathlib import Path

import typer
from dotenv import load_dotenv

from .config import load_config, log_level_from_env
from .errors import ReportError
from .parser import read_report_file
from .reporter import Reporter

app = typer.Typer(
    help="Reads a report from aTimeLogger and prints a condensed report.",
    add_completion=False,
)
logger = logging.getLogger("atimelog-report")


def configure_logging(level: int | str = logging.WARNING) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


def get_version() -> str:
    try:
        return metadata.version("atimelog-report")
    except metadata.PackageNotFoundError:
        return "Version unknown"


def version_check(version: bool) -> None:
    """Print the installed version and exit."""
    if version:
        typer.echo(f"atimelog-report version: {get_version()}")
        raise typer.Exit()


@app.command()
def report(
    input: Path = typer.Argument(..., help="Sets the input report file"),
    minutes_per_unit: int = typer.Option(
        None,
        "-u",
        "--minutes-per-unit",
        help="Minimum unit of reporting, in minutes. Defaults to 3.",
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Print remainder"),
    year: int = typer.Option(
        None,
        "-y",
        "--year",
        help="Year the report belongs to. Defaults to the current year.",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Print the current version and exit.",
        is_eager=True,
        callback=version_check,
    ),
) -> None:
    """Print day, week and month totals rounded down to whole units."""
    try:
        config = load_config(input, minutes_per_unit=minutes_per_unit, verbose=verbose, year=year)
        logger.debug("Running with %s", config)

        text = read_report_file(config.input_path)
        reporter = Reporter(config)
        content = reporter.build_report_content(reporter.summarize(text))
    except (ReportError, ValueError) as exc:
        logger.debug("Report failed", exc_info=True)
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1) from exc

    if content:
        typer.echo(content)


def main() -> None:
    load_dotenv()
    try:
        level = log_level_from_env()
    except ValueError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise SystemExit(1) from exc

    configure_logging(level)
    app()


if __name__ == "__main__":
    main()
