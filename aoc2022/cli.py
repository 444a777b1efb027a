from __future__ import annotations

import sys
from pathlib import Path

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape

from aoc2022.days import build_registry
from aoc2022.errors import AdventError
from aoc2022.inputs import DEFAULT_INPUT_DIR, InputLoader
from aoc2022.registry import FIRST_DAY, LAST_DAY
from aoc2022.runner import Runner

app = typer.Typer(add_completion=False, help="Solve a day of Advent of Code 2022.")


def configure_logging(verbose: bool) -> None:
    """Send logs to stderr only, keeping stdout for the answers."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


@app.command()
def main(
    day: int = typer.Argument(..., min=FIRST_DAY, max=LAST_DAY, help="The day to solve."),
    inputs: Path = typer.Option(
        DEFAULT_INPUT_DIR,
        "--inputs",
        "-i",
        file_okay=False,
        help="Directory holding the puzzle inputs.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug information to stderr."),
) -> None:
    """Solve both parts of DAY and print the answers with the time they took."""
    configure_logging(verbose)
    console = Console(highlight=False, emoji=False, soft_wrap=True)
    err_console = Console(stderr=True, highlight=False, emoji=False, soft_wrap=True)

    try:
        report = Runner(build_registry(), InputLoader(inputs)).run(day)
    except AdventError as e:
        logger.opt(exception=e).debug("Run failed")
        err_console.print(f"[bold red]Error:[/] {escape(str(e))}")
        raise typer.Exit(e.exit_code) from e

    for line in report.lines():
        console.print(line, markup=False)


__all__ = ("app", "configure_logging", "main")
