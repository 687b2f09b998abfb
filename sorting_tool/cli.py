"""sorting-tool CLI: sort or tally numbers, words or lines.

Usage examples:
  sorting-tool -dataType long -sortingType natural < numbers.txt
  sorting-tool -dataType word -sortingType byCount -inputFile in.txt -outputFile out.txt
  sorting-tool --log-level DEBUG -dataType line -inputFile notes.txt

Flags take one value each, are case-insensitive and may come in any order.
Errors are printed to standard output and end the run.
"""

from __future__ import annotations

import logging

import typer

from common.cli_helpers import LOG_LEVELS, setup_logging
from common.exceptions import SortingToolError
from sorting_tool.config import parse_arguments
from sorting_tool.engine import SortingEngine

app = typer.Typer(
    help="Sort or count numbers, words or lines.",
    add_completion=False,
)
logger = logging.getLogger(__name__)


@app.command(
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True}
)
def sort(
    ctx: typer.Context,
    log_level: str = typer.Option(
        "INFO",
        "--log-level",
        case_sensitive=False,
        help=f"Logging verbosity: {'|'.join(LOG_LEVELS)}",
    ),
) -> None:
    """Read tokens, sort or count them, and write the report.

    Accepts -dataType long|word|line, -sortingType natural|byCount,
    -inputFile PATH and -outputFile PATH.
    """
    setup_logging(log_level)
    try:
        config = parse_arguments(ctx.args)
        SortingEngine(config).run()
    except SortingToolError as ex:
        typer.echo(str(ex))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
