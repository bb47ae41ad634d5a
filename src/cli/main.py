"""`city-pop` command line.

Usage: city-pop [options] [<data-path>] <city>

The CLI is the only layer that turns errors into messages and exit codes:
- matches: one line each on stdout, exit 0
- nothing found: message on stderr (unless --quiet), exit 1
- unreadable or malformed input: message on stderr, exit 1
"""

from __future__ import annotations

from pathlib import Path

import typer
from loguru import logger
from pydantic import ValidationError
from rich.console import Console

from cli.ui_components import print_error, print_records
from core.config import AppSettings
from core.domain.errors import CityNotFoundError, CityPopError
from core.domain.models import MatchRequest
from core.logging_setup import configure_logging
from core.services.city_search import search

app = typer.Typer(
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
    help="Search a CSV table of city populations for a city.",
)

_console = Console()
_err_console = Console(stderr=True)


def _split_positionals(values: list[str]) -> tuple[Path | None, str]:
    if len(values) == 1:
        return None, values[0]
    if len(values) == 2:
        return Path(values[0]), values[1]
    raise typer.BadParameter("expected [DATA_PATH] CITY", param_hint="'[DATA_PATH] CITY'")


@app.command()
def city_pop(
    positionals: list[str] = typer.Argument(
        ...,
        metavar="[DATA_PATH] CITY",
        help="CSV file to read (stdin when omitted) and the city to look for.",
        show_default=False,
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Do not show noisy messages."),
    show_unknown: bool = typer.Option(
        False, "--show-unknown", "-u", help="Show cities with unknown population."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr."),
) -> None:
    """Print every row of the table whose City is exactly CITY."""

    data_path, city = _split_positionals(positionals)

    try:
        settings = AppSettings()
    except ValidationError as exc:
        print_error(_err_console, f"Invalid configuration: {exc}")
        raise typer.Exit(code=1) from exc

    configure_logging("DEBUG" if verbose else settings.log_level)

    request = MatchRequest(
        data_path=data_path,
        city=city,
        include_unknown_population=show_unknown or settings.show_unknown,
    )
    logger.debug(f"Search request: {request.model_dump()}")

    try:
        records = search(request)
    except CityNotFoundError as exc:
        if not (quiet or settings.quiet):
            print_error(_err_console, str(exc))
        raise typer.Exit(code=1) from exc
    except CityPopError as exc:
        print_error(_err_console, str(exc))
        raise typer.Exit(code=1) from exc

    print_records(_console, records)


def run() -> None:
    """Console-script entry point."""

    app()


if __name__ == "__main__":
    run()
