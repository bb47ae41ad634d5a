"""Output helpers for the CLI (Rich).

Why separate them:
- Keeps rendering details out of the command function.
- The line format is part of the tool's contract; it is tested on its own.
"""

from __future__ import annotations

from collections.abc import Iterable

from rich.console import Console

from core.domain.models import PopulationRecord


def format_record_line(record: PopulationRecord) -> str:
    """`"<city>, <region>, <country>: <population>"`."""

    return f"{record.city}, {record.region}, {record.country}: {record.population_label()}"


def print_records(console: Console, records: Iterable[PopulationRecord]) -> None:
    for record in records:
        # City names may contain brackets; never treat them as Rich markup.
        console.print(format_record_line(record), markup=False, highlight=False, soft_wrap=True)


def print_error(console: Console, message: str) -> None:
    console.print(message, style="red", markup=False, highlight=False, soft_wrap=True)
