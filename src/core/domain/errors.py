"""Error taxonomy for city searches.

All three kinds abort the run; only the CLI decides how each is reported.
"""

from __future__ import annotations


class CityPopError(Exception):
    """Base class for every failure a search can end with."""


class SourceIOError(CityPopError):
    """The input table could not be opened or read."""


class RecordDecodeError(CityPopError):
    """A row could not be decoded into a `PopulationRecord`."""

    def __init__(self, message: str, *, record: int | None = None, line: int | None = None) -> None:
        self.record = record
        self.line = line
        if record is not None:
            location = f"record {record}"
            if line is not None:
                location += f" (line {line})"
            message = f"CSV decode error: {location}: {message}"
        else:
            message = f"CSV decode error: {message}"
        super().__init__(message)


class CityNotFoundError(CityPopError):
    """The scan finished cleanly but nothing matched."""

    def __init__(self, city: str | None = None) -> None:
        self.city = city
        super().__init__("No matching cities with a population were found.")
