"""City search: decode rows, apply the match predicate, collect results.

The scan is a single forward pass. The first row that cannot be decoded
aborts the whole search; rows matched before it are discarded with it.
"""

from __future__ import annotations

from collections.abc import Iterable

from loguru import logger
from pydantic import ValidationError

from adapters.csv_source import RawRow, iter_rows, open_source
from core.domain.errors import CityNotFoundError, RecordDecodeError
from core.domain.models import MatchRequest, PopulationRecord


def decode_record(row: RawRow) -> PopulationRecord:
    """Decode a raw row into a `PopulationRecord` or raise `RecordDecodeError`."""

    try:
        return PopulationRecord.model_validate(row.fields)
    except ValidationError as exc:
        raise RecordDecodeError(_summarize(exc), record=row.record, line=row.line) from exc


def matches(record: PopulationRecord, city: str, include_unknown_population: bool) -> bool:
    if record.city != city:
        return False
    return include_unknown_population or record.population is not None


def search_rows(
    rows: Iterable[RawRow],
    city: str,
    *,
    include_unknown_population: bool = False,
) -> tuple[PopulationRecord, ...]:
    """Scan `rows` in order and return every record matching `city`.

    Raises:
    - `RecordDecodeError` on the first undecodable row (no partial results).
    - `CityNotFoundError` when the scan completes with zero matches.
    """

    found: list[PopulationRecord] = []
    scanned = 0
    for row in rows:
        record = decode_record(row)
        scanned += 1
        if matches(record, city, include_unknown_population):
            found.append(record)

    logger.debug(f"Scanned {scanned} rows, {len(found)} matching {city!r}")
    if not found:
        raise CityNotFoundError(city)
    return tuple(found)


def search(request: MatchRequest) -> tuple[PopulationRecord, ...]:
    """Run `request` against its source (file or stdin)."""

    with open_source(request.data_path) as stream:
        return search_rows(
            iter_rows(stream),
            request.city,
            include_unknown_population=request.include_unknown_population,
        )


def _summarize(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors(include_url=False):
        field = ".".join(str(loc) for loc in error["loc"]) or "row"
        if error["type"] == "missing":
            parts.append(f"missing field `{field}`")
        else:
            parts.append(f"field `{field}`: {error['msg']}")
    return "; ".join(parts)
