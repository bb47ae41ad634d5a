"""Record source: the CSV table, from a file or from stdin.

Why an adapter:
- The core only needs "an ordered, forward-only sequence of row mappings";
  where the bytes come from (and how they are tokenized) is I/O detail.
- Tokenizing is delegated to the stdlib `csv` module; this module only adds
  the bookkeeping the filter needs to report useful errors (record index,
  line number, field-count mismatches).
"""

from __future__ import annotations

import csv
import io
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from loguru import logger

from core.domain.errors import RecordDecodeError, SourceIOError

# Key under which `csv.DictReader` collects cells beyond the header width.
_OVERFLOW_KEY = "\x00overflow"

# Strict UTF-8; a leading byte-order mark is not part of the header.
ENCODING = "utf-8-sig"


@dataclass(frozen=True)
class RawRow:
    """One data row as produced by the CSV parser."""

    record: int
    line: int
    fields: dict[str, str]


@contextmanager
def open_source(data_path: Path | None) -> Iterator[TextIO]:
    """Open the table for reading and release it on every exit path.

    `None` means standard input, which is borrowed and never closed.
    """

    if data_path is None:
        logger.debug("Reading population table from stdin")
        yield from _borrow_stdin()
        return

    try:
        stream = open(data_path, encoding=ENCODING, newline="")
    except OSError as exc:
        raise SourceIOError(_describe_os_error(exc, data_path)) from exc

    logger.debug(f"Reading population table from {data_path}")
    with stream:
        yield stream


def iter_rows(stream: TextIO) -> Iterator[RawRow]:
    """Yield data rows lazily; the first line is the header.

    Rows whose width differs from the header's are rejected, as are bytes
    that are not UTF-8 and anything the CSV tokenizer refuses.
    """

    reader = csv.DictReader(stream, restkey=_OVERFLOW_KEY, restval=None)
    record = 0
    while True:
        try:
            row = next(reader)
        except StopIteration:
            return
        except csv.Error as exc:
            raise RecordDecodeError(str(exc), record=record + 1, line=reader.line_num) from exc
        except UnicodeDecodeError as exc:
            raise RecordDecodeError(f"invalid UTF-8: {exc.reason}", record=record + 1) from exc
        except OSError as exc:
            raise SourceIOError(str(exc)) from exc

        record += 1
        header = reader.fieldnames or []
        overflow = row.pop(_OVERFLOW_KEY, None)
        if overflow is not None or any(value is None for value in row.values()):
            width = len(header) + len(overflow or []) - sum(1 for v in row.values() if v is None)
            raise RecordDecodeError(
                f"found record with {width} fields, but the header has {len(header)} fields",
                record=record,
                line=reader.line_num,
            )
        yield RawRow(record=record, line=reader.line_num, fields=row)


def _borrow_stdin() -> Iterator[TextIO]:
    buffer = getattr(sys.stdin, "buffer", None)
    if buffer is None:
        # Already-decoded text stream (embedding, tests); nothing to re-decode.
        yield sys.stdin
        return

    stream = io.TextIOWrapper(buffer, encoding=ENCODING, errors="strict", newline="")
    try:
        yield stream
    finally:
        # Detach so closing our wrapper never closes the process's stdin.
        stream.detach()


def _describe_os_error(exc: OSError, data_path: Path) -> str:
    reason = exc.strerror or str(exc)
    return f"{data_path}: {reason}"
