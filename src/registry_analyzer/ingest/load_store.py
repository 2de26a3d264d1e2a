"""Load a registry CSV into a `RecordStore`.

Module notes:
- The header line is dropped without being checked.
- Blank lines are ignored.
- With `strict=True` the first malformed line aborts the load; with
  `strict=False` malformed lines are skipped, logged and kept on the store
  as `rejected`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from pydantic import ValidationError

from registry_analyzer.errors import ParseError, SourceNotFoundError
from registry_analyzer.ingest.parse_records import FIELD_NAMES, MIN_FIELDS, split_fields
from registry_analyzer.models import BusinessRecord
from registry_analyzer.store import RecordStore

log = logging.getLogger(__name__)


def _describe(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        where = ".".join(str(p) for p in err["loc"])
        parts.append(f"{where}: {err['msg']}")
    return "; ".join(parts)


def parse_line(line: str, line_number: int) -> BusinessRecord:
    """Convert one data line into a validated `BusinessRecord`.

    Args:
        line: Raw line text.
        line_number: 1-based physical line number, used in errors.

    Raises:
        ParseError: on a wrong field count or an invalid date.
    """
    fields = split_fields(line)
    if not MIN_FIELDS <= len(fields) <= len(FIELD_NAMES):
        raise ParseError(
            line_number,
            line,
            f"expected {MIN_FIELDS} or {len(FIELD_NAMES)} fields, got {len(fields)}",
        )

    try:
        return BusinessRecord.model_validate(dict(zip(FIELD_NAMES, fields)))
    except ValidationError as e:
        raise ParseError(line_number, line, _describe(e)) from e


def load_records(
    lines: Iterable[str],
    *,
    strict: bool = True,
) -> tuple[list[BusinessRecord], list[ParseError]]:
    """Parse registry lines, the first of which is a header.

    Args:
        lines: Text lines, with or without trailing newlines.
        strict: Raise on the first bad line when True, collect and continue
            when False.

    Returns:
        A tuple of (records, rejected_lines). `rejected_lines` is always empty
        for a strict load.
    """
    records: list[BusinessRecord] = []
    rejected: list[ParseError] = []

    for line_number, raw in enumerate(lines, start=1):
        if line_number == 1:
            continue
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue
        try:
            records.append(parse_line(line, line_number))
        except ParseError as e:
            if strict:
                raise
            log.warning("Skipping %s", e)
            rejected.append(e)

    return records, rejected


def load_store(source: Path | str, *, strict: bool = True) -> RecordStore:
    """Read a registry CSV file and build the immutable store.

    Args:
        source: Path to the UTF-8 CSV file.
        strict: Malformed-line policy, see `load_records`.

    Raises:
        SourceNotFoundError: if the file cannot be opened.
        ParseError: on a malformed line during a strict load.
    """
    path = Path(source)
    log.info("Loading business registry from %s", path)
    try:
        with path.open(encoding="utf-8") as fh:
            records, rejected = load_records(fh, strict=strict)
    except OSError as e:
        raise SourceNotFoundError(path, e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise SourceNotFoundError(path, "not valid UTF-8") from e

    store = RecordStore.from_records(records, rejected, source=path)
    log.info(
        "Loaded %d businesses in %d classification codes (skipped=%d)",
        len(store),
        len(store.groups),
        len(rejected),
    )
    return store
