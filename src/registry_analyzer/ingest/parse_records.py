"""Parsing helpers for registry CSV lines.

`split_fields` performs the quote-aware comma split and `parse_date` reads
the fixed `MM/DD/YYYY` date format used by the registry export.
"""

from __future__ import annotations

from datetime import date, datetime
import re

FIELD_NAMES = (
    "name",
    "address",
    "city",
    "state",
    "postal_code",
    "classification_code",
    "neighborhood",
    "start_date",
    "closure_date",
)
MIN_FIELDS = len(FIELD_NAMES) - 1  # closure date may be missing entirely

# Split on commas followed by an even number of quotes (i.e. not inside a quoted field)
SPLIT_RE = re.compile(r',(?=(?:[^"]*"[^"]*")*[^"]*$)')
DATE_RE = re.compile(r"^(\d{2})/(\d{2})/(\d{4})$")
DATE_FORMAT = "%m/%d/%Y"


def _unquote(field: str) -> str:
    if len(field) >= 2 and field[0] == '"' and field[-1] == '"':
        return field[1:-1].replace('""', '"').strip()
    return field


def split_fields(line: str) -> list[str]:
    """Split one CSV line into trimmed fields.

    Commas inside double-quoted fields do not split. A field wrapped in quotes
    loses the wrapping quotes and has doubled quotes collapsed.

    Args:
        line: Raw line without its trailing newline.

    Returns:
        List of field values in file order.
    """
    return [_unquote(f.strip()) for f in SPLIT_RE.split(line)]


def parse_date(value: str) -> date:
    """Parse a `MM/DD/YYYY` date.

    Raises:
        ValueError: if the text does not match the format or names an
            impossible day.
    """
    text = value.strip()
    if not DATE_RE.match(text):
        raise ValueError(f"expected MM/DD/YYYY date, got {value!r}")
    return datetime.strptime(text, DATE_FORMAT).date()
