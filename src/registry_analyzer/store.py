"""Immutable in-memory record store.

The store keeps every loaded record in file order together with a single
grouping of records by classification code. It is built once by the loader
and only read afterwards; a reload produces a new store.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

import pandas as pd

from registry_analyzer.errors import ParseError
from registry_analyzer.ingest.parse_records import FIELD_NAMES
from registry_analyzer.models import BusinessRecord


def group_by_classification(
    records: Iterable[BusinessRecord],
) -> Mapping[str, tuple[BusinessRecord, ...]]:
    """Group records by classification code in a single pass.

    Returns:
        Read-only mapping of code to the records carrying it.
    """
    groups: dict[str, list[BusinessRecord]] = {}
    for rec in records:
        groups.setdefault(rec.classification_code, []).append(rec)
    return MappingProxyType({code: tuple(recs) for code, recs in groups.items()})


@dataclass(frozen=True)
class RecordStore:
    """Loaded business records plus their classification-code grouping.

    Attributes:
        records: Every record in file order, duplicates included.
        groups: Classification code to the records sharing that code.
        rejected: Lines skipped during a lenient load.
        source: File the store was loaded from, if any.
    """
    records: tuple[BusinessRecord, ...]
    groups: Mapping[str, tuple[BusinessRecord, ...]]
    rejected: tuple[ParseError, ...] = ()
    source: Path | None = None

    @classmethod
    def from_records(
        cls,
        records: Iterable[BusinessRecord],
        rejected: Iterable[ParseError] = (),
        source: Path | None = None,
    ) -> "RecordStore":
        """Build a store and its grouping index from loaded records."""
        recs = tuple(records)
        return cls(
            records=recs,
            groups=group_by_classification(recs),
            rejected=tuple(rejected),
            source=source,
        )

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[BusinessRecord]:
        return iter(self.records)

    @property
    def classification_codes(self) -> list[str]:
        """Codes present in the dataset, in first-seen order."""
        return list(self.groups)

    def group(self, code: str) -> tuple[BusinessRecord, ...] | None:
        """Return the records for `code`, or None if the code never appears."""
        return self.groups.get(code)

    def to_frame(self) -> pd.DataFrame:
        """Return one row per record, columns named after the record fields."""
        return pd.DataFrame(
            [rec.model_dump() for rec in self.records],
            columns=list(FIELD_NAMES),
        )
