"""Summary queries over a `RecordStore`.

Every function here is a pure function of the store, its arguments and the
evaluation day. Date-dependent functions take `today` explicitly and fall
back to the system clock when it is omitted.
"""

from __future__ import annotations

from datetime import date

import pandas as pd

from registry_analyzer.errors import ClassificationNotFoundError
from registry_analyzer.models import (
    BusinessRecord,
    ClassificationSummary,
    GeneralSummary,
    PostalCodeSummary,
)
from registry_analyzer.store import RecordStore


def one_year_before(today: date) -> date:
    """Return the same calendar day one year earlier (Feb 29 -> Feb 28)."""
    return (pd.Timestamp(today) - pd.DateOffset(years=1)).date()


def is_closed(record: BusinessRecord, today: date | None = None) -> bool:
    """Return True if the business closed strictly before `today`.

    A record without a closure date is open. A closure dated `today` has not
    happened yet.
    """
    if record.closure_date is None:
        return False
    if today is None:
        today = date.today()
    return record.closure_date < today


def summary_by_postal_code(store: RecordStore, code: str) -> PostalCodeSummary:
    """Summarize businesses whose postal code equals `code`.

    The store has no postal-code index, so this scans every record. A code
    with no businesses yields zero counts.
    """
    total = 0
    classification_codes: set[str] = set()
    neighborhoods: set[str] = set()

    for rec in store.records:
        if rec.postal_code == code:
            total += 1
            classification_codes.add(rec.classification_code)
            neighborhoods.add(rec.neighborhood)

    return PostalCodeSummary(
        postal_code=code,
        total_count=total,
        distinct_classification_code_count=len(classification_codes),
        distinct_neighborhood_count=len(neighborhoods),
    )


def summary_by_classification_code(store: RecordStore, code: str) -> ClassificationSummary:
    """Summarize the group of businesses sharing a classification code.

    Raises:
        ClassificationNotFoundError: if `code` (after trimming) never appears
            in the dataset.
    """
    code = code.strip()
    group = store.group(code)
    if group is None:
        raise ClassificationNotFoundError(code)

    return ClassificationSummary(
        classification_code=code,
        total_count=len(group),
        distinct_postal_code_count=len({rec.postal_code for rec in group}),
        distinct_neighborhood_count=len({rec.neighborhood for rec in group}),
    )


def general_summary(store: RecordStore, today: date | None = None) -> GeneralSummary:
    """Return dataset totals, closures and openings within the last year.

    A business counts as new when its start date is strictly after the same
    day one year before `today`.
    """
    if today is None:
        today = date.today()
    cutoff = one_year_before(today)

    total = 0
    closed = 0
    new = 0
    for group in store.groups.values():
        total += len(group)
        for rec in group:
            if is_closed(rec, today):
                closed += 1
            if rec.start_date is not None and rec.start_date > cutoff:
                new += 1

    return GeneralSummary(
        total_businesses=total,
        closed_businesses=closed,
        new_businesses_last_year=new,
    )
