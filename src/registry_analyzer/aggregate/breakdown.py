"""Per-code breakdown tables.

These are derived on demand from the store for display and are never kept
as indexes.

Output columns:
- `classification_code`
- `businesses`: records carrying the code
- `postal_codes`: distinct postal codes among them
- `neighborhoods`: distinct neighborhoods among them
- `closed`: records closed before the evaluation day
"""
from __future__ import annotations

from datetime import date

import pandas as pd

from registry_analyzer.aggregate.summaries import is_closed
from registry_analyzer.store import RecordStore

BREAKDOWN_COLUMNS = ["classification_code", "businesses", "postal_codes", "neighborhoods", "closed"]


def classification_breakdown(store: RecordStore, today: date | None = None) -> pd.DataFrame:
    """Return one row per classification code, largest groups first.

    Args:
        store: Loaded record store.
        today: Evaluation day for the `closed` column (defaults to today).

    Returns:
        DataFrame with `BREAKDOWN_COLUMNS`, sorted by `businesses` descending
        and then by code.
    """
    if today is None:
        today = date.today()
    if len(store) == 0:
        return pd.DataFrame(columns=BREAKDOWN_COLUMNS)

    x = store.to_frame()
    x["closed"] = [is_closed(rec, today) for rec in store.records]

    out = (
        x.groupby("classification_code", sort=False)
        .agg(
            businesses=("name", "size"),
            postal_codes=("postal_code", "nunique"),
            neighborhoods=("neighborhood", "nunique"),
            closed=("closed", "sum"),
        )
        .reset_index()
    )
    out["closed"] = out["closed"].astype(int)

    return out.sort_values(
        ["businesses", "classification_code"],
        ascending=[False, True],
        ignore_index=True,
    )[BREAKDOWN_COLUMNS]
