from __future__ import annotations

from datetime import date
import pytest
from pydantic import ValidationError
from registry_analyzer.models import BusinessRecord, GeneralSummary


def _rec(**overrides: object) -> dict[str, object]:
    rec: dict[str, object] = {
        "name": "Acme",
        "address": "1 Main St",
        "city": "Springfield",
        "state": "IL",
        "postal_code": "62704",
        "classification_code": "541110",
        "neighborhood": "Downtown",
        "start_date": "01/15/2020",
        "closure_date": "",
    }
    rec.update(overrides)
    return rec


def test_business_record_parses_registry_dates() -> None:
    r = BusinessRecord.model_validate(_rec(closure_date="03/04/2021"))
    assert r.start_date == date(2020, 1, 15)
    assert r.closure_date == date(2021, 3, 4)


def test_business_record_empty_closure_is_absent() -> None:
    r = BusinessRecord.model_validate(_rec())
    assert r.closure_date is None


def test_business_record_accepts_date_objects() -> None:
    r = BusinessRecord.model_validate(_rec(start_date=date(2019, 5, 1), closure_date=None))
    assert r.start_date == date(2019, 5, 1)


@pytest.mark.parametrize("bad", ["2020-01-15", "1/15/2020", "13/01/2020", "02/30/2020", ""])
def test_business_record_rejects_malformed_start_date(bad: str) -> None:
    with pytest.raises(ValidationError):
        BusinessRecord.model_validate(_rec(start_date=bad))


def test_business_record_is_frozen() -> None:
    r = BusinessRecord.model_validate(_rec())
    with pytest.raises(ValidationError):
        r.name = "Other"  # type: ignore[misc]


def test_business_record_rejects_unknown_fields() -> None:
    with pytest.raises(ValidationError):
        BusinessRecord.model_validate(_rec(owner="someone"))


def test_summary_rejects_negative_counts() -> None:
    with pytest.raises(ValidationError):
        GeneralSummary(total_businesses=-1, closed_businesses=0, new_businesses_last_year=0)
