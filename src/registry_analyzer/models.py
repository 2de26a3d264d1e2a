"""Pydantic models for business records and query results.

`BusinessRecord` is the validated, immutable form of one registry row. The
summary models are the values returned by the aggregation functions.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from registry_analyzer.ingest.parse_records import parse_date


class BusinessRecord(BaseModel):
    """One business registration.

    Attributes:
        name: Business name.
        address: Street address.
        city: City.
        state: State code.
        postal_code: ZIP / postal code.
        classification_code: NAICS industry code.
        neighborhood: Neighborhood name.
        start_date: Date the business started.
        closure_date: Date the business closed, or None while operating.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)
    name: str
    address: str
    city: str
    state: str
    postal_code: str
    classification_code: str
    neighborhood: str
    start_date: date
    closure_date: date | None = None

    @field_validator("start_date", mode="before")
    @classmethod
    def _parse_start(cls, v: Any) -> Any:
        if isinstance(v, str):
            return parse_date(v)
        return v

    @field_validator("closure_date", mode="before")
    @classmethod
    def _parse_closure(cls, v: Any) -> Any:
        if isinstance(v, str):
            return parse_date(v) if v.strip() else None
        return v


class PostalCodeSummary(BaseModel):
    """Counts for the businesses registered under one postal code."""
    model_config = ConfigDict(extra="forbid", frozen=True)
    postal_code: str
    total_count: int = Field(..., ge=0)
    distinct_classification_code_count: int = Field(..., ge=0)
    distinct_neighborhood_count: int = Field(..., ge=0)


class ClassificationSummary(BaseModel):
    """Counts for the businesses sharing one classification code."""
    model_config = ConfigDict(extra="forbid", frozen=True)
    classification_code: str
    total_count: int = Field(..., ge=0)
    distinct_postal_code_count: int = Field(..., ge=0)
    distinct_neighborhood_count: int = Field(..., ge=0)


class GeneralSummary(BaseModel):
    """Dataset-wide totals evaluated against a given day."""
    model_config = ConfigDict(extra="forbid", frozen=True)
    total_businesses: int = Field(..., ge=0)
    closed_businesses: int = Field(..., ge=0)
    new_businesses_last_year: int = Field(..., ge=0)
