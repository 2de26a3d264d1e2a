"""registry_analyzer package.

Loads a business registry CSV into an immutable in-memory store and answers
summary queries by postal code, by NAICS classification code, and across the
whole dataset, either through the functions re-exported here or through the
interactive shell started by the `registry-analyzer` command.

Architecture:
- `ingest` parses lines into pydantic `BusinessRecord` models
- `store.RecordStore` holds the records and their classification grouping
- `aggregate` computes summaries and pandas breakdown tables
"""

from registry_analyzer.aggregate.summaries import (
    general_summary,
    is_closed,
    summary_by_classification_code,
    summary_by_postal_code,
)
from registry_analyzer.errors import (
    ClassificationNotFoundError,
    ParseError,
    RegistryError,
    SourceNotFoundError,
)
from registry_analyzer.ingest.load_store import load_store
from registry_analyzer.models import BusinessRecord
from registry_analyzer.store import RecordStore

__all__ = [
    "__version__",
    "BusinessRecord",
    "ClassificationNotFoundError",
    "ParseError",
    "RecordStore",
    "RegistryError",
    "SourceNotFoundError",
    "general_summary",
    "is_closed",
    "load_store",
    "summary_by_classification_code",
    "summary_by_postal_code",
]
__version__ = "0.1.0"
