"""Query and aggregation helpers.

This package answers the analyzer's summary queries over an immutable
`RecordStore` and builds small pandas breakdown tables for display.
"""
