"""Ingestion helpers.

Turns the raw registry CSV into validated `BusinessRecord` objects and
packs them into an immutable `RecordStore`.
"""
