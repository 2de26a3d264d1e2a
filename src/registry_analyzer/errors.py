"""Exception types raised by the loader and the query functions."""

from __future__ import annotations

from pathlib import Path


class RegistryError(Exception):
    """Base class for all analyzer errors."""


class SourceNotFoundError(RegistryError):
    """The input dataset could not be opened."""

    def __init__(self, path: Path, reason: str = "") -> None:
        self.path = path
        self.reason = reason
        msg = f"Cannot open registry file: {path}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)


class ParseError(RegistryError, ValueError):
    """A data line could not be turned into a business record.

    Attributes:
        line_number: 1-based physical line number in the source (header is 1).
        line: Raw line text as read.
        reason: Human readable cause.
    """

    def __init__(self, line_number: int, line: str, reason: str) -> None:
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f"line {line_number}: {reason}: {line!r}")


class ClassificationNotFoundError(RegistryError, KeyError):
    """No business in the dataset carries the requested classification code."""

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(code)

    def __str__(self) -> str:
        return f"No businesses found for NAICS code {self.code}"
