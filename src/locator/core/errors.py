"""Exception types raised by the locator core."""

from __future__ import annotations


class LocatorError(Exception):
    """Base class for locator errors."""


class GeometryParseError(LocatorError, ValueError):
    """Raised when raw geometry text is not well-formed for its declared format."""


class SourceNotFoundError(LocatorError, FileNotFoundError):
    """Raised when an ingestion source cannot be opened."""


class RecordIncompleteError(LocatorError, ValueError):
    """Raised when a flat-file record lacks a required column."""

    def __init__(self, message: str, record_number: int | None = None) -> None:
        super().__init__(message)
        self.record_number = record_number


class SourceDecodeError(LocatorError, ValueError):
    """Raised when a source's bytes or delimited structure cannot be read."""

    def __init__(self, message: str, record_number: int | None = None) -> None:
        super().__init__(message)
        self.record_number = record_number
