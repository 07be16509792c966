"""Exception hierarchy for the country lookup service.

Two severities come out of the dataset loader and are kept apart on purpose:

    CountryLookupError (base)
    ├── DataSourceError       fatal, the table cannot be built
    └── MalformedRecordError  recoverable, one record is dropped

A token that matches nothing is not an error and has no exception type.
"""
from __future__ import annotations

from typing import Any, Dict, Optional


class CountryLookupError(Exception):
    """Base exception for all country lookup errors.

    Attributes:
        message: Human-readable error message
        code: Error code for programmatic handling
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}
        super().__init__(message)


class DataSourceError(CountryLookupError):
    """Raised when the country dataset cannot be opened, read or decoded.

    The service cannot answer any request without its table, so this
    aborts startup.
    """

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        line: Optional[int] = None,
        **kwargs,
    ):
        details = kwargs.pop("details", {})
        if source:
            details["source"] = source
        if line is not None:
            details["line"] = line
        super().__init__(message, details=details, **kwargs)
        self.source = source
        self.line = line


class MalformedRecordError(CountryLookupError):
    """Raised when a dataset line does not carry four non-empty fields."""

    def __init__(self, message: str, line: Optional[int] = None, **kwargs):
        details = kwargs.pop("details", {})
        if line is not None:
            details["line"] = line
        super().__init__(message, details=details, **kwargs)
        self.line = line
