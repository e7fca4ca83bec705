"""
Exception types raised by csvsearch.

SourceUnavailable is the only error the scan core itself surfaces. Ragged rows
are never an error.
"""

from __future__ import annotations

from typing import Optional


class CsvSearchError(Exception):
    """Base class for all csvsearch errors."""


class SourceUnavailable(CsvSearchError):
    """The record source could not be opened or its header could not be read."""

    def __init__(self, reason: str, *, path: Optional[str] = None) -> None:
        self.reason = reason
        self.path = path
        msg = f"{reason}: {path}" if path else reason
        super().__init__(msg)


class InvalidSearchRequest(CsvSearchError, ValueError):
    """Raised at the request boundary for parameters that cannot be clamped."""
