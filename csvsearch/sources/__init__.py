"""
Record sources.

Public:
    infer_delimiter_from_path(path) -> str
    open_source(path, delimiter=None, encoding="utf-8") -> CsvFileSource

Notes
- Delimiter is inferred from the extension when not given: tsv/tab -> tab,
  psv -> pipe, anything else (csv, txt, ...) -> comma.
- Parsing (quoting, escaped delimiters) is the csv module's job; the scanner
  only ever sees lists of strings.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .base import Record, RecordSource
from .csv_source import CsvFileSource
from .memory import IterableSource


def infer_delimiter_from_path(path: str | Path) -> str:
    ext = Path(path).suffix.lower().lstrip(".")
    if ext in {"tsv", "tab"}:
        return "\t"
    if ext == "psv":
        return "|"
    return ","


def open_source(
    path: str | Path,
    *,
    delimiter: Optional[str] = None,
    encoding: str = "utf-8",
) -> CsvFileSource:
    """
    Build a file-backed source. Nothing is opened until the scanner enters it.
    """
    p = Path(path).expanduser()
    return CsvFileSource(
        p,
        delimiter=delimiter or infer_delimiter_from_path(p),
        encoding=encoding,
    )


__all__ = [
    "Record",
    "RecordSource",
    "CsvFileSource",
    "IterableSource",
    "infer_delimiter_from_path",
    "open_source",
]
