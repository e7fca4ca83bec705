"""
In-memory record source over a sequence of rows.

Useful when rows come from somewhere other than a file (or in tests).
Every open() restarts from the first row.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Sequence

from csvsearch.errors import SourceUnavailable
from csvsearch.sources.base import RecordSource


class IterableSource(RecordSource):
    name = "memory"

    def __init__(self, rows: Sequence[Sequence[str]], *, fail_open: bool = False) -> None:
        self._rows = rows
        self._fail_open = fail_open
        self._it: Optional[Iterator[Sequence[str]]] = None
        self.open_count = 0
        self.closed = True

    def open(self) -> None:
        if self._fail_open:
            raise SourceUnavailable("source unavailable", path=self.name)
        self._it = iter(self._rows)
        self.open_count += 1
        self.closed = False

    def read_next(self) -> Optional[List[str]]:
        if self._it is None:
            raise RuntimeError("source is not open")
        row = next(self._it, None)
        return None if row is None else list(row)

    def close(self) -> None:
        self._it = None
        self.closed = True
