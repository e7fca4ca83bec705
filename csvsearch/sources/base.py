"""
Record source protocol.

A source yields ordered lists of string fields, one logical row at a time:

    open()      -> None           (raises SourceUnavailable)
    read_next() -> list[str] | None   (None = end of stream)
    close()     -> None           (safe to call twice)

Sources are forward-only. A new scan always calls open() again, so
implementations must start over from the first row on every open().
"""

from __future__ import annotations

from typing import Iterator, List, Optional


Record = List[str]


class RecordSource:
    """Base class; subclasses implement open/read_next/close."""

    name: str = "source"

    def open(self) -> None:
        raise NotImplementedError

    def read_next(self) -> Optional[Record]:
        raise NotImplementedError

    def close(self) -> None:
        raise NotImplementedError

    # ---------- Convenience ----------

    def __enter__(self) -> "RecordSource":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __iter__(self) -> Iterator[Record]:
        while True:
            row = self.read_next()
            if row is None:
                return
            yield row
