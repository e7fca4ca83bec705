"""
Delimited-file record source.

Reads rows lazily via the stdlib csv reader; only the current row is held in
memory. The file handle is opened on open() and released on close().
"""

from __future__ import annotations

import csv
import logging
import sys
from pathlib import Path
from typing import IO, Iterator, List, Optional

from csvsearch.errors import SourceUnavailable
from csvsearch.sources.base import RecordSource

LOGGER = logging.getLogger("csvsearch.sources.csv")

# Lift the csv module cap (131072 chars) so long fields never abort a scan.
_max_int = sys.maxsize
while True:
    try:
        csv.field_size_limit(_max_int)
        break
    except OverflowError:
        _max_int //= 10


class CsvFileSource(RecordSource):
    def __init__(
        self,
        path: str | Path,
        *,
        delimiter: str = ",",
        encoding: str = "utf-8",
        quotechar: str = '"',
    ) -> None:
        self.path = Path(path).expanduser()
        self.delimiter = delimiter
        self.encoding = encoding
        self.quotechar = quotechar
        self._fh: Optional[IO[str]] = None
        self._reader: Optional[Iterator[List[str]]] = None

    @property
    def name(self) -> str:  # type: ignore[override]
        return str(self.path)

    def open(self) -> None:
        self.close()
        if not self.path.is_file():
            raise SourceUnavailable("file not found", path=str(self.path))
        try:
            fh = self.path.open("r", encoding=self.encoding, errors="replace", newline="")
        except (OSError, LookupError) as e:
            raise SourceUnavailable(f"unable to open file ({e})", path=str(self.path)) from e
        self._fh = fh
        self._reader = csv.reader(fh, delimiter=self.delimiter, quotechar=self.quotechar)
        LOGGER.debug("Opened %s (delimiter=%r, encoding=%s)", self.path, self.delimiter, self.encoding)

    def read_next(self) -> Optional[List[str]]:
        if self._reader is None:
            raise RuntimeError("source is not open")
        return next(self._reader, None)

    def close(self) -> None:
        if self._fh is not None:
            self._fh.close()
            LOGGER.debug("Closed %s", self.path)
        self._fh = None
        self._reader = None

    def __repr__(self) -> str:
        return f"CsvFileSource({str(self.path)!r}, delimiter={self.delimiter!r})"
