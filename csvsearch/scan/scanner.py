"""
Streaming filter + paginate scanner.

One forward pass over a RecordSource:
  - header row gets a synthetic "ID" column prepended
  - empty rows are skipped (no ID, not counted)
  - matches inside the page window are kept, with their 1-based ordinal
    among ALL matches prepended
  - once the window is full and the scan has moved past it, the rest of the
    source is only counted (no ordinals, nothing retained)

Memory is bounded by page_size regardless of file size, and total_matches
is always exact.

Preconditions (not validated here): page >= 1, page_size > 0.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from csvsearch.errors import SourceUnavailable
from csvsearch.scan.predicate import is_empty_row, normalize_query, row_matches
from csvsearch.sources.base import RecordSource

LOGGER = logging.getLogger("csvsearch.scan")

ID_LABEL = "ID"


@dataclass(frozen=True)
class ScanStats:
    rows_read: int = 0
    empty_rows: int = 0
    count_only_rows: int = 0
    count_only: bool = False


@dataclass(frozen=True)
class ScanResult:
    header: List[str]
    records: List[list]
    total_matches: int
    stats: ScanStats = field(default_factory=ScanStats, compare=False)


def read_header(source: RecordSource) -> List[str]:
    """
    First record of an open source. Only end-of-stream is unreadable; a blank
    first line is kept as a single unnamed column.
    """
    header: Optional[List[str]] = source.read_next()
    if header is None:
        raise SourceUnavailable("unable to read header", path=source.name)
    return header or [""]


def _count_remaining(source: RecordSource, query: str) -> tuple[int, int, int]:
    """Count-only tail of the scan. Returns (matches, rows_read, empty_rows)."""
    matches = rows = empty = 0
    for record in source:
        rows += 1
        if is_empty_row(record):
            empty += 1
            continue
        if row_matches(record, query):
            matches += 1
    return matches, rows, empty


def scan(source: RecordSource, query: str, page: int, page_size: int) -> ScanResult:
    q = normalize_query(query)
    window_start = (page - 1) * page_size

    collected: List[list] = []
    match_ordinal = 0
    total_matches = 0
    rows_read = 0
    empty_rows = 0
    count_only_rows = 0
    count_only = False

    with source:
        header = [ID_LABEL, *read_header(source)]

        for record in source:
            rows_read += 1
            if is_empty_row(record):
                empty_rows += 1
                continue
            if not row_matches(record, q):
                continue

            total_matches += 1
            if match_ordinal >= window_start and len(collected) < page_size:
                collected.append([match_ordinal + 1, *record])
            match_ordinal += 1

            if len(collected) >= page_size and match_ordinal > window_start + page_size:
                count_only = True
                extra, count_only_rows, skipped = _count_remaining(source, q)
                total_matches += extra
                rows_read += count_only_rows
                empty_rows += skipped
                break

    stats = ScanStats(
        rows_read=rows_read,
        empty_rows=empty_rows,
        count_only_rows=count_only_rows,
        count_only=count_only,
    )
    LOGGER.debug(
        "scan %s q=%r page=%d size=%d -> %d/%d matches, rows=%d, count_only=%d",
        source.name, query, page, page_size, len(collected), total_matches,
        rows_read, count_only_rows,
    )
    return ScanResult(header=header, records=collected, total_matches=total_matches, stats=stats)
