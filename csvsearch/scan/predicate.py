"""
Row predicates used by the scanner.

- is_empty_row: [] or a single blank field (what a blank line parses to).
- row_matches: case-insensitive substring match over every field; an empty
  query matches every row.
"""

from __future__ import annotations

from typing import Sequence


def normalize_query(query: str | None) -> str:
    """Lower-case once per scan instead of once per field."""
    return (query or "").lower()


def is_empty_row(record: Sequence[str]) -> bool:
    if not record:
        return True
    return len(record) == 1 and not (record[0] or "").strip()


def row_matches(record: Sequence[str], query: str) -> bool:
    """
    `query` must already be normalized (see normalize_query).
    Stops at the first field containing it.
    """
    if query == "":
        return True
    for cell in record:
        if query in (cell or "").lower():
            return True
    return False
