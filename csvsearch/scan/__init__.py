from .predicate import is_empty_row, normalize_query, row_matches
from .scanner import ID_LABEL, ScanResult, ScanStats, read_header, scan

__all__ = [
    "ID_LABEL",
    "ScanResult",
    "ScanStats",
    "scan",
    "read_header",
    "is_empty_row",
    "normalize_query",
    "row_matches",
]
