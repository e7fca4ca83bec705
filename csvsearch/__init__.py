"""
Streaming search over large delimited files.

Stable import surface so callers don't need to know where internals live:

    from csvsearch import scan, search, validate_search_request, open_source

- scan                    : one-pass filter + paginate over a RecordSource
                            (csvsearch/scan/scanner.py).
- search                  : config -> source -> scan -> pagination facade
                            (csvsearch/service.py).
- validate_search_request : clamps raw query/page/page_size input
                            (csvsearch/request.py).
- open_source             : builds a file-backed RecordSource
                            (csvsearch/sources/__init__.py).
"""

from .errors import CsvSearchError, InvalidSearchRequest, SourceUnavailable
from .scan import ScanResult, scan
from .sources import IterableSource, RecordSource, open_source
from .request import SearchRequest, validate_search_request
from .service import SearchResponse, search

__version__ = "0.1.0"

__all__ = [
    "CsvSearchError",
    "InvalidSearchRequest",
    "SourceUnavailable",
    "ScanResult",
    "scan",
    "IterableSource",
    "RecordSource",
    "open_source",
    "SearchRequest",
    "validate_search_request",
    "SearchResponse",
    "search",
]
