"""
Search facade: one request in, one fully-derived response out.

Wires config -> source -> scan -> pagination. Each call builds its own source
and runs an independent scan; nothing is cached between calls.
"""

from __future__ import annotations

import logging
import time
import tracemalloc
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from csvsearch.config import Config, load_config
from csvsearch.errors import SourceUnavailable
from csvsearch.inspect import source_stats
from csvsearch.pagination import PageLink, page_links, total_pages
from csvsearch.request import SearchRequest
from csvsearch.scan import scan
from csvsearch.sources import CsvFileSource, RecordSource, open_source

LOGGER = logging.getLogger("csvsearch.service")


@dataclass
class SearchResponse:
    query: str
    page: int
    page_size: int
    header: List[str]
    records: List[list]
    total_matches: int
    total_pages: int
    page_links: List[PageLink] = field(default_factory=list)
    elapsed_ms: float = 0.0
    peak_memory_mb: float = 0.0
    rows_scanned: int = 0
    count_only: bool = False
    source: Optional[Dict[str, object]] = None

    @property
    def showing(self) -> int:
        return len(self.records)

    def to_dict(self) -> Dict[str, object]:
        return {
            "query": self.query,
            "page": self.page,
            "page_size": self.page_size,
            "total_matches": self.total_matches,
            "total_pages": self.total_pages,
            "showing": self.showing,
            "header": self.header,
            "records": self.records,
            "page_links": [link.to_dict() for link in self.page_links],
            "elapsed_ms": round(self.elapsed_ms, 2),
            "peak_memory_mb": round(self.peak_memory_mb, 2),
            "rows_scanned": self.rows_scanned,
            "count_only": self.count_only,
            "source": self.source,
        }


def _source_from_config(cfg: Config) -> CsvFileSource:
    return open_source(cfg.csv_path, delimiter=cfg.resolved_delimiter(), encoding=cfg.encoding)


def _scan_traced(src: RecordSource, request: SearchRequest):
    """
    Run the scan under tracemalloc. Returns (result, elapsed_ms, peak_mb), peak
    being the Python heap high-water mark during the scan only.
    """
    owner = not tracemalloc.is_tracing()
    if owner:
        tracemalloc.start()
    else:
        tracemalloc.reset_peak()
    t0 = time.perf_counter()
    try:
        result = scan(src, request.query, request.page, request.page_size)
        elapsed = (time.perf_counter() - t0) * 1000.0
        _current, peak = tracemalloc.get_traced_memory()
    finally:
        if owner:
            tracemalloc.stop()
    return result, elapsed, peak / (1024 * 1024)


def search(
    request: SearchRequest,
    *,
    cfg: Optional[Config] = None,
    source: Optional[RecordSource] = None,
) -> SearchResponse:
    """
    Run one search. SourceUnavailable propagates to the caller unchanged.
    """
    cfg = cfg or load_config()
    src = source if source is not None else _source_from_config(cfg)

    info = None
    if isinstance(src, CsvFileSource):
        info = source_stats(
            src.path,
            delimiter=src.delimiter,
            encoding=src.encoding,
            large_file_mb=cfg.large_file_mb,
            columns=False,
        )
        if info["large_file"]:
            LOGGER.info("Large file detected (%.2f MB): %s", info["size_mb"], info["path"])

    try:
        result, elapsed, peak_mb = _scan_traced(src, request)
    except SourceUnavailable as e:
        LOGGER.warning("Search aborted: %s", e)
        raise

    pages = total_pages(result.total_matches, request.page_size)
    return SearchResponse(
        query=request.query,
        page=request.page,
        page_size=request.page_size,
        header=result.header,
        records=result.records,
        total_matches=result.total_matches,
        total_pages=pages,
        page_links=page_links(request.page, pages, radius=cfg.page_link_radius),
        elapsed_ms=elapsed,
        peak_memory_mb=peak_mb,
        rows_scanned=result.stats.rows_read,
        count_only=result.stats.count_only,
        source=info,
    )
