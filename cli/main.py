"""
csvsearch CLI

Command-line front end for the streaming CSV search.

Commands:

  - search [QUERY] [--page N] [--page-size N] [--path P] [--delimiter D]
           [--encoding E] [--format json|text] [--fixup]
      Scan the data file once, print one page of matches plus the exact
      total match count. An empty/missing QUERY lists every row.

  - stats [--path P] [--delimiter D] [--encoding E]
      Size on disk, large-file flag, delimiter and header columns.

Notes:
- Defaults (data path, page size, delimiter, log level) come from the
  environment / .env via csvsearch.config.
- Output is JSON on stdout; errors are a one-line JSON object on stderr
  with exit code 1 (2 for usage errors).

Implementation map:
- Parsing: argparse
- Request validation: csvsearch.request
- Search: csvsearch.service.search
- File info: csvsearch.inspect.source_stats
"""

from __future__ import annotations

from pathlib import Path as _PathLike

from dotenv import load_dotenv

# Load .env early so config picks it up.
load_dotenv(dotenv_path=_PathLike.cwd() / ".env", override=False)


import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from csvsearch.config import Config, load_config, parse_delimiter
from csvsearch.errors import InvalidSearchRequest, SourceUnavailable
from csvsearch.inspect import source_stats
from csvsearch.request import validate_search_request
from csvsearch.service import SearchResponse, search


_MAX_CELL = 40


# -----------------------------------------------------------------------------
# Small helpers
# -----------------------------------------------------------------------------

def _config_from_args(args: argparse.Namespace) -> Config:
    """
    Start from the loaded config and apply any per-invocation overrides.
    """
    cfg = load_config()
    overrides = {}
    if getattr(args, "path", None):
        overrides["csv_path"] = Path(args.path)
    if getattr(args, "delimiter", None):
        overrides["delimiter"] = parse_delimiter(args.delimiter)
    if getattr(args, "encoding", None):
        overrides["encoding"] = args.encoding
    return replace(cfg, **overrides) if overrides else cfg


def _clean_cell(value: object) -> str:
    # Keep one record per terminal line: no control chars, bounded width.
    s = "".join(ch if ch.isprintable() else " " for ch in str(value))
    if len(s) > _MAX_CELL:
        s = s[: _MAX_CELL - 1] + "…"
    return s


def _render_pager(res: SearchResponse) -> str:
    parts: List[str] = []
    for link in res.page_links:
        if link.kind == "prev":
            parts.append("« Previous")
        elif link.kind == "next":
            parts.append("Next »")
        elif link.kind == "gap":
            parts.append("…")
        elif link.kind == "current":
            parts.append(f"[{link.page}]")
        else:
            parts.append(str(link.page))
    return " ".join(parts)


def _render_text(res: SearchResponse) -> str:
    """
    Plain-text rendering: stats line, large-file notice, table, pager.
    """
    lines: List[str] = []

    if res.source and res.source.get("large_file"):
        lines.append(
            f"Large file detected: {res.source['size_mb']}MB. Processing may take a moment."
        )

    if res.total_matches == 0:
        lines.append("No matching records found")
        if res.query:
            lines.append("Try a different search term or search without a query to view all records.")
        else:
            lines.append("The file appears to be empty or couldn't be read.")
        return "\n".join(lines)

    stats = f"Results: {res.total_matches:,} total matches"
    if res.query:
        stats += f' for "{_clean_cell(res.query)}"'
    stats += f" | Page: {res.page} of {res.total_pages:,} | Showing: {res.showing:,} records"
    lines.append(stats)

    pager = _render_pager(res)
    if pager:
        lines.append(pager)

    header = [_clean_cell(h) for h in res.header]
    rows = [[_clean_cell(c) for c in r] for r in res.records]
    ncols = max([len(header)] + [len(r) for r in rows])
    widths = [0] * ncols
    for r in [header] + rows:
        for i, c in enumerate(r):
            widths[i] = max(widths[i], len(c))

    def _fmt(r: List[str]) -> str:
        return " | ".join(c.ljust(widths[i]) for i, c in enumerate(r)).rstrip()

    lines.append("")
    lines.append(_fmt(header))
    lines.append("-+-".join("-" * w for w in widths))
    for r in rows:
        lines.append(_fmt(r))
    lines.append("")

    if pager:
        lines.append(pager)
    if res.source:
        lines.append(
            f"File size: {res.source['size_mb']}MB | Scan: {res.elapsed_ms:.1f} ms"
            f" | Peak memory: {res.peak_memory_mb:.2f}MB"
        )
    return "\n".join(lines)


# -----------------------------------------------------------------------------
# Command implementations
# -----------------------------------------------------------------------------

def cmd_search(args: argparse.Namespace) -> int:
    """
    Run one search request.
    """
    cfg = _config_from_args(args)

    try:
        request = validate_search_request(
            {"query": args.query, "page": args.page, "page_size": args.page_size},
            default_page_size=cfg.page_size,
            fixup=bool(args.fixup),
        )
    except InvalidSearchRequest as e:
        print(json.dumps({"action": "search", "error": str(e)}), file=sys.stderr)
        return 2

    try:
        res = search(request, cfg=cfg)
    except SourceUnavailable as e:
        # Emit machine-readable error JSON for shell scripts/CI
        print(json.dumps({"action": "search", "file": e.path, "error": e.reason}), file=sys.stderr)
        return 1

    if args.format == "text":
        print(_render_text(res))
        return 0

    print(json.dumps({"action": "search", **res.to_dict()}, ensure_ascii=False, indent=2))
    return 0


def cmd_stats(args: argparse.Namespace) -> int:
    """
    Show data file info (size, delimiter, header columns).
    """
    cfg = _config_from_args(args)
    try:
        path = cfg.validate_for_search()
    except SourceUnavailable as e:
        print(json.dumps({"action": "stats", "file": e.path, "error": "file not found"}), file=sys.stderr)
        return 1

    s = source_stats(
        path,
        delimiter=cfg.delimiter,
        encoding=cfg.encoding,
        large_file_mb=cfg.large_file_mb,
    )
    print(json.dumps({"action": "stats", **s}, ensure_ascii=False, indent=2))
    return 0


# -----------------------------------------------------------------------------
# Argument parser construction
# -----------------------------------------------------------------------------

def _add_source_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--path", type=str, help="Data file (default: CSV_PATH or data.txt)")
    p.add_argument("--delimiter", type=str, help="Field delimiter, e.g. ',', 'tab', 'pipe' (default: from extension)")
    p.add_argument("--encoding", type=str, help="File encoding (default: utf-8)")


def build_parser() -> argparse.ArgumentParser:
    """
    Define CLI structure, flags, choices, defaults, and handlers.
    Each subparser sets .set_defaults(func=...), which is called by main().
    """
    p = argparse.ArgumentParser(prog="csvsearch", description="Streaming search over large CSV files")
    p.add_argument("--log-level", type=str, choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level (default: LOG_LEVEL or INFO)")
    sub = p.add_subparsers(dest="command", required=True)

    # --- search ---
    ps = sub.add_parser("search", help="Search all columns for a substring (case-insensitive)")
    ps.add_argument("query", nargs="?", default="", help="Text to look for; empty lists every row")
    ps.add_argument("--page", type=str, default="1", help="Page number (values below 1 are clamped to 1)")
    ps.add_argument("--page-size", type=int, help="Records per page (default: PAGE_SIZE or 1000)")
    ps.add_argument("--format", type=str, choices=["json", "text"], default="json", help="Output format")
    ps.add_argument("--fixup", action="store_true", help="Fall back to the default page size instead of failing")
    _add_source_args(ps)
    ps.set_defaults(func=cmd_search)

    # --- stats ---
    pst = sub.add_parser("stats", help="Show data file size, delimiter and columns")
    _add_source_args(pst)
    pst.set_defaults(func=cmd_stats)

    return p


def main(argv: Optional[list[str]] = None) -> int:
    """
    Entrypoint:
      - Parse CLI args
      - Configure logging
      - Dispatch to subcommand handler and return its exit code
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    level = args.log_level or load_config().log_level
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(levelname)s: %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":
    # Allow executing this file directly: `python cli/main.py ...`
    raise SystemExit(main())
