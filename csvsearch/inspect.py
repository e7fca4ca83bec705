"""
Tools to check a data file before (or alongside) searching it.

Functions:
- source_stats: size on disk, large-file flag, delimiter and (optionally)
  header columns.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional

from csvsearch.errors import SourceUnavailable
from csvsearch.scan import read_header
from csvsearch.sources import open_source


def _size_bytes(path: Path) -> int:
    if not path.is_file():
        return 0
    return path.stat().st_size


def _read_header(path: Path, delimiter: Optional[str], encoding: str) -> Optional[list]:
    try:
        with open_source(path, delimiter=delimiter, encoding=encoding) as src:
            return read_header(src)
    except SourceUnavailable:
        return None


def source_stats(
    path: str | Path,
    *,
    delimiter: Optional[str] = None,
    encoding: str = "utf-8",
    large_file_mb: float = 50.0,
    columns: bool = True,
) -> Dict[str, object]:
    """
    Report on a data file. Never raises for a missing file; `exists` is False
    and `columns` is None instead.

    With columns=False only stat() is used and the file is never opened.
    """
    p = Path(path).expanduser().resolve()
    size = _size_bytes(p)
    size_mb = round(size / (1024 * 1024), 2)
    src = open_source(p, delimiter=delimiter, encoding=encoding)
    info: Dict[str, object] = {
        "path": str(p),
        "exists": p.is_file(),
        "size_bytes": size,
        "size_mb": size_mb,
        "large_file": size_mb > large_file_mb,
        "delimiter": src.delimiter,
    }
    if columns:
        info["columns"] = _read_header(p, delimiter, encoding)
    return info
