"""
csvsearch configuration loader.

- Reads environment variables and .env without failing on import.
- Provides a typed Config object with sensible defaults.
- Includes light validators you can call at runtime (not on import).

Usage:
    from csvsearch.config import load_config
    cfg = load_config()
    path = cfg.validate_for_search()  # resolved data file path
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from csvsearch.errors import SourceUnavailable
from csvsearch.sources import infer_delimiter_from_path


_DELIMITER_ALIASES = {
    "\\t": "\t",
    "tab": "\t",
    "comma": ",",
    "pipe": "|",
    "semicolon": ";",
}


def _getenv_str(name: str, default: Optional[str] = None) -> Optional[str]:
    val = os.getenv(name)
    if val is None or val == "":
        return default
    return val


def _getenv_int(name: str, default: int) -> int:
    val = os.getenv(name)
    if val is None or val == "":
        return default
    try:
        return int(val)
    except ValueError:
        return default


def _getenv_float(name: str, default: float) -> float:
    val = os.getenv(name)
    if val is None or val == "":
        return default
    try:
        return float(val)
    except ValueError:
        return default


def parse_delimiter(value: Optional[str]) -> Optional[str]:
    """Map names like 'tab' or '\\t' to the actual character; None = infer."""
    if value is None or value == "":
        return None
    return _DELIMITER_ALIASES.get(value.strip().lower(), value)


@dataclass(frozen=True)
class Config:
    # Data file
    csv_path: Path = Path("data.txt")
    delimiter: Optional[str] = None  # None -> infer from extension
    encoding: str = "utf-8"

    # Paging
    page_size: int = 1000
    page_link_radius: int = 5

    # Files above this size get a "large file" notice
    large_file_mb: float = 50.0

    # Logging
    log_level: str = "INFO"

    # --- Helpers / validations (explicitly called by runtime code) ---

    def resolved_delimiter(self) -> str:
        return self.delimiter or infer_delimiter_from_path(self.csv_path)

    def validate_for_search(self) -> Path:
        """
        Return the resolved data file path. Raises SourceUnavailable when the
        file is missing so callers fail before building a request.
        """
        path = self.csv_path.expanduser().resolve()
        if not path.is_file():
            raise SourceUnavailable("CSV file not found", path=str(path))
        return path


# Single, cached instance after first load
__CONFIG_SINGLETON: Optional[Config] = None


def load_config(reload: bool = False) -> Config:
    """
    Load configuration from environment and .env (once) with defaults.
    Use reload=True to force re-reading.
    """
    global __CONFIG_SINGLETON
    if __CONFIG_SINGLETON is not None and not reload:
        return __CONFIG_SINGLETON

    # Do not override already-set env vars.
    load_dotenv(override=False)

    page_size = _getenv_int("PAGE_SIZE", 1000)
    radius = _getenv_int("PAGE_LINK_RADIUS", 5)

    cfg = Config(
        csv_path=Path(_getenv_str("CSV_PATH", "data.txt") or "data.txt"),
        delimiter=parse_delimiter(_getenv_str("CSV_DELIMITER")),
        encoding=_getenv_str("CSV_ENCODING", "utf-8") or "utf-8",
        page_size=page_size if page_size > 0 else 1000,
        page_link_radius=radius if radius >= 0 else 5,
        large_file_mb=_getenv_float("LARGE_FILE_MB", 50.0),
        log_level=(_getenv_str("LOG_LEVEL", "INFO") or "INFO").upper(),
    )

    __CONFIG_SINGLETON = cfg
    return cfg
