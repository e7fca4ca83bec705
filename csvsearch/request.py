"""
Pydantic-based validation of search parameters (CLI / caller boundary).

Goals
- The scanner assumes page >= 1 and page_size > 0; this is where raw,
  free-form input gets clamped into that shape.
- query: None -> "", surrounding whitespace trimmed.
- page: parsed leniently (leading digits, like "3abc" -> 3; garbage -> 1),
  then clamped to >= 1.
- page_size: must be a positive integer. With fixup=True a bad value falls
  back to the configured default instead of raising.

Usage
- validate_search_request(raw: dict, *, default_page_size: int, fixup: bool = False)
  -> SearchRequest
"""

from __future__ import annotations

import re
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from csvsearch.errors import InvalidSearchRequest


_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def _lenient_int(v: Any) -> Optional[int]:
    if v is None or isinstance(v, bool):
        return None
    if isinstance(v, int):
        return v
    if isinstance(v, float):
        return int(v)
    m = _LEADING_INT_RE.match(str(v))
    return int(m.group(1)) if m else None


class SearchRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    query: str = ""
    page: int = 1
    page_size: int

    @field_validator("query", mode="before")
    @classmethod
    def _trim_query(cls, v):
        if v is None:
            return ""
        return str(v).strip()

    @field_validator("page", mode="before")
    @classmethod
    def _clamp_page(cls, v):
        n = _lenient_int(v)
        return max(1, n) if n is not None else 1

    @field_validator("page_size", mode="before")
    @classmethod
    def _positive_page_size(cls, v):
        n = _lenient_int(v)
        if n is None or n <= 0:
            raise ValueError(f"page_size must be a positive integer, got {v!r}")
        return n


def validate_search_request(
    raw: Dict[str, Any],
    *,
    default_page_size: int,
    fixup: bool = False,
) -> SearchRequest:
    """
    Validate and normalize raw search parameters.

    Behavior:
    - Missing page_size -> default_page_size.
    - Invalid page_size:
        * fixup=False -> InvalidSearchRequest
        * fixup=True  -> default_page_size
    - page never fails; it is clamped.
    """
    data = dict(raw)
    if data.get("page_size") is None:
        data["page_size"] = default_page_size

    try:
        return SearchRequest(**data)
    except ValidationError as e:
        if not fixup:
            raise InvalidSearchRequest(str(e)) from e
        data["page_size"] = default_page_size
        return SearchRequest(**data)
