"""
Page arithmetic for presenting scan results.

The scanner only reports total_matches; everything a pager needs (page count,
which page numbers to link, where the gaps go) is derived here.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class PageLink:
    kind: str  # "prev" | "page" | "current" | "gap" | "next"
    page: Optional[int] = None

    def to_dict(self) -> dict:
        return {"kind": self.kind, "page": self.page}


def total_pages(total_matches: int, page_size: int) -> int:
    """At least one page, even with zero matches."""
    return max(1, math.ceil(total_matches / page_size))


def page_links(current: int, pages: int, radius: int = 5) -> List[PageLink]:
    """
    Links for a pager: prev, first page + gap, current +/- radius,
    gap + last page, next. Empty when everything fits on one page.
    """
    if pages <= 1:
        return []

    out: List[PageLink] = []
    if current > 1:
        out.append(PageLink("prev", current - 1))

    start = max(1, current - radius)
    end = min(pages, current + radius)

    if start > 1:
        out.append(PageLink("page", 1))
        if start > 2:
            out.append(PageLink("gap"))

    for p in range(start, end + 1):
        out.append(PageLink("current" if p == current else "page", p))

    if end < pages:
        if end < pages - 1:
            out.append(PageLink("gap"))
        out.append(PageLink("page", pages))

    if current < pages:
        out.append(PageLink("next", current + 1))
    return out
