"""
Pagination planning for ordered document lists.

Used for the chronological listing and for every tag listing. Pages are
consecutive slices of the input; concatenating their items reproduces it.
"""

from __future__ import annotations

from enum import Enum
from typing import Sequence

from .errors import ConfigError, PageRangeError
from .types import Document, Page


class EmptyListing(str, Enum):
    """What to produce for an empty source list."""

    SINGLE_PAGE = "single_page"
    NO_PAGES = "no_pages"


def plan_pages(
    documents: Sequence[Document],
    page_size: int,
    empty_listing: EmptyListing = EmptyListing.SINGLE_PAGE,
) -> list[Page]:
    """Split an ordered list into fixed-size pages.

    Args:
        documents: Ordered documents to paginate
        page_size: Maximum number of documents per page, must be positive
        empty_listing: Policy for an empty input; one empty page or none

    Returns:
        Pages numbered from 1, the last one possibly shorter

    Raises:
        ConfigError: If page_size is not a positive integer
    """
    if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size <= 0:
        raise ConfigError("page_size", f"must be a positive integer, got {page_size!r}")

    items = tuple(documents)
    total_items = len(items)
    if total_items == 0:
        if EmptyListing(empty_listing) is EmptyListing.NO_PAGES:
            return []
        return [Page(page_number=1, items=(), total_pages=1, total_items=0, page_size=page_size)]

    total_pages = -(-total_items // page_size)
    return [
        Page(
            page_number=number + 1,
            items=items[number * page_size : (number + 1) * page_size],
            total_pages=total_pages,
            total_items=total_items,
            page_size=page_size,
        )
        for number in range(total_pages)
    ]


def select_page(pages: Sequence[Page], page_number: int) -> Page:
    """Return the page with the given 1-indexed number.

    Raises:
        PageRangeError: If page_number is outside ``[1, len(pages)]``
    """
    if not 1 <= page_number <= len(pages):
        raise PageRangeError(page_number, len(pages))
    return pages[page_number - 1]
