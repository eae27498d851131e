"""
Core domain models and indexing logic.

This package contains the data types and the corpus, tag, pagination,
search and feed builders, independent of how documents are read or
artifacts are written.
"""

from .corpus import assemble_corpus, corpus_sort_key
from .errors import (
    BuildError,
    ConfigError,
    DocumentParseError,
    DuplicateSlugError,
    PageRangeError,
)
from .feed import build_feed
from .pagination import EmptyListing, plan_pages, select_page
from .tags import build_tag_index, normalize_tag
from .types import Document, FeedEntry, Page, Project, SearchRecord, TagIndex

__all__ = [
    "Document",
    "FeedEntry",
    "Page",
    "Project",
    "SearchRecord",
    "TagIndex",
    "BuildError",
    "ConfigError",
    "DocumentParseError",
    "DuplicateSlugError",
    "PageRangeError",
    "assemble_corpus",
    "corpus_sort_key",
    "build_tag_index",
    "normalize_tag",
    "plan_pages",
    "select_page",
    "EmptyListing",
    "build_feed",
]
