"""
Core data types for the site build.

This module defines the value objects that flow through the pipeline:
- Document: One authored document with validated front matter
- TagIndex: Normalized tag to ordered documents mapping
- Page: A bounded slice of an ordered document list
- SearchRecord: Compact projection for client-side search
- FeedEntry: Projection for the syndication feed
- Project: A static project card

All of them are created fresh on every build and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Mapping


@dataclass(frozen=True)
class Document:
    """An authored document after front matter validation.

    Attributes:
        slug: Unique identifier derived from the source path
        title: Non-empty document title
        date: Publication date, primary sort key
        tags: Normalized (case-folded, stripped) tags, sorted and unique
        draft: Whether the document is excluded from default builds
        summary: Optional short summary from the front matter
        body: Raw Markdown body handed to the document renderer
        source: Path of the file the document was loaded from
    """

    slug: str
    title: str
    date: date
    tags: tuple[str, ...] = ()
    draft: bool = False
    summary: str | None = None
    body: str = ""
    source: str = ""


@dataclass(frozen=True)
class TagIndex:
    """Mapping from normalized tag to the documents carrying it.

    Each sequence keeps the relative order of the corpus it was built from.
    """

    entries: Mapping[str, tuple[Document, ...]] = field(default_factory=dict)

    def __contains__(self, tag: str) -> bool:
        return tag in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def tags(self) -> list[str]:
        return sorted(self.entries)

    def documents(self, tag: str) -> tuple[Document, ...]:
        return self.entries[tag]

    def count(self, tag: str) -> int:
        return len(self.entries[tag])

    def tag_counts(self) -> dict[str, int]:
        """Return ``{tag: count}`` sorted by tag name."""
        return {tag: self.count(tag) for tag in self.tags()}


@dataclass(frozen=True)
class Page:
    """One page of an ordered document list.

    Attributes:
        page_number: 1-indexed position of this page
        items: Documents on this page, in source order
        total_pages: Number of pages the source list was split into
        total_items: Length of the source list
        page_size: Maximum number of items per page
    """

    page_number: int
    items: tuple[Document, ...]
    total_pages: int
    total_items: int
    page_size: int

    @property
    def start_index(self) -> int:
        return (self.page_number - 1) * self.page_size

    @property
    def end_index(self) -> int:
        return self.start_index + len(self.items)

    @property
    def has_previous(self) -> bool:
        return self.page_number > 1

    @property
    def has_next(self) -> bool:
        return self.page_number < self.total_pages


@dataclass(frozen=True)
class SearchRecord:
    slug: str
    title: str
    tags: tuple[str, ...]
    excerpt: str

    def to_dict(self) -> dict[str, object]:
        return {
            "slug": self.slug,
            "title": self.title,
            "tags": list(self.tags),
            "excerpt": self.excerpt,
        }


@dataclass(frozen=True)
class FeedEntry:
    slug: str
    title: str
    date: date
    summary: str | None = None


@dataclass(frozen=True)
class Project:
    """A static project card shown on the projects page."""

    title: str
    description: str
    href: str | None = None
    img_src: str | None = None

    def to_dict(self) -> dict[str, object]:
        return {
            "title": self.title,
            "description": self.description,
            "href": self.href,
            "imgSrc": self.img_src,
        }
