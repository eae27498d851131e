"""
Corpus assembly: duplicate detection, draft filtering and canonical ordering.

The order produced here (date descending, slug ascending) is the only sort in
the build. Every other view filters or slices this sequence.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Iterable

from .errors import DuplicateSlugError
from .types import Document


def corpus_sort_key(document: Document) -> tuple[int, str]:
    """Sort key giving date descending, then slug ascending."""
    return (-document.date.toordinal(), document.slug)


def assemble_corpus(
    documents: Iterable[Document], include_drafts: bool = False
) -> tuple[Document, ...]:
    """Build the ordered corpus from loaded documents.

    Args:
        documents: Every successfully loaded document, drafts included
        include_drafts: Preview mode; keep documents marked as drafts

    Returns:
        Immutable, totally ordered tuple of published documents

    Raises:
        DuplicateSlugError: If two documents share a slug, drafts included
    """
    documents = list(documents)
    _check_unique_slugs(documents)
    published = [doc for doc in documents if include_drafts or not doc.draft]
    return tuple(sorted(published, key=corpus_sort_key))


def _check_unique_slugs(documents: list[Document]) -> None:
    sources: dict[str, list[str]] = defaultdict(list)
    for doc in documents:
        sources[doc.slug].append(doc.source)
    for slug in sorted(sources):
        if len(sources[slug]) > 1:
            raise DuplicateSlugError(slug, sources[slug])
