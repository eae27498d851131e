"""Syndication feed entries from an ordered document list."""

from __future__ import annotations

from typing import Sequence

from .types import Document, FeedEntry


def build_feed(documents: Sequence[Document], limit: int) -> list[FeedEntry]:
    """Project the first ``limit`` documents to feed entries.

    The input is already date-descending (the corpus or a tag sequence), so
    the first entries are the most recent. A shorter input is not an error.
    """
    if limit <= 0:
        return []
    return [
        FeedEntry(slug=doc.slug, title=doc.title, date=doc.date, summary=doc.summary)
        for doc in documents[:limit]
    ]
