"""
Search payload construction.

Each corpus document becomes one SearchRecord whose excerpt is the plain text
of the rendered body, cut at a word boundary.
"""

from __future__ import annotations

from typing import Callable, Sequence

from ..markup import html_to_text, render_body
from .types import Document, SearchRecord


def truncate_excerpt(text: str, max_chars: int) -> str:
    """Truncate text to at most ``max_chars`` without splitting a word.

    Args:
        text: Whitespace-collapsed plain text
        max_chars: Character budget, must be positive

    Returns:
        The text itself when it fits, otherwise the longest prefix ending at
        a word boundary within the budget. A single word longer than the
        budget yields an empty string.

    Examples:
        >>> truncate_excerpt("alpha beta gamma", 10)
        'alpha beta'
        >>> truncate_excerpt("alpha beta gamma", 8)
        'alpha'
    """
    if len(text) <= max_chars:
        return text
    if text[max_chars].isspace():
        return text[:max_chars].rstrip()
    head = text[:max_chars]
    cut = head.rfind(" ")
    if cut <= 0:
        return ""
    return head[:cut].rstrip()


def plain_text(document: Document, render: Callable[[str], str] = render_body) -> str:
    return html_to_text(render(document.body))


def build_search_index(
    corpus: Sequence[Document],
    excerpt_length: int,
    render: Callable[[str], str] = render_body,
) -> list[SearchRecord]:
    """Project every corpus document to a SearchRecord, in corpus order.

    Args:
        corpus: Documents in canonical order
        excerpt_length: Maximum excerpt length in characters
        render: Markdown to HTML renderer used before extracting text

    Returns:
        One record per document
    """
    return [
        SearchRecord(
            slug=doc.slug,
            title=doc.title,
            tags=doc.tags,
            excerpt=truncate_excerpt(plain_text(doc, render), excerpt_length),
        )
        for doc in corpus
    ]
