"""
Document renderer: Markdown to HTML and HTML to plain text.

Markdown is rendered with markdown-it (CommonMark, raw HTML allowed);
plain text is extracted with BeautifulSoup.
"""

from __future__ import annotations

import re

from bs4 import BeautifulSoup
from markdown_it import MarkdownIt

_md = MarkdownIt("commonmark", {"html": True})
_WHITESPACE_RE = re.compile(r"\s+")
_BLOCK_TAGS = [
    "p", "h1", "h2", "h3", "h4", "h5", "h6",
    "li", "pre", "blockquote", "td", "th", "br", "hr",
]


def render_body(body: str) -> str:
    """Render a Markdown body to HTML."""
    return _md.render(body or "").strip()


def html_to_text(html: str) -> str:
    """Reduce rendered HTML to plain text with collapsed whitespace.

    Block elements are separated by a space; inline markup is dropped
    without adding any.

    Args:
        html: Rendered HTML fragment

    Returns:
        Text content, single-spaced and stripped
    """
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(["script", "style"]):
        tag.decompose()
    for tag in soup.find_all(_BLOCK_TAGS):
        tag.insert_after(" ")
    return _WHITESPACE_RE.sub(" ", soup.get_text()).strip()
