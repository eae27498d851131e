"""
Tag index construction.

Tags are normalized by the loader, so spellings that differ only in case or
surrounding whitespace already share one key here.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Sequence

from .types import Document, TagIndex


def normalize_tag(tag: str) -> str:
    return tag.strip().casefold()


def build_tag_index(corpus: Sequence[Document]) -> TagIndex:
    """Group corpus documents by tag in a single ordered pass.

    Args:
        corpus: Documents in canonical order

    Returns:
        TagIndex whose per-tag sequences keep corpus order. Only tags carried
        by at least one corpus document are present.
    """
    grouped: dict[str, list[Document]] = {}
    for document in corpus:
        for tag in document.tags:
            grouped.setdefault(tag, []).append(document)

    entries = {tag: tuple(docs) for tag, docs in grouped.items() if docs}
    return TagIndex(entries=MappingProxyType(entries))
