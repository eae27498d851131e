"""Tests for search payload construction and excerpt truncation."""

from datetime import date

import pytest

from ghpage_blog.core.search import build_search_index, plain_text, truncate_excerpt
from ghpage_blog.core.types import Document


def _doc(slug: str, body: str, day: int = 1, tags: tuple[str, ...] = ()) -> Document:
    return Document(slug=slug, title=slug.title(), date=date(2024, 1, day), tags=tags, body=body)


def test_truncate_keeps_short_text():
    assert truncate_excerpt("short text", 50) == "short text"
    assert truncate_excerpt("exactly ten", 11) == "exactly ten"


def test_truncate_cuts_at_word_boundary():
    assert truncate_excerpt("alpha beta gamma", 10) == "alpha beta"
    assert truncate_excerpt("alpha beta gamma", 8) == "alpha"
    assert truncate_excerpt("alpha beta gamma", 11) == "alpha beta"


def test_truncate_single_long_word_gives_empty_excerpt():
    assert truncate_excerpt("supercalifragilistic", 5) == ""


@pytest.mark.parametrize("limit", [1, 7, 15, 23, 40, 61])
def test_truncate_never_splits_a_word(limit):
    text = "the quick brown fox jumps over the lazy dog and keeps running far away"
    excerpt = truncate_excerpt(text, limit)

    assert len(excerpt) <= limit
    assert text.startswith(excerpt)
    if excerpt:
        assert text[len(excerpt)] == " "
        assert excerpt.split(" ") == text.split(" ")[: len(excerpt.split(" "))]


def test_plain_text_strips_markdown():
    doc = _doc("a", "# Heading\n\nSome *emphasis* and `code`.\n")
    assert plain_text(doc) == "Heading Some emphasis and code."


def test_build_search_index_follows_corpus_order():
    corpus = (
        _doc("newer", "Newer body", day=2, tags=("go",)),
        _doc("older", "Older body", day=1),
    )
    records = build_search_index(corpus, 100)

    assert [record.slug for record in records] == ["newer", "older"]
    assert records[0].title == "Newer"
    assert records[0].tags == ("go",)
    assert records[0].excerpt == "Newer body"
    assert records[0].to_dict() == {
        "slug": "newer",
        "title": "Newer",
        "tags": ["go"],
        "excerpt": "Newer body",
    }


def test_build_search_index_truncates_excerpt():
    body = "word " * 100
    record = build_search_index((_doc("long", body),), 22)[0]

    assert record.excerpt == "word word word word"


def test_build_search_index_is_deterministic():
    corpus = (_doc("a", "Some **bold** content here", tags=("x",)),)
    assert build_search_index(corpus, 10) == build_search_index(corpus, 10)


def test_build_search_index_uses_given_renderer():
    corpus = (_doc("a", "ignored"),)
    records = build_search_index(corpus, 100, render=lambda body: "<p>rendered text</p>")
    assert records[0].excerpt == "rendered text"
