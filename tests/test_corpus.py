"""Tests for corpus assembly and canonical ordering."""

from datetime import date

import pytest

from ghpage_blog.core.corpus import assemble_corpus
from ghpage_blog.core.errors import DuplicateSlugError
from ghpage_blog.core.types import Document


def _doc(slug: str, day: str, draft: bool = False) -> Document:
    return Document(slug=slug, title=slug.upper(), date=date.fromisoformat(day), draft=draft)


def _example_documents() -> list[Document]:
    return [
        _doc("c", "2024-01-05"),
        _doc("a", "2024-01-05"),
        _doc("d", "2024-01-03"),
        _doc("e", "2024-01-10"),
        _doc("b", "2024-01-01"),
    ]


def test_orders_by_date_descending_then_slug():
    corpus = assemble_corpus(_example_documents())
    assert [doc.slug for doc in corpus] == ["e", "a", "c", "d", "b"]


def test_ordering_is_independent_of_input_order():
    docs = _example_documents()
    forward = assemble_corpus(docs)
    backward = assemble_corpus(list(reversed(docs)))
    assert forward == backward


def test_corpus_is_immutable_tuple():
    assert isinstance(assemble_corpus(_example_documents()), tuple)


def test_drafts_excluded_by_default():
    docs = _example_documents() + [_doc("draft", "2024-02-01", draft=True)]
    corpus = assemble_corpus(docs)
    assert "draft" not in [doc.slug for doc in corpus]


def test_drafts_included_in_preview_mode():
    docs = _example_documents() + [_doc("draft", "2024-02-01", draft=True)]
    corpus = assemble_corpus(docs, include_drafts=True)
    assert [doc.slug for doc in corpus][0] == "draft"


def test_duplicate_slug_is_fatal():
    docs = [
        Document(slug="same", title="One", date=date(2024, 1, 1), source="one.md"),
        Document(slug="same", title="Two", date=date(2024, 1, 2), source="two.md"),
    ]
    with pytest.raises(DuplicateSlugError) as excinfo:
        assemble_corpus(docs)
    assert excinfo.value.slug == "same"
    assert excinfo.value.sources == ("one.md", "two.md")


def test_duplicate_slug_with_draft_is_still_fatal():
    docs = [
        Document(slug="same", title="One", date=date(2024, 1, 1)),
        Document(slug="same", title="Two", date=date(2024, 1, 2), draft=True),
    ]
    with pytest.raises(DuplicateSlugError):
        assemble_corpus(docs)
