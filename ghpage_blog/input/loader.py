"""
Document loading and front matter validation.

Each Markdown source is split into a YAML front matter header and a body
with python-frontmatter, validated against the document schema and turned
into a Document. Tags are normalized here so every later stage sees
canonical values.
"""

from __future__ import annotations

import logging
import re
from datetime import date, datetime
from pathlib import Path
from typing import Any, Callable, Iterator

import frontmatter
import yaml

from ..core.errors import DocumentParseError
from ..core.tags import normalize_tag
from ..core.types import Document

logger = logging.getLogger(__name__)

DOCUMENT_SUFFIXES = (".md", ".mdx")


def slugify(text: str) -> str:
    """Convert text to a URL-safe slug segment.

    Args:
        text: The text to slugify

    Returns:
        A lowercase, hyphenated slug, "untitled" if nothing is left
    """
    slug = text.lower()
    slug = re.sub(r"[^a-z0-9]+", "-", slug)
    slug = slug.strip("-")
    if not slug:
        slug = "untitled"
    return slug


def slug_for_path(path: Path, content_root: Path) -> str:
    """Derive a document slug from its path relative to the content root.

    Examples:
        >>> slug_for_path(Path("data/blog/2024/Hello World.md"), Path("data/blog"))
        '2024/hello-world'
    """
    relative = path.relative_to(content_root).with_suffix("")
    return "/".join(slugify(part) for part in relative.parts)


def load_document(path: Path, text: str, content_root: Path) -> Document:
    """Parse and validate one document.

    Args:
        path: Source path, used for the slug and error messages
        text: Full file content, front matter included
        content_root: Directory slugs are relative to

    Returns:
        The validated Document

    Raises:
        DocumentParseError: If the front matter cannot be parsed or a field
            is missing or invalid
    """
    try:
        post = frontmatter.loads(text)
    except (yaml.YAMLError, ValueError) as exc:
        raise DocumentParseError(path, "front matter", f"not valid YAML ({exc})") from exc

    meta = post.metadata
    if not isinstance(meta, dict):
        raise DocumentParseError(path, "front matter", "must be a mapping")

    return Document(
        slug=slug_for_path(path, content_root),
        title=_parse_title(path, meta),
        date=_parse_date(path, meta),
        tags=_parse_tags(path, meta),
        draft=_parse_draft(path, meta),
        summary=_parse_summary(path, meta),
        body=post.content,
        source=str(path),
    )


def read_source(path: Path) -> str:
    """Read a document as UTF-8, reporting failures as DocumentParseError."""
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        reason = f"not valid UTF-8 ({exc.reason} at byte {exc.start})"
        raise DocumentParseError(path, "encoding", reason) from exc
    except OSError as exc:
        raise DocumentParseError(path, "file", f"cannot be read ({exc.strerror or exc})") from exc


def iter_document_paths(content_dir: Path) -> Iterator[Path]:
    """Yield document files under content_dir in sorted order."""
    for path in sorted(content_dir.rglob("*")):
        if path.is_file() and path.suffix.lower() in DOCUMENT_SUFFIXES:
            yield path


def load_documents(
    content_dir: Path,
    on_loaded: Callable[[Document], None] | None = None,
) -> list[Document]:
    """Load every document under content_dir.

    The first invalid document aborts loading with DocumentParseError.

    Args:
        content_dir: Root directory of the authored documents
        on_loaded: Optional callback invoked after each document is loaded

    Returns:
        Documents in sorted source path order, drafts included
    """
    documents: list[Document] = []
    for path in iter_document_paths(content_dir):
        document = load_document(path, read_source(path), content_dir)
        logger.debug("Loaded %s as %s", path, document.slug)
        documents.append(document)
        if on_loaded is not None:
            on_loaded(document)
    return documents


def _parse_title(path: Path, meta: dict[str, Any]) -> str:
    title = meta.get("title")
    if title is None:
        raise DocumentParseError(path, "title", "missing")
    if not isinstance(title, str) or not title.strip():
        raise DocumentParseError(path, "title", "must be a non-empty string")
    return title.strip()


def _parse_date(path: Path, meta: dict[str, Any]) -> date:
    value = meta.get("date")
    if value is None:
        raise DocumentParseError(path, "date", "missing")
    # datetime is a subclass of date, check it first
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError:
            pass
    raise DocumentParseError(path, "date", f"not a valid calendar date: {value!r}")


def _parse_tags(path: Path, meta: dict[str, Any]) -> tuple[str, ...]:
    value = meta.get("tags")
    if value is None:
        return ()
    if not isinstance(value, list):
        raise DocumentParseError(path, "tags", "must be a list of strings")
    tags = set()
    for item in value:
        if not isinstance(item, str) or not item.strip():
            raise DocumentParseError(path, "tags", f"invalid tag {item!r}")
        tags.add(normalize_tag(item))
    return tuple(sorted(tags))


def _parse_draft(path: Path, meta: dict[str, Any]) -> bool:
    value = meta.get("draft", False)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise DocumentParseError(path, "draft", f"must be true or false, got {value!r}")
    return value


def _parse_summary(path: Path, meta: dict[str, Any]) -> str | None:
    value = meta.get("summary")
    if value is None:
        return None
    if not isinstance(value, str):
        raise DocumentParseError(path, "summary", "must be a string")
    return value.strip() or None
