"""
Artifact assembly and writing.

Artifacts are built in memory as a mapping of relative path to content and
only written once the whole set exists, so a failed build leaves the output
directory untouched. JSON payloads use a fixed layout so rebuilding an
unchanged corpus produces identical bytes.
"""

from __future__ import annotations

import hashlib
import json
import logging
import re
from pathlib import Path
from typing import Any, Sequence

from ..config import AppConfig
from ..core.errors import DuplicateSlugError
from ..core.feed import build_feed
from ..core.pagination import EmptyListing, plan_pages
from ..core.search import build_search_index
from ..core.types import Document, Page, Project, TagIndex
from .renderer import render_document, render_feed, render_listing

logger = logging.getLogger(__name__)


def tag_path_segment(tag: str) -> str:
    """URL path segment for a normalized tag.

    Runs of anything but letters, digits and underscores become one hyphen,
    so a segment never contains dots or separators. A tag with nothing left
    (e.g. ``..``) gets a short hash of the tag instead.

    Examples:
        >>> tag_path_segment("machine learning")
        'machine-learning'
        >>> tag_path_segment("c++")
        'c'
    """
    segment = re.sub(r"[^\w]+", "-", tag).strip("-")
    if not segment:
        segment = f"tag-{hashlib.md5(tag.encode()).hexdigest()[:5]}"
    return segment


def dump_json(payload: Any) -> str:
    return f"{json.dumps(payload, ensure_ascii=False, indent=2)}\n"


def listing_path(page: Page, base: str = "") -> str:
    if page.page_number == 1:
        return f"{base}index.html"
    return f"{base}page/{page.page_number}/index.html"


def build_artifacts(
    corpus: Sequence[Document],
    tag_index: TagIndex,
    cfg: AppConfig,
    projects: Sequence[Project] | None = None,
) -> dict[str, str]:
    """Render every output artifact for an assembled corpus.

    Args:
        corpus: Documents in canonical order
        tag_index: Tag index built from the same corpus
        cfg: Application configuration
        projects: Optional project cards

    Returns:
        Mapping of output-relative path to file content

    Raises:
        DuplicateSlugError: If two tags map to the same URL path segment
    """
    build = cfg.build
    empty_listing = EmptyListing(build.empty_listing)
    artifacts: dict[str, str] = {}

    search_records = build_search_index(corpus, build.excerpt_length)
    artifacts[cfg.output.search_filename] = dump_json(
        [record.to_dict() for record in search_records]
    )
    artifacts[cfg.output.tag_data_filename] = dump_json(tag_index.tag_counts())
    artifacts[cfg.output.feed_filename] = render_feed(
        build_feed(corpus, build.feed_limit), cfg.site, cfg.output.feed_filename
    )
    if projects is not None:
        artifacts["projects.json"] = dump_json([project.to_dict() for project in projects])

    segments = _tag_segments(tag_index)

    if cfg.output.tag_feeds:
        for tag, segment in segments.items():
            feed_path = f"tags/{segment}/{cfg.output.feed_filename}"
            artifacts[feed_path] = render_feed(
                build_feed(tag_index.documents(tag), build.feed_limit),
                cfg.site,
                feed_path,
                title=f"{cfg.site.title} - {tag}",
            )

    if cfg.output.html:
        for page in plan_pages(corpus, build.page_size, empty_listing):
            artifacts[listing_path(page)] = render_listing(page, cfg.site, "All Posts")
        for tag, segment in segments.items():
            base = f"tags/{segment}/"
            for page in plan_pages(tag_index.documents(tag), build.page_size, empty_listing):
                artifacts[listing_path(page, base)] = render_listing(
                    page, cfg.site, tag, base=base
                )
        for document in corpus:
            artifacts[f"posts/{document.slug}/index.html"] = render_document(document, cfg.site)

    logger.debug("Built %d artifacts", len(artifacts))
    return artifacts


MANIFEST_FILENAME = ".build-manifest.json"


def write_artifacts(artifacts: dict[str, str], output_dir: Path) -> list[Path]:
    """Write artifacts under output_dir in sorted path order.

    Files listed in the manifest of a previous build but not produced by
    this one are removed, along with directories left empty. Files the build
    never wrote are left alone.

    Args:
        artifacts: Mapping of output-relative path to file content
        output_dir: Directory for the generated site

    Returns:
        Paths of the written files, manifest excluded
    """
    stale = sorted(set(_read_manifest(output_dir)) - set(artifacts))
    for relative in stale:
        _remove_stale(output_dir, relative)

    written: list[Path] = []
    for relative in sorted(artifacts):
        path = output_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(artifacts[relative], encoding="utf-8")
        written.append(path)

    (output_dir / MANIFEST_FILENAME).write_text(dump_json(sorted(artifacts)), encoding="utf-8")
    if stale:
        logger.info("Removed %d stale files from %s", len(stale), output_dir)
    return written


def _read_manifest(output_dir: Path) -> list[str]:
    path = output_dir / MANIFEST_FILENAME
    if not path.is_file():
        return []
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.warning("Ignoring unreadable manifest %s", path)
        return []
    if not isinstance(raw, list):
        return []
    return [item for item in raw if isinstance(item, str)]


def _remove_stale(output_dir: Path, relative: str) -> None:
    root = output_dir.resolve()
    path = (output_dir / relative).resolve()
    # only touch paths strictly inside the output directory
    if root not in path.parents or not path.is_file():
        return
    path.unlink()
    parent = path.parent
    while parent != root and not any(parent.iterdir()):
        parent.rmdir()
        parent = parent.parent


def _tag_segments(tag_index: TagIndex) -> dict[str, str]:
    segments: dict[str, str] = {}
    owners: dict[str, str] = {}
    for tag in tag_index.tags():
        segment = tag_path_segment(tag)
        if segment in owners:
            raise DuplicateSlugError(f"tags/{segment}", [owners[segment], tag])
        owners[segment] = tag
        segments[tag] = segment
    return segments
