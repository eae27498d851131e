"""
Page rendering for documents, listings and feeds.

Pages are rendered with Jinja2 templates. Nothing rendered here depends on
the wall clock, so an unchanged corpus renders to identical bytes.
"""

from __future__ import annotations

from datetime import datetime, time, timezone
from email.utils import format_datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any, Sequence

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ..core.types import Document, FeedEntry, Page
from ..markup import render_body

if TYPE_CHECKING:
    from ..config import SiteConfig


_env = Environment(
    loader=FileSystemLoader(str(Path(__file__).parent.parent / "templates")),
    autoescape=select_autoescape(["html", "xml"]),
    keep_trailing_newline=True,
)


def listing_url(page_number: int, base: str = "", root: str = "") -> str:
    """URL of a listing page under ``base`` (e.g. ``tags/go/``).

    ``root`` is the site's base path, e.g. ``/ghpage-blog`` when the site is
    served from a project page rather than a domain root.
    """
    if page_number == 1:
        return f"{root}/{base}"
    return f"{root}/{base}page/{page_number}/"


def render_document(document: Document, site: SiteConfig) -> str:
    template = _env.get_template("post.html")
    return template.render(
        site=site,
        root=site.base_path,
        document=document,
        content=render_body(document.body),
    )


def render_listing(
    page: Page,
    site: SiteConfig,
    heading: str,
    base: str = "",
) -> str:
    """Render one listing page.

    Args:
        page: The page to render
        site: Site settings for the layout
        heading: Listing heading, e.g. "All Posts" or a tag name
        base: URL prefix of the listing, empty for the main listing

    Returns:
        HTML for the page, with previous/next links when they exist
    """
    template = _env.get_template("listing.html")
    return template.render(
        site=site,
        root=site.base_path,
        heading=heading,
        page=page,
        previous_url=(
            listing_url(page.page_number - 1, base, site.base_path) if page.has_previous else None
        ),
        next_url=listing_url(page.page_number + 1, base, site.base_path) if page.has_next else None,
    )


def render_feed(
    entries: Sequence[FeedEntry],
    site: SiteConfig,
    feed_path: str,
    title: str | None = None,
) -> str:
    """Render entries as an RSS 2.0 document.

    ``lastBuildDate`` is the newest entry's date so the output only changes
    when the content does.
    """
    template = _env.get_template("feed.xml")
    base_url = site.base_url.rstrip("/")
    items: list[dict[str, Any]] = [
        {
            "title": entry.title,
            "link": f"{base_url}/posts/{entry.slug}/",
            "pub_date": rfc822_date(entry),
            "summary": entry.summary,
        }
        for entry in entries
    ]
    return template.render(
        site=site,
        title=title or site.title,
        link=f"{base_url}/",
        feed_url=f"{base_url}/{feed_path}",
        last_build_date=items[0]["pub_date"] if items else None,
        items=items,
    )


def rfc822_date(entry: FeedEntry) -> str:
    midnight = datetime.combine(entry.date, time(), tzinfo=timezone.utc)
    return format_datetime(midnight, usegmt=True)
