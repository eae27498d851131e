"""Output rendering and artifact writing."""

from .renderer import render_document, render_feed, render_listing
from .writer import build_artifacts, write_artifacts

__all__ = [
    "render_document",
    "render_feed",
    "render_listing",
    "build_artifacts",
    "write_artifacts",
]
