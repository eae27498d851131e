"""
Error taxonomy for the site build.

Loading and assembly errors are fatal and abort the whole build.
PageRangeError is raised for callers asking for a page that does not exist.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable


class BuildError(Exception):
    """Base class for every error the build reports to the user."""


class DocumentParseError(BuildError):
    """A document is missing a required field or carries an invalid one.

    Attributes:
        source: Path of the offending document
        field: Name of the missing or invalid front matter field
        reason: Human readable description of the problem
    """

    def __init__(self, source: Path | str, field: str, reason: str):
        self.source = str(source)
        self.field = field
        self.reason = reason
        super().__init__(f"{self.source}: invalid '{field}': {reason}")


class DuplicateSlugError(BuildError):
    """Two or more documents resolve to the same slug."""

    def __init__(self, slug: str, sources: Iterable[Path | str]):
        self.slug = slug
        self.sources = tuple(str(source) for source in sources)
        super().__init__(f"duplicate slug '{slug}' in: {', '.join(self.sources)}")


class PageRangeError(BuildError):
    """A page number outside ``[1, total_pages]`` was requested."""

    def __init__(self, page_number: int, total_pages: int):
        self.page_number = page_number
        self.total_pages = total_pages
        super().__init__(f"page {page_number} out of range (1..{total_pages})")


class ConfigError(BuildError):
    """A configuration option has an invalid value."""

    def __init__(self, option: str, reason: str):
        self.option = option
        self.reason = reason
        super().__init__(f"invalid config option '{option}': {reason}")
