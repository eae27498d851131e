"""
Configuration management using YAML files and dataclasses.

This module defines all configuration dataclasses and provides loading
from YAML files with defaults. Configuration sections:
- SiteConfig: Site metadata used by pages and feeds
- BuildConfig: Pagination, feed, excerpt and preview settings
- OutputConfig: Which artifacts are written and their file names
- LoggingConfig: Logging behavior
- AppConfig: Root configuration container

Values are validated once at startup; an invalid value raises ConfigError
and is never replaced by a default.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
from urllib.parse import urlparse

import yaml

from .core.errors import ConfigError
from .core.pagination import EmptyListing


@dataclass
class SiteConfig:
    """Site metadata.

    Attributes:
        title: Site title shown in page headers and the feed channel
        description: Feed channel description
        base_url: Absolute URL the site is served from, used in feed links
        language: Language code for pages and the feed
        author: Default author name
    """

    title: str = "Blog"
    description: str = ""
    base_url: str = "https://example.com"
    language: str = "en-us"
    author: str = ""

    @property
    def base_path(self) -> str:
        """Path part of base_url without a trailing slash, e.g. ``/ghpage-blog``."""
        return urlparse(self.base_url).path.rstrip("/")


@dataclass
class BuildConfig:
    """Configuration for the indexing and page generation pipeline.

    Attributes:
        page_size: Documents per listing page (> 0)
        feed_limit: Maximum number of feed entries (>= 0)
        excerpt_length: Maximum search excerpt length in characters (> 0)
        include_drafts: Preview mode; include documents marked as drafts
        empty_listing: "single_page" renders one empty page for an empty
            listing, "no_pages" renders nothing
    """

    page_size: int = 5
    feed_limit: int = 20
    excerpt_length: int = 200
    include_drafts: bool = False
    empty_listing: str = EmptyListing.SINGLE_PAGE.value


@dataclass
class OutputConfig:
    """Configuration for output generation.

    Attributes:
        html: Whether to render listing and document pages
        tag_feeds: Whether to write one feed per tag
        search_filename: Name of the search payload file
        feed_filename: Name of the site feed file
        tag_data_filename: Name of the tag count payload file
        projects_file: Optional YAML file with project cards
    """

    html: bool = True
    tag_feeds: bool = True
    search_filename: str = "search.json"
    feed_filename: str = "feed.xml"
    tag_data_filename: str = "tag-data.json"
    projects_file: str | None = None


@dataclass
class LoggingConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
        console: Whether to log to console
        file: Whether to log to a file next to the output directory
        format: Log file format ("jsonl" or "plain")
        filename: Name of the log file
        timestamps: Whether file log records carry a wall-clock timestamp
    """

    level: str = "INFO"
    console: bool = True
    file: bool = False
    format: str = "jsonl"
    filename: str = "build.jsonl"
    timestamps: bool = False


@dataclass
class AppConfig:
    """Root configuration container aggregating all config sections."""

    site: SiteConfig = field(default_factory=SiteConfig)
    build: BuildConfig = field(default_factory=BuildConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | None) -> AppConfig:
    """Load configuration from a YAML file with defaults."""
    if not path:
        cfg = AppConfig()
        validate_config(cfg)
        return cfg

    with open(path, "r", encoding="utf-8") as f:
        try:
            raw = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(str(path), f"not valid YAML: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError(str(path), "top level must be a mapping")

    cfg = _merge_config(AppConfig(), raw)
    validate_config(cfg)
    return cfg


def _merge_config(base: AppConfig, raw: dict[str, Any]) -> AppConfig:
    """Merge raw YAML config into base AppConfig."""
    data = _asdict(base)
    for key, value in raw.items():
        if key not in data:
            continue
        if not isinstance(value, dict):
            raise ConfigError(key, "section must be a mapping")
        unknown = sorted(set(value) - set(data[key]))
        if unknown:
            raise ConfigError(f"{key}.{unknown[0]}", "unknown option")
        data[key].update(value)
    return _fromdict(data)


def _asdict(cfg: AppConfig) -> dict[str, Any]:
    """Convert AppConfig to nested dictionary."""
    return {
        "site": {
            "title": cfg.site.title,
            "description": cfg.site.description,
            "base_url": cfg.site.base_url,
            "language": cfg.site.language,
            "author": cfg.site.author,
        },
        "build": {
            "page_size": cfg.build.page_size,
            "feed_limit": cfg.build.feed_limit,
            "excerpt_length": cfg.build.excerpt_length,
            "include_drafts": cfg.build.include_drafts,
            "empty_listing": cfg.build.empty_listing,
        },
        "output": {
            "html": cfg.output.html,
            "tag_feeds": cfg.output.tag_feeds,
            "search_filename": cfg.output.search_filename,
            "feed_filename": cfg.output.feed_filename,
            "tag_data_filename": cfg.output.tag_data_filename,
            "projects_file": cfg.output.projects_file,
        },
        "logging": {
            "level": cfg.logging.level,
            "console": cfg.logging.console,
            "file": cfg.logging.file,
            "format": cfg.logging.format,
            "filename": cfg.logging.filename,
            "timestamps": cfg.logging.timestamps,
        },
    }


def _fromdict(data: dict[str, Any]) -> AppConfig:
    """Reconstruct AppConfig from nested dictionary."""
    return AppConfig(
        site=SiteConfig(**data["site"]),
        build=BuildConfig(**data["build"]),
        output=OutputConfig(**data["output"]),
        logging=LoggingConfig(**data["logging"]),
    )


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def validate_config(cfg: AppConfig) -> None:
    """Check option values, raising ConfigError on the first invalid one."""
    for option in ("title", "base_url", "language"):
        _require_str(f"site.{option}", getattr(cfg.site, option))
    for option in ("description", "author"):
        _require_str(f"site.{option}", getattr(cfg.site, option), allow_empty=True)
    if not cfg.site.base_url.startswith(("http://", "https://")):
        raise ConfigError("site.base_url", f"must be an http(s) URL, got {cfg.site.base_url!r}")
    _require_int("build.page_size", cfg.build.page_size, minimum=1)
    _require_int("build.feed_limit", cfg.build.feed_limit, minimum=0)
    _require_int("build.excerpt_length", cfg.build.excerpt_length, minimum=1)
    _require_bool("build.include_drafts", cfg.build.include_drafts)
    choices = [policy.value for policy in EmptyListing]
    if cfg.build.empty_listing not in choices:
        raise ConfigError("build.empty_listing", f"must be one of {', '.join(choices)}")
    for option in ("html", "tag_feeds"):
        _require_bool(f"output.{option}", getattr(cfg.output, option))
    for option in ("search_filename", "feed_filename", "tag_data_filename"):
        value = getattr(cfg.output, option)
        if not isinstance(value, str) or not value or "/" in value:
            raise ConfigError(f"output.{option}", "must be a plain file name")
    if cfg.output.projects_file is not None:
        _require_str("output.projects_file", cfg.output.projects_file)

    if not isinstance(cfg.logging.level, str) or cfg.logging.level.upper() not in LOG_LEVELS:
        raise ConfigError("logging.level", f"must be one of {', '.join(LOG_LEVELS)}")
    for option in ("console", "file", "timestamps"):
        _require_bool(f"logging.{option}", getattr(cfg.logging, option))
    if cfg.logging.format not in ("jsonl", "plain"):
        raise ConfigError("logging.format", "must be jsonl or plain")
    _require_str("logging.filename", cfg.logging.filename)


def _require_int(option: str, value: Any, minimum: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(option, f"must be an integer, got {value!r}")
    if value < minimum:
        raise ConfigError(option, f"must be >= {minimum}, got {value}")


def _require_bool(option: str, value: Any) -> None:
    if not isinstance(value, bool):
        raise ConfigError(option, f"must be true or false, got {value!r}")


def _require_str(option: str, value: Any, allow_empty: bool = False) -> None:
    if not isinstance(value, str):
        raise ConfigError(option, f"must be a string, got {value!r}")
    if not allow_empty and not value.strip():
        raise ConfigError(option, "must not be empty")
