"""
Logging for the site build.

Console output goes through Rich; an optional file log is written as JSONL
or plain text. File records carry no wall-clock timestamp unless
``logging.timestamps`` is enabled, so two builds of the same corpus produce
the same log.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from rich.logging import RichHandler

from .config import LOG_LEVELS, LoggingConfig
from .core.errors import BuildError, ConfigError

LOGGER_NAME = "ghpage_blog"

# attributes of a bare LogRecord; everything else on a record came from extra=
_RESERVED = frozenset(logging.LogRecord("", 0, "", 0, "", None, None).__dict__) | {
    "message",
    "asctime",
}


def setup_logging(cfg: LoggingConfig, log_dir: Path | None) -> logging.Logger:
    """Configure the package logger.

    Args:
        cfg: Logging configuration
        log_dir: Directory for the log file; no file is written when None

    Returns:
        The configured ``ghpage_blog`` logger

    Raises:
        ConfigError: If the configured level is not a logging level name
    """
    level = level_from_string(cfg.level)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers = []
    logger.propagate = False

    if cfg.console:
        console_handler = RichHandler(rich_tracebacks=True, show_time=False, show_level=True)
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(console_handler)

    if cfg.file and log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_dir / cfg.filename, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(_build_file_formatter(cfg))
        logger.addHandler(file_handler)

    return logger


def log_event(
    logger: logging.Logger | None, message: str, level: int = logging.INFO, **fields: Any
) -> None:
    if logger is None:
        return
    logger.log(level, message, extra=fields)


def log_build_error(logger: logging.Logger | None, exc: BuildError) -> None:
    """Record a fatal build error with the fields that locate it."""
    fields = {
        key: getattr(exc, key)
        for key in ("source", "sources", "field", "option", "slug")
        if getattr(exc, key, None) is not None
    }
    log_event(
        logger,
        f"Build failed: {exc}",
        level=logging.ERROR,
        event="build_failed",
        error=type(exc).__name__,
        **fields,
    )


class JsonlFormatter(logging.Formatter):
    """One JSON object per record, keys sorted."""

    def __init__(self, timestamps: bool = False):
        super().__init__()
        self.timestamps = timestamps

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if self.timestamps:
            payload["timestamp"] = datetime.fromtimestamp(record.created, timezone.utc).isoformat()
        payload.update(_extract_extras(record))
        return json.dumps(payload, ensure_ascii=False, sort_keys=True, default=str)


def level_from_string(level: str) -> int:
    name = level.upper() if isinstance(level, str) else ""
    if name not in LOG_LEVELS:
        raise ConfigError("logging.level", f"must be one of {', '.join(LOG_LEVELS)}")
    return getattr(logging, name)


def _extract_extras(record: logging.LogRecord) -> dict[str, Any]:
    return {key: value for key, value in record.__dict__.items() if key not in _RESERVED}


def _build_file_formatter(cfg: LoggingConfig) -> logging.Formatter:
    if cfg.format == "jsonl":
        return JsonlFormatter(timestamps=cfg.timestamps)
    if cfg.timestamps:
        return logging.Formatter("%(asctime)s %(levelname)s %(message)s")
    return logging.Formatter("%(levelname)s %(message)s")
