"""
Main pipeline orchestration for the site build.

This module coordinates the entire workflow:
1. Load and validate documents
2. Assemble the ordered corpus
3. Build the tag index
4. Render listings, tag listings, search payload and feeds in memory
5. Write the artifacts

Any fatal error in steps 1-4 propagates before anything is written.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from rich.console import Console
from rich.progress import BarColumn, Progress, SpinnerColumn, TaskProgressColumn, TextColumn

from .config import AppConfig
from .core.corpus import assemble_corpus
from .core.errors import BuildError
from .core.tags import build_tag_index
from .core.types import Document, Project
from .input.loader import iter_document_paths, load_documents
from .input.projects import load_projects
from .logging_utils import log_build_error, log_event, setup_logging
from .output.writer import build_artifacts, write_artifacts


@dataclass
class BuildResult:
    """Summary of a finished build.

    Attributes:
        output_dir: Directory the artifacts were written to
        loaded: Number of documents loaded, drafts included
        published: Number of documents in the corpus
        tags: Number of tags in the tag index
        artifacts: Paths of the written files
    """

    output_dir: Path
    loaded: int
    published: int
    tags: int
    artifacts: list[Path]


def run_build(
    content_dir: Path,
    output_dir: Path,
    cfg: AppConfig,
    show_progress: bool = True,
    console: Console | None = None,
) -> BuildResult:
    """Run the complete build from content directory to output artifacts.

    Args:
        content_dir: Directory holding the Markdown documents
        output_dir: Directory for the generated site
        cfg: Application configuration
        show_progress: Whether to display a progress bar while loading
        console: Rich console for output (creates default if None)

    Returns:
        BuildResult describing what was written

    Raises:
        BuildError: On any invalid document, duplicate slug or bad config
    """
    logger = setup_logging(cfg.logging, output_dir.parent)
    log_event(
        logger,
        "Build start",
        event="build_start",
        content=str(content_dir),
        output=str(output_dir),
        include_drafts=cfg.build.include_drafts,
    )

    try:
        documents = _load(content_dir, show_progress, console or Console())
        corpus = assemble_corpus(documents, include_drafts=cfg.build.include_drafts)
        log_event(
            logger,
            f"Assembled corpus: {len(corpus)} of {len(documents)} documents",
            event="corpus_assembled",
            loaded=len(documents),
            published=len(corpus),
        )

        tag_index = build_tag_index(corpus)
        projects = _load_projects(cfg)
        artifacts = build_artifacts(corpus, tag_index, cfg, projects)
    except BuildError as exc:
        log_build_error(logger, exc)
        raise

    written = write_artifacts(artifacts, output_dir)
    log_event(
        logger,
        f"Wrote {len(written)} files to {output_dir}",
        event="build_done",
        artifacts=len(written),
        tags=len(tag_index),
    )
    return BuildResult(
        output_dir=output_dir,
        loaded=len(documents),
        published=len(corpus),
        tags=len(tag_index),
        artifacts=written,
    )


def _load(content_dir: Path, show_progress: bool, console: Console) -> list[Document]:
    if not show_progress:
        return load_documents(content_dir)

    total = sum(1 for _ in iter_document_paths(content_dir))
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        console=console,
        transient=True,
    ) as progress:
        task_id = progress.add_task("Loading documents", total=total)
        return load_documents(content_dir, on_loaded=lambda _doc: progress.advance(task_id))


def _load_projects(cfg: AppConfig) -> Sequence[Project] | None:
    if not cfg.output.projects_file:
        return None
    return load_projects(Path(cfg.output.projects_file))
