"""
Command-line interface for the site build.

Uses Typer to provide a CLI with options for the main configuration
settings. Options given on the command line override the YAML config.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from .config import load_config, validate_config
from .core.errors import BuildError
from .runner import run_build

app = typer.Typer(add_completion=False)
console = Console()


@app.callback()
def main() -> None:
    """Build a static blog from Markdown documents."""


@app.command()
def build(
    content: Path = typer.Option(
        ..., "--content", "-i", exists=True, file_okay=False, readable=True
    ),
    output: Path = typer.Option(Path("public"), "--output", "-o"),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True, dir_okay=False),
    drafts: bool | None = typer.Option(
        None, "--drafts/--no-drafts", help="Include documents marked as drafts."
    ),
    page_size: int | None = typer.Option(None, "--page-size", help="Posts per listing page."),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
    progress: bool = typer.Option(True, "--progress/--no-progress"),
):
    """Build the site.

    Loads every document under CONTENT, validates its front matter and
    writes listings, tag pages, the search payload and feeds to OUTPUT.

    Args:
        content: Directory of Markdown documents
        output: Directory for the generated site
        config: Optional path to YAML config file
        drafts: Preview mode override
        page_size: Listing page size override
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        progress: Whether to show a progress bar
    """
    try:
        cfg = load_config(str(config) if config else None)

        if drafts is not None:
            cfg.build.include_drafts = drafts
        if page_size is not None:
            cfg.build.page_size = page_size
        if log_level:
            cfg.logging.level = log_level
        validate_config(cfg)

        result = run_build(content, output, cfg, show_progress=progress, console=console)
    except BuildError as exc:
        console.print(f"[bold red]Build failed:[/bold red] {escape(str(exc))}", highlight=False)
        raise typer.Exit(code=1) from exc

    console.print(
        f"Built {result.published} posts ({result.tags} tags) into {result.output_dir}"
    )


if __name__ == "__main__":
    app()
