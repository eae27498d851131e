"""
ghpage-blog - static blog builder.

This package turns a directory of Markdown documents with YAML front matter
into a browsable site: chronological and per-tag listings, a search payload
and RSS feeds.

Main entry point is the CLI via `ghpage-blog build` command.

Example:
    $ ghpage-blog build -i data/blog -o public/
"""

__all__ = ["__version__", "load_documents", "assemble_corpus", "build_tag_index", "slugify"]
__version__ = "0.1.0"

from .core.corpus import assemble_corpus
from .core.tags import build_tag_index
from .input.loader import load_documents, slugify
