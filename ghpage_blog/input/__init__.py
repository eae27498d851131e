"""
Input loading.

Reads authored Markdown documents and the static project card list.
"""

from .loader import load_document, load_documents, slug_for_path, slugify
from .projects import load_projects

__all__ = ["load_document", "load_documents", "slug_for_path", "slugify", "load_projects"]
