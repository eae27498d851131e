"""
Static project cards loaded from a YAML list.

Expected format:
    - title: ReImage
      description: A fast RF IQ waveform viewer.
      href: https://github.com/example/reimage
      imgSrc: /static/images/reimage.png
"""

from __future__ import annotations

from pathlib import Path

import yaml

from ..core.errors import DocumentParseError
from ..core.types import Project
from .loader import read_source


def load_projects(path: Path) -> list[Project]:
    """Load project cards, keeping the order of the file.

    Raises:
        DocumentParseError: If the file cannot be read or is not a list of
            cards with a title and description
    """
    try:
        raw = yaml.safe_load(read_source(path)) or []
    except yaml.YAMLError as exc:
        raise DocumentParseError(path, "projects", f"not valid YAML ({exc})") from exc

    if not isinstance(raw, list):
        raise DocumentParseError(path, "projects", "must be a list")

    projects: list[Project] = []
    for idx, item in enumerate(raw):
        if not isinstance(item, dict):
            raise DocumentParseError(path, f"projects[{idx}]", "must be a mapping")
        for key in ("title", "description"):
            if not isinstance(item.get(key), str) or not item[key].strip():
                raise DocumentParseError(path, f"projects[{idx}].{key}", "missing")
        projects.append(
            Project(
                title=item["title"].strip(),
                description=" ".join(item["description"].split()),
                href=item.get("href"),
                img_src=item.get("imgSrc"),
            )
        )
    return projects
