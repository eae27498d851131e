"""Tests for project card loading."""

from pathlib import Path

import pytest

from ghpage_blog.core.errors import DocumentParseError
from ghpage_blog.input.projects import load_projects


def test_load_projects_keeps_file_order(tmp_path: Path):
    path = tmp_path / "projects.yaml"
    path.write_text(
        "- title: ReImage\n"
        "  description: >\n"
        "    A fast RF IQ waveform\n"
        "    viewer.\n"
        "  href: https://github.com/example/reimage\n"
        "- title: ipp_ext\n"
        "  description: C++ templates.\n"
        "  imgSrc: /static/images/ipp.png\n",
        encoding="utf-8",
    )

    projects = load_projects(path)

    assert [project.title for project in projects] == ["ReImage", "ipp_ext"]
    assert projects[0].description == "A fast RF IQ waveform viewer."
    assert projects[0].to_dict() == {
        "title": "ReImage",
        "description": "A fast RF IQ waveform viewer.",
        "href": "https://github.com/example/reimage",
        "imgSrc": None,
    }
    assert projects[1].img_src == "/static/images/ipp.png"


def test_load_projects_requires_description(tmp_path: Path):
    path = tmp_path / "projects.yaml"
    path.write_text("- title: Lonely\n", encoding="utf-8")

    with pytest.raises(DocumentParseError) as excinfo:
        load_projects(path)
    assert excinfo.value.field == "projects[0].description"


def test_load_projects_requires_list(tmp_path: Path):
    path = tmp_path / "projects.yaml"
    path.write_text("title: Not a list\n", encoding="utf-8")

    with pytest.raises(DocumentParseError):
        load_projects(path)


def test_load_projects_reports_missing_file(tmp_path: Path):
    with pytest.raises(DocumentParseError) as excinfo:
        load_projects(tmp_path / "missing.yaml")
    assert excinfo.value.field == "file"
    assert excinfo.value.source.endswith("missing.yaml")


def test_load_projects_reports_invalid_utf8(tmp_path: Path):
    path = tmp_path / "projects.yaml"
    path.write_bytes(b"- title: \xff\n  description: x\n")

    with pytest.raises(DocumentParseError) as excinfo:
        load_projects(path)
    assert excinfo.value.field == "encoding"
