from pathlib import Path

from typer.testing import CliRunner

from ghpage_blog.cli import app

runner = CliRunner()


def _content(tmp_path: Path) -> Path:
    content = tmp_path / "content"
    content.mkdir()
    (content / "hello.md").write_text(
        "---\ntitle: Hello\ndate: 2024-01-05\ntags: [intro]\n---\nHi.\n", encoding="utf-8"
    )
    (content / "draft.md").write_text(
        "---\ntitle: Later\ndate: 2024-02-05\ndraft: true\n---\nSoon.\n", encoding="utf-8"
    )
    return content


def test_build_command_writes_site(tmp_path: Path):
    content = _content(tmp_path)
    output = tmp_path / "public"

    result = runner.invoke(
        app, ["build", "-i", str(content), "-o", str(output), "--no-progress"]
    )

    assert result.exit_code == 0, result.output
    assert "Built 1 posts" in result.output
    assert (output / "posts" / "hello" / "index.html").is_file()
    assert not (output / "posts" / "draft").exists()


def test_build_command_drafts_flag(tmp_path: Path):
    content = _content(tmp_path)
    output = tmp_path / "public"

    result = runner.invoke(
        app, ["build", "-i", str(content), "-o", str(output), "--drafts", "--no-progress"]
    )

    assert result.exit_code == 0, result.output
    assert (output / "posts" / "draft" / "index.html").is_file()


def test_build_command_reads_config_file(tmp_path: Path):
    content = _content(tmp_path)
    output = tmp_path / "public"
    config = tmp_path / "config.yaml"
    config.write_text("site:\n  title: Config Title\nlogging:\n  console: false\n", encoding="utf-8")

    result = runner.invoke(
        app,
        ["build", "-i", str(content), "-o", str(output), "-c", str(config), "--no-progress"],
    )

    assert result.exit_code == 0, result.output
    assert "Config Title" in (output / "index.html").read_text(encoding="utf-8")


def test_build_command_fails_on_invalid_document(tmp_path: Path):
    content = _content(tmp_path)
    (content / "bad.md").write_text("---\ndate: 2024-01-01\n---\n", encoding="utf-8")
    output = tmp_path / "public"

    result = runner.invoke(
        app, ["build", "-i", str(content), "-o", str(output), "--no-progress"]
    )

    assert result.exit_code == 1
    assert "Build failed" in result.output
    assert "title" in result.output
    assert not output.exists()


def test_build_command_rejects_bad_page_size(tmp_path: Path):
    content = _content(tmp_path)

    result = runner.invoke(
        app,
        ["build", "-i", str(content), "-o", str(tmp_path / "out"), "--page-size", "0"],
    )

    assert result.exit_code == 1
    assert "page_size" in result.output


def test_build_command_fails_on_undecodable_document(tmp_path: Path):
    content = _content(tmp_path)
    (content / "bad.md").write_bytes(b"---\ntitle: \xff\ndate: 2024-01-01\n---\n")
    output = tmp_path / "public"

    result = runner.invoke(
        app, ["build", "-i", str(content), "-o", str(output), "--no-progress"]
    )

    assert result.exit_code == 1
    assert "Build failed" in result.output
    assert "UTF-8" in result.output
    assert not output.exists()


def test_build_command_rejects_invalid_config_types(tmp_path: Path):
    content = _content(tmp_path)
    config = tmp_path / "config.yaml"
    config.write_text("site:\n  base_url: 5\n", encoding="utf-8")

    result = runner.invoke(
        app,
        ["build", "-i", str(content), "-o", str(tmp_path / "out"), "-c", str(config)],
    )

    assert result.exit_code == 1
    assert "site.base_url" in result.output
