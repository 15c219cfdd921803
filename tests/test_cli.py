"""Tests for the obsidian-quarto CLI commands."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from typer.testing import CliRunner

from obsidian_quarto.cli import app
from obsidian_quarto.config.loader import CONFIG_FILENAME

runner = CliRunner()


@pytest.fixture
def workdir(isolated_cwd):
    (isolated_cwd / "Weekly Review.md").write_text(
        "---\ntitle: Weekly Review\n---\n> [!tip] Focus\n> One thing at a time.\n",
        encoding="utf-8",
    )
    (isolated_cwd / "Linked.md").write_text("See [[Other]].\n", encoding="utf-8")
    return isolated_cwd


def _write_config(root: Path, text: str) -> None:
    (root / CONFIG_FILENAME).write_text(text)


# ── convert ──────────────────────────────────────────────────────────


def test_convert_writes_dated_file(workdir):
    result = runner.invoke(
        app, ["convert", "Weekly Review.md", "--output-dir", "out", "--date", "2024-03-05"]
    )
    assert result.exit_code == 0, result.output
    dest = workdir / "out" / "20240305-weekly-review.qmd"
    assert dest.is_file()
    assert dest.read_text(encoding="utf-8") == (
        "---\ntitle: Weekly Review\n---\n\n"
        "\n::: {.callout-tip}\n## Focus\nOne thing at a time.\n:::\n\n"
    )
    assert "Successfully exported" in result.output


def test_convert_explicit_output(workdir):
    result = runner.invoke(app, ["convert", "Weekly Review.md", "-o", "final.qmd"])
    assert result.exit_code == 0, result.output
    assert (workdir / "final.qmd").is_file()


def test_convert_uses_config_directory(workdir):
    _write_config(workdir, "output:\n  directory: from-config\n")
    result = runner.invoke(app, ["convert", "Weekly Review.md", "--date", "2024-03-05"])
    assert result.exit_code == 0, result.output
    assert (workdir / "from-config" / "20240305-weekly-review.qmd").is_file()


def test_convert_refuses_overwrite_then_force(workdir):
    args = ["convert", "Weekly Review.md", "-o", "final.qmd"]
    (workdir / "final.qmd").write_text("old")

    refused = runner.invoke(app, args)
    assert refused.exit_code == 1
    assert (workdir / "final.qmd").read_text() == "old"

    forced = runner.invoke(app, args + ["--force"])
    assert forced.exit_code == 0, forced.output
    assert (workdir / "final.qmd").read_text() != "old"


def test_convert_missing_note(workdir):
    result = runner.invoke(app, ["convert", "missing.md"])
    assert result.exit_code == 1
    assert "No active file selected" in result.output


def test_convert_rejects_non_markdown(workdir):
    (workdir / "data.txt").write_text("x")
    result = runner.invoke(app, ["convert", "data.txt"])
    assert result.exit_code == 1
    assert "Markdown" in result.output


def test_convert_reports_warnings(workdir):
    result = runner.invoke(app, ["convert", "Linked.md", "-o", "l.qmd"])
    assert result.exit_code == 0, result.output
    assert "Conversion complete with warnings" in result.output


def test_convert_fails_on_warnings_when_configured(workdir):
    _write_config(workdir, "output:\n  on_warnings: fail\n")
    result = runner.invoke(app, ["convert", "Linked.md", "-o", "l.qmd"])
    assert result.exit_code == 2
    # The file is still written
    assert (workdir / "l.qmd").is_file()


def test_convert_ignores_warnings_when_configured(workdir):
    _write_config(workdir, "output:\n  on_warnings: ignore\n")
    result = runner.invoke(app, ["convert", "Linked.md", "-o", "l.qmd"])
    assert result.exit_code == 0
    assert "warnings" not in result.output


def test_convert_stdout(workdir):
    result = runner.invoke(app, ["convert", "Weekly Review.md", "--stdout"])
    assert result.exit_code == 0, result.output
    assert "::: {.callout-tip}" in result.output
    assert not list(workdir.glob("*.qmd"))


def test_convert_prompt_accepts_default(workdir):
    result = runner.invoke(
        app, ["convert", "Weekly Review.md", "--prompt"], input="\n"
    )
    # typer.prompt returns the default on empty input, so the default path is used
    assert result.exit_code == 0, result.output
    assert len(list(workdir.glob("*.qmd"))) == 1


def test_invalid_config_exits(workdir):
    _write_config(workdir, "log_level: chatty\n")
    result = runner.invoke(app, ["filename", "x"])
    assert result.exit_code == 1
    assert "Invalid config" in result.output


# ── check ────────────────────────────────────────────────────────────


def test_check_clean_note(workdir):
    result = runner.invoke(app, ["check", "Weekly Review.md"])
    assert result.exit_code == 0
    assert "No compatibility issues found" in result.output


def test_check_lists_categories(workdir):
    (workdir / "dv.md").write_text("[[a]]\n\n```dataview\nLIST\n```\n")
    result = runner.invoke(app, ["check", "dv.md"])
    assert result.exit_code == 0
    assert "internal_links" in result.output
    assert "dataview" in result.output


def test_check_ignores_frontmatter(workdir):
    (workdir / "fm.md").write_text('---\nup: "[[Parent]]"\n---\nBody\n')
    result = runner.invoke(app, ["check", "fm.md"])
    assert "No compatibility issues found" in result.output


def test_check_missing_file(workdir):
    result = runner.invoke(app, ["check", "nope.md"])
    assert result.exit_code == 1


# ── filename ─────────────────────────────────────────────────────────


def test_filename_command(workdir):
    result = runner.invoke(app, ["filename", "  Hello, World!! ", "--date", "2024-03-05"])
    assert result.exit_code == 0
    assert result.output.strip() == "20240305-hello-world.qmd"


def test_filename_rejects_bad_date(workdir):
    result = runner.invoke(app, ["filename", "x", "--date", "05/03/2024"])
    assert result.exit_code != 0


# ── config ───────────────────────────────────────────────────────────


def test_config_init_and_show(workdir):
    result = runner.invoke(app, ["config", "init"])
    assert result.exit_code == 0
    assert (workdir / CONFIG_FILENAME).is_file()

    again = runner.invoke(app, ["config", "init"])
    assert again.exit_code == 1

    shown = runner.invoke(app, ["config", "show"])
    assert shown.exit_code == 0
    assert "on_warnings" in shown.output


def test_config_show_reflects_file(workdir):
    _write_config(workdir, yaml.safe_dump({"output": {"directory": "qmd-out"}}))
    result = runner.invoke(app, ["config", "show"])
    assert "qmd-out" in result.output
