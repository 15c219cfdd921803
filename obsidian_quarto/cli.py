"""CLI entry point for obsidian-quarto."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from obsidian_quarto.config import QuartoConfig, load_config
from obsidian_quarto.config.loader import CONFIG_FILENAME, DEFAULT_CONFIG_TEMPLATE
from obsidian_quarto.converter import convert
from obsidian_quarto.export import export_active_document
from obsidian_quarto.interfaces import NoticeLevel
from obsidian_quarto.output import MarkdownFileSource, QmdFileTarget, generate_filename
from obsidian_quarto.transform import scan, split_frontmatter

app = typer.Typer(
    name="obsidian-quarto",
    help="Convert Obsidian notes to Quarto (.qmd) documents.",
)

config_app = typer.Typer(help="Manage obsidian-quarto configuration.")
app.add_typer(config_app, name="config")

console = Console()
err_console = Console(stderr=True)

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}

# Global state
_config: QuartoConfig | None = None


def _get_config() -> QuartoConfig:
    if _config is None:
        return load_config()
    return _config


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help=f"Path to {CONFIG_FILENAME}")
    ] = None,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except ValueError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    logging.basicConfig(
        level=_LOG_LEVELS[_config.log_level],
        format="%(levelname)s %(name)s: %(message)s",
    )


class RichNotifier:
    """Prints export notices to the terminal."""

    _STYLES = {"info": "green", "warning": "yellow", "error": "red"}

    def __init__(self, out: Console, show_warnings: bool = True) -> None:
        self.out = out
        self.show_warnings = show_warnings

    def notify(self, message: str, *, level: NoticeLevel = "info") -> None:
        if level == "warning" and not self.show_warnings:
            return
        style = self._STYLES.get(level, "white")
        self.out.print(f"[{style}]{escape(message)}[/{style}]", highlight=False)


def _read_note(note: Path) -> str:
    if not note.is_file():
        err_console.print(f"[red]Error:[/red] file not found: {note}")
        raise typer.Exit(1)
    return note.read_text(encoding="utf-8")


@app.command(name="convert")
def convert_cmd(
    note: Annotated[Path, typer.Argument(help="Markdown note to convert")],
    output: Annotated[
        str | None, typer.Option("--output", "-o", help="Exact path for the .qmd file")
    ] = None,
    output_dir: Annotated[
        str | None, typer.Option("--output-dir", "-d", help="Directory for the .qmd file")
    ] = None,
    stdout: Annotated[
        bool, typer.Option("--stdout", help="Print the converted document instead of saving")
    ] = False,
    day: Annotated[
        datetime | None,
        typer.Option("--date", formats=["%Y-%m-%d"], help="Date used in the filename"),
    ] = None,
    prompt: Annotated[
        bool, typer.Option("--prompt", help="Confirm or edit the save path interactively")
    ] = False,
    force: Annotated[
        bool, typer.Option("--force", "-f", help="Overwrite an existing .qmd file")
    ] = False,
) -> None:
    """Convert a note to Quarto markdown and save it as YYYYMMDD-<title>.qmd."""
    cfg = _get_config()
    show_warnings = cfg.output.on_warnings != "ignore"

    if stdout:
        result = convert(_read_note(note))
        typer.echo(result.final_document, nl=False)
        if show_warnings:
            for message in result.messages:
                err_console.print(f"[yellow]warning:[/yellow] {escape(message)}", highlight=False)
        _exit_on_warnings(cfg, bool(result.warnings))
        return

    updates: dict = {}
    if output_dir:
        updates["directory"] = output_dir
    if force:
        updates["overwrite"] = True
    out_cfg = cfg.output.model_copy(update=updates)

    target = QmdFileTarget(
        out_cfg,
        explicit_path=output,
        prompt=(lambda default: typer.prompt("Save as", default=default)) if prompt else None,
    )
    outcome = export_active_document(
        MarkdownFileSource(note),
        target,
        RichNotifier(console, show_warnings=show_warnings),
        today=day.date() if day else None,
    )

    if not outcome.ok:
        raise typer.Exit(1)
    _exit_on_warnings(cfg, bool(outcome.warnings))


def _exit_on_warnings(cfg: QuartoConfig, has_warnings: bool) -> None:
    if has_warnings and cfg.output.on_warnings == "fail":
        raise typer.Exit(2)


@app.command()
def check(
    note: Annotated[Path, typer.Argument(help="Markdown note to inspect")],
) -> None:
    """List constructs that will not survive conversion."""
    warnings = scan(split_frontmatter(_read_note(note)).body)
    if not warnings:
        console.print("[green]No compatibility issues found.[/green]")
        return

    table = Table(title=f"Compatibility warnings ({len(warnings)})")
    table.add_column("Category", style="cyan")
    table.add_column("Message")
    for w in warnings:
        table.add_row(w.category.value, escape(w.message))
    console.print(table)


@app.command()
def filename(
    title: Annotated[str, typer.Argument(help="Note title")],
    day: Annotated[
        datetime | None,
        typer.Option("--date", formats=["%Y-%m-%d"], help="Date used in the filename"),
    ] = None,
) -> None:
    """Print the .qmd filename a title would get."""
    typer.echo(generate_filename(title, day.date() if day else None))


# ---------------------------------------------------------------------------
# Config commands
# ---------------------------------------------------------------------------


@config_app.command("init")
def config_init(
    path: Annotated[str, typer.Option("--path", help="Where to write the config")] = CONFIG_FILENAME,
) -> None:
    """Write a default config file."""
    dest = Path(path)
    if dest.exists():
        err_console.print(f"[red]Error:[/red] {dest} already exists")
        raise typer.Exit(1)
    dest.write_text(DEFAULT_CONFIG_TEMPLATE)
    console.print(f"[green]Created[/green] {dest}")


@config_app.command("show")
def config_show() -> None:
    """Print the effective configuration."""
    cfg = _get_config()
    dumped = yaml.safe_dump(cfg.model_dump(), default_flow_style=False, sort_keys=False)
    console.print(Syntax(dumped, "yaml"))
