"""Output subsystem — names and writes .qmd files."""

from obsidian_quarto.output.filename import generate_filename, slugify
from obsidian_quarto.output.writer import MarkdownFileSource, QmdFileTarget

__all__ = [
    "MarkdownFileSource",
    "QmdFileTarget",
    "generate_filename",
    "slugify",
]
