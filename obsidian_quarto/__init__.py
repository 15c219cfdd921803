"""Convert Obsidian-flavored markdown notes to Quarto (.qmd) documents."""

from obsidian_quarto.converter import ConversionPipeline, ConversionResult, convert
from obsidian_quarto.models import ConversionWarning, SplitDocument, WarningCategory
from obsidian_quarto.output.filename import generate_filename

__all__ = [
    "ConversionPipeline",
    "ConversionResult",
    "ConversionWarning",
    "SplitDocument",
    "WarningCategory",
    "convert",
    "generate_filename",
]
