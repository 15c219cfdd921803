"""Conversion subsystem — turns an Obsidian note into a .qmd document."""

from obsidian_quarto.converter.converter import ConversionPipeline, convert
from obsidian_quarto.converter.models import ConversionResult

__all__ = [
    "ConversionPipeline",
    "ConversionResult",
    "convert",
]
