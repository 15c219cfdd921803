"""Pydantic models for the conversion pipeline."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from obsidian_quarto.models import ConversionWarning


class ConversionResult(BaseModel):
    """Result of converting one note to Quarto markdown."""

    model_config = ConfigDict(frozen=True)

    final_document: str
    warnings: tuple[ConversionWarning, ...] = ()

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    @property
    def messages(self) -> list[str]:
        return [w.message for w in self.warnings]
