"""Export workflow — reads the active note, converts it, saves it, reports back."""

from __future__ import annotations

import logging
from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict

from obsidian_quarto.converter import ConversionPipeline, convert
from obsidian_quarto.interfaces import DocumentSource, Notifier, SaveTarget
from obsidian_quarto.models import ConversionWarning
from obsidian_quarto.output.filename import generate_filename

logger = logging.getLogger(__name__)

MARKDOWN_EXTENSION = "md"


class ExportStatus(str, Enum):
    EXPORTED = "exported"
    NO_DOCUMENT = "no_document"
    UNSUPPORTED_FILE = "unsupported_file"
    CANCELED = "canceled"
    FAILED = "failed"


class ExportOutcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: ExportStatus
    path: str | None = None
    filename: str | None = None
    warnings: tuple[ConversionWarning, ...] = ()
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == ExportStatus.EXPORTED


def export_active_document(
    source: DocumentSource,
    target: SaveTarget,
    notifier: Notifier,
    *,
    today: date | None = None,
    pipeline: ConversionPipeline | None = None,
) -> ExportOutcome:
    """Convert the active note to .qmd and hand it to the save target.

    Every failure is reported through the notifier and returned as a status;
    only the host's I/O can fail, the conversion itself cannot.
    """
    doc = source.read_active_document()
    if doc is None:
        notifier.notify("No active file selected.", level="error")
        return ExportOutcome(status=ExportStatus.NO_DOCUMENT)

    if doc.extension.lower() != MARKDOWN_EXTENSION:
        notifier.notify("Please select a Markdown (.md) file.", level="error")
        return ExportOutcome(status=ExportStatus.UNSUPPORTED_FILE)

    result = pipeline.convert(doc.content) if pipeline else convert(doc.content)
    filename = generate_filename(doc.title, today)

    save_path = target.choose_save_path(filename)
    if not save_path:
        notifier.notify("Export canceled.")
        return ExportOutcome(
            status=ExportStatus.CANCELED, filename=filename, warnings=result.warnings
        )

    try:
        target.write(save_path, result.final_document)
    except OSError as exc:
        logger.error("Quarto export failed for %s", save_path, exc_info=True)
        notifier.notify("Failed to save file. Check the log for details.", level="error")
        return ExportOutcome(
            status=ExportStatus.FAILED,
            path=save_path,
            filename=filename,
            warnings=result.warnings,
            error=str(exc),
        )

    logger.info("exported %s -> %s", doc.path or doc.title, save_path)
    notifier.notify(f"Successfully exported to {save_path}")
    if result.warnings:
        notifier.notify(
            "Conversion complete with warnings:\n- " + "\n- ".join(result.messages),
            level="warning",
        )

    return ExportOutcome(
        status=ExportStatus.EXPORTED,
        path=save_path,
        filename=filename,
        warnings=result.warnings,
    )
