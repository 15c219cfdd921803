"""Filesystem host — reads notes from disk and writes .qmd files."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from obsidian_quarto.config.models import OutputConfig
from obsidian_quarto.interfaces import ActiveDocument

logger = logging.getLogger(__name__)


class MarkdownFileSource:
    """Treats a single file on disk as the active document."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def read_active_document(self) -> ActiveDocument | None:
        if not self.path.is_file():
            logger.warning("File not found: %s", self.path)
            return None

        return ActiveDocument(
            title=self.path.stem,
            content=self.path.read_text(encoding="utf-8"),
            extension=self.path.suffix.lstrip("."),
            path=str(self.path),
        )


class QmdFileTarget:
    """Writes converted notes into the configured output directory.

    An explicit path wins over the suggested filename. When a prompt callable
    is given it is asked to confirm or edit the path; an empty answer cancels.
    """

    def __init__(
        self,
        config: OutputConfig,
        explicit_path: str | None = None,
        prompt: Callable[[str], str] | None = None,
    ) -> None:
        self.config = config
        self.explicit_path = explicit_path
        self.prompt = prompt

    def choose_save_path(self, suggested_filename: str) -> str | None:
        if self.explicit_path:
            dest = Path(self.explicit_path)
        else:
            dest = Path(self.config.directory) / suggested_filename

        if self.prompt is not None:
            answer = self.prompt(str(dest)).strip()
            if not answer:
                return None
            dest = Path(answer)

        if dest.exists() and not self.config.overwrite:
            logger.warning("refusing to overwrite existing file %s", dest)
            return None

        return str(dest)

    def write(self, path: str, content: str) -> None:
        dest = Path(path)
        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_text(content, encoding="utf-8")
        logger.info("wrote %s (%d bytes)", dest, len(content.encode("utf-8")))
