"""Host integration interfaces, so the converter can run without any editor."""

from obsidian_quarto.interfaces.host import (
    ActiveDocument,
    DocumentSource,
    NoticeLevel,
    Notifier,
    SaveTarget,
)

__all__ = [
    "ActiveDocument",
    "DocumentSource",
    "NoticeLevel",
    "Notifier",
    "SaveTarget",
]
