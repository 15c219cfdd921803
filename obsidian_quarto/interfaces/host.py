"""Host capabilities the export workflow needs: read, choose a path, write, notify."""

from __future__ import annotations

from typing import Literal, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict

NoticeLevel = Literal["info", "warning", "error"]


class ActiveDocument(BaseModel):
    """The note the user wants to export."""

    model_config = ConfigDict(frozen=True)

    title: str
    content: str
    extension: str = "md"
    path: str | None = None


@runtime_checkable
class DocumentSource(Protocol):
    """Supplies the active note, or None when nothing is open."""

    def read_active_document(self) -> ActiveDocument | None: ...


@runtime_checkable
class SaveTarget(Protocol):
    """Chooses where the converted note goes and persists it."""

    def choose_save_path(self, suggested_filename: str) -> str | None: ...

    def write(self, path: str, content: str) -> None: ...


@runtime_checkable
class Notifier(Protocol):
    def notify(self, message: str, *, level: NoticeLevel = "info") -> None: ...
