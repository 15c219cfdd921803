from enum import Enum

from pydantic import BaseModel, ConfigDict


class SplitDocument(BaseModel):
    """A note separated into its verbatim frontmatter block and body."""

    model_config = ConfigDict(frozen=True)

    frontmatter: str = ""
    body: str = ""

    @property
    def has_frontmatter(self) -> bool:
        return bool(self.frontmatter)


class WarningCategory(str, Enum):
    """Constructs that are detected but never rewritten, in detection order."""

    INTERNAL_LINKS = "internal_links"
    DATAVIEW = "dataview"


class ConversionWarning(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: WarningCategory
    message: str

    def __str__(self) -> str:
        return self.message
