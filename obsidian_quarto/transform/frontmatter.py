"""Splits a note into its YAML frontmatter block and body, byte-for-byte."""

import re

from obsidian_quarto.models import SplitDocument

# Opening `---` line at offset 0, any lines, closing `---` line plus its terminator
_FRONTMATTER_RE = re.compile(r"\A---\r?\n(?:.*?\r?\n)?---\r?\n", re.DOTALL)


def split_frontmatter(document: str) -> SplitDocument:
    """Separate leading frontmatter from the body.

    The frontmatter span includes both delimiter lines and the trailing line
    break. Anything that does not match (no opening line at offset 0, or no
    closing line) is returned untouched as body.
    """
    match = _FRONTMATTER_RE.match(document)
    if not match:
        return SplitDocument(frontmatter="", body=document)
    return SplitDocument(frontmatter=match.group(0), body=document[match.end():])


class FrontmatterSplitter:
    def split(self, document: str) -> SplitDocument:
        return split_frontmatter(document)
