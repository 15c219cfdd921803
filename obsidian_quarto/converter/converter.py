"""Obsidian-to-Quarto conversion: split, scan, rewrite, reassemble."""

from __future__ import annotations

import logging

from obsidian_quarto.converter.models import ConversionResult
from obsidian_quarto.transform import (
    CompatibilityScanner,
    FrontmatterSplitter,
    TransformPipeline,
    default_rewriter,
)

logger = logging.getLogger(__name__)


class ConversionPipeline:
    """Converts a whole note. Stateless, so one instance can be shared."""

    def __init__(
        self,
        splitter: FrontmatterSplitter | None = None,
        scanner: CompatibilityScanner | None = None,
        rewriter: TransformPipeline | None = None,
    ) -> None:
        self.splitter = splitter or FrontmatterSplitter()
        self.scanner = scanner or CompatibilityScanner()
        self.rewriter = rewriter or default_rewriter()

    def convert(self, document: str) -> ConversionResult:
        split = self.splitter.split(document)

        # Scan before rewriting so warnings reflect what the author wrote
        warnings = self.scanner.scan(split.body)
        body = self.rewriter.apply(split.body)

        if split.has_frontmatter:
            final = f"{split.frontmatter}\n{body}"
        else:
            final = body

        logger.debug(
            "converted %d chars (frontmatter=%s, warnings=%d)",
            len(document),
            split.has_frontmatter,
            len(warnings),
        )
        return ConversionResult(final_document=final, warnings=tuple(warnings))


_default_pipeline = ConversionPipeline()


def convert(document: str) -> ConversionResult:
    """Convert a note with the default transforms."""
    return _default_pipeline.convert(document)
