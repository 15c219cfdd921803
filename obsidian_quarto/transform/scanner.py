"""Detects Obsidian constructs that have no Quarto equivalent."""

import logging
import re

from obsidian_quarto.models import ConversionWarning, WarningCategory

logger = logging.getLogger(__name__)

# One pattern per category, checked once each. Order here is the order of
# warnings in the result.
_CHECKS: list[tuple[WarningCategory, re.Pattern, str]] = [
    (
        WarningCategory.INTERNAL_LINKS,
        # [[...]] and ![[...]] on a single line
        re.compile(r"!?\[\[.*?\]\]"),
        "Internal links [[...]] and embeds ![[...]] were not converted "
        "and must be updated manually.",
    ),
    (
        WarningCategory.DATAVIEW,
        # Fence opener whose info string is dataview or dataviewjs, also inside quotes
        re.compile(r"^[ \t]*(?:>[ \t]?)*[ \t]*(?:`{3,}|~{3,})[ \t]*dataview", re.MULTILINE),
        "Dataview blocks were not converted and will not run in Quarto.",
    ),
]


def scan(body: str) -> list[ConversionWarning]:
    """Return one warning per detected category, never one per occurrence."""
    warnings: list[ConversionWarning] = []
    for category, pattern, message in _CHECKS:
        if pattern.search(body):
            logger.debug("found %s constructs", category.value)
            warnings.append(ConversionWarning(category=category, message=message))
    return warnings


class CompatibilityScanner:
    def scan(self, body: str) -> list[ConversionWarning]:
        return scan(body)
