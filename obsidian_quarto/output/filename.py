"""Builds dated, slugged .qmd filenames from note titles."""

from __future__ import annotations

import re
from datetime import date

QMD_EXTENSION = ".qmd"
FALLBACK_SLUG = "untitled"

_SEPARATOR_RE = re.compile(r"[\s_]+")
_UNSAFE_RE = re.compile(r"[^\w-]+", re.ASCII)
_DASH_RUN_RE = re.compile(r"--+")


def slugify(title: str) -> str:
    """Turn free text into a lowercase, hyphenated, filename-safe slug.

    Only ASCII word characters survive, so a title made entirely of symbols
    or non-Latin script yields an empty string.
    """
    slug = title.lower().strip()
    slug = _SEPARATOR_RE.sub("-", slug)
    slug = _UNSAFE_RE.sub("", slug)
    slug = _DASH_RUN_RE.sub("-", slug)
    return slug.strip("-")


def generate_filename(title: str, today: date | None = None) -> str:
    """Return `YYYYMMDD-<slug>.qmd`. Never fails, whatever the title."""
    day = today or date.today()
    return f"{day.strftime('%Y%m%d')}-{slugify(title) or FALLBACK_SLUG}{QMD_EXTENSION}"
