"""Transforms for converting Obsidian-flavored markdown to Quarto markdown."""

from .pipeline import Transform, TransformPipeline
from .comments import CommentStripper
from .callouts import CalloutConverter
from .frontmatter import FrontmatterSplitter, split_frontmatter
from .scanner import CompatibilityScanner, scan


def default_rewriter() -> TransformPipeline:
    """Comment stripping must run first: callout matching is line-anchored."""
    return TransformPipeline([
        CommentStripper(),
        CalloutConverter(),
    ])


def rewrite(body: str) -> str:
    return default_rewriter().apply(body)


__all__ = [
    "Transform",
    "TransformPipeline",
    "CommentStripper",
    "CalloutConverter",
    "CompatibilityScanner",
    "FrontmatterSplitter",
    "default_rewriter",
    "rewrite",
    "scan",
    "split_frontmatter",
]
