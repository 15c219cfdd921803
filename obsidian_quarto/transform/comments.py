"""Strips Obsidian %%comments%% from note bodies."""

import re

from .pipeline import Transform

# Non-greedy so adjacent comments stay separate; DOTALL for multi-line comments
_COMMENT_RE = re.compile(r"%%.*?%%", re.DOTALL)


class CommentStripper(Transform):
    def apply(self, content: str) -> str:
        return _COMMENT_RE.sub("", content)
