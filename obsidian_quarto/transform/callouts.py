"""Converts Obsidian callouts (> [!type] title) to Quarto callout divs."""

import re

from .pipeline import Transform

# Header line: > [!type]<fold?> title
_HEADER = r"^>[ \t]*\[!([^\]\n]+)\]([+-]?)([^\n]*)(?:\n|\Z)"
# Continuation lines: any quoted line that does not open a new callout
_CONTINUATION = r"(?:^>(?![ \t]*\[![^\]\n]+\])[^\n]*(?:\n|\Z))*"

_CALLOUT_RE = re.compile(_HEADER + "(" + _CONTINUATION + ")", re.MULTILINE)

# Quote marker plus at most one following space
_QUOTE_PREFIX_RE = re.compile(r"^>[ \t]?")

_FOLD_COLLAPSE = {"-": "true", "+": "false"}


class CalloutConverter(Transform):
    def apply(self, content: str) -> str:
        last_end = -1

        def _replace(m: re.Match) -> str:
            nonlocal last_end
            # The previous callout already ends with a blank line
            block = _convert_match(m, after_callout=m.start() == last_end)
            if block != m.group(0):
                last_end = m.end()
            return block

        return _CALLOUT_RE.sub(_replace, content)


def _convert_match(m: re.Match, after_callout: bool = False) -> str:
    callout_type = m.group(1).strip().lower()
    if not callout_type:
        return m.group(0)

    attrs = f".callout-{callout_type}"
    fold = m.group(2)
    if fold:
        attrs += f' collapse="{_FOLD_COLLAPSE[fold]}"'

    lines: list[str] = []
    if not after_callout and not _follows_blank_line(m.string, m.start()):
        lines.append("")
    lines.append(f"::: {{{attrs}}}")

    title = m.group(3).strip()
    if title:
        lines.append(f"## {title}")

    lines.extend(_unquote(m.group(4)))
    lines.append(":::")

    block = "\n".join(lines) + "\n"
    if not _precedes_blank_line(m.string, m.end()):
        block += "\n"
    return block


def _unquote(body: str) -> list[str]:
    if not body:
        return []
    lines = body.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [_QUOTE_PREFIX_RE.sub("", line, count=1) for line in lines]


def _follows_blank_line(text: str, pos: int) -> bool:
    return text[max(pos - 2, 0):pos] in ("\n", "\n\n")


def _precedes_blank_line(text: str, pos: int) -> bool:
    return pos < len(text) and text[pos] in "\r\n"
