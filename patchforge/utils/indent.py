# patchforge/utils/indent.py
import re
from typing import Iterable, List

from ..models.indent import IndentStyle
from .text import split_lines

_LEADING_WS_RE = re.compile(r"^[\t ]*")

DEFAULT_INDENT_STYLE = IndentStyle(char=" ", size=2)


def detect_indent(line: str) -> str:
    """Return the exact leading whitespace (tabs/spaces) of a line."""
    m = _LEADING_WS_RE.match(line)
    return m.group(0) if m else ""


def detect_indent_style(text: str) -> IndentStyle:
    """
    Guess the indentation unit of a whole document.

    Any tab-indented line makes the document tab-indented. Otherwise the
    unit is the smallest non-zero space indent; documents with no indented
    lines fall back to two spaces.
    """
    indents = [ws for ws in (detect_indent(ln) for ln in split_lines(text)) if ws]
    if not indents:
        return DEFAULT_INDENT_STYLE
    if any("\t" in ws for ws in indents):
        return IndentStyle(char="\t", size=1)
    return IndentStyle(char=" ", size=min(len(ws) for ws in indents))


def reindent_lines(lines: Iterable[str], base_indent: str) -> List[str]:
    """
    Stamp `base_indent` onto every non-blank line in place of its own indent.

    Blank lines pass through untouched so no trailing whitespace is injected.
    """
    return [ln if not ln.strip() else base_indent + ln.strip() for ln in lines]
