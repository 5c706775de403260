# patchforge/commit/apply.py
from __future__ import annotations

from typing import List

from ..models.match import Match
from ..utils.indent import reindent_lines
from ..utils.text import split_lines, trim_blank_lines


def replacement_lines(replacement: str, base_indent: str) -> List[str]:
    """
    Split and re-indent replacement text for splicing at a match.

    An empty replacement yields no lines, which turns the splice into a
    deletion.
    """
    body = trim_blank_lines(replacement)
    if not body:
        return []
    return reindent_lines(split_lines(body), base_indent)


def apply_replacement(document: str, match: Match, replacement: str) -> str:
    """
    Return `document` with lines [match.start_line, match.end_line) replaced.

    Line endings are normalized to LF; neither argument is modified.
    """
    doc_lines = split_lines(document)
    new_lines = replacement_lines(replacement, match.base_indent)
    out = doc_lines[: match.start_line] + new_lines + doc_lines[match.end_line :]
    return "\n".join(out)
