# patchforge/preview.py
from __future__ import annotations

from typing import List

from .commit.apply import replacement_lines
from .models.match import Match
from .models.options import MatchStrategy
from .utils.text import split_lines


def preview_header(match: Match) -> str:
    span = f"Match at lines {match.start_line + 1}-{match.end_line}"
    confidence = f"confidence: {match.confidence * 100:.1f}%"
    if match.strategy is MatchStrategy.CONTEXT_ANCHORED:
        return f"{span} ({confidence}, {match.context_match_length} context lines matched)"
    return f"{span} ({confidence}, similarity: {match.similarity * 100:.1f}%)"


def render_preview(document: str, match: Match, replacement: str) -> str:
    """
    Render a diff-like view of one candidate:

        Match at lines 3-4 (confidence: 100.0%, similarity: 100.0%)

          context before
        - removed line
        + added line
          context after
    """
    doc_lines = split_lines(document)
    out: List[str] = [preview_header(match), ""]
    out.extend(f"  {ln}" for ln in match.context_before)
    out.extend(f"- {ln}" for ln in doc_lines[match.start_line : match.end_line])
    out.extend(f"+ {ln}" for ln in replacement_lines(replacement, match.base_indent))
    out.extend(f"  {ln}" for ln in match.context_after)
    return "\n".join(out) + "\n"
