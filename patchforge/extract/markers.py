# patchforge/extract/markers.py
"""
Marker-based extraction of a search/replace pair from free-form text.

Three conventions are recognised, tried in order:

1. Colon markers:
    OLD:
    old content
    NEW:
    new content

2. Bracket markers:
    [OLD]
    old content
    [NEW]
    new content

3. Conflict-style markers:
    <<<<<<< SEARCH
    old content
    =======
    new content
    >>>>>>> REPLACE

Each convention is a `LineMarkerParser`; supporting another one means
appending a parser to `PARSERS`.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Pattern, Sequence, Tuple

from ..models.patch import PatchInput
from ..utils.text import split_lines, trim_blank_lines


def _marker(pattern: str, flags: int = 0) -> Pattern[str]:
    """A marker occupies a whole line; surrounding blanks are tolerated."""
    return re.compile(r"[ \t]*" + pattern + r"[ \t]*", flags)


def _find_line(lines: Sequence[str], marker: Pattern[str], start: int) -> int:
    for i in range(start, len(lines)):
        if marker.fullmatch(lines[i]):
            return i
    return -1


@dataclass(frozen=True)
class LineMarkerParser:
    """
    Extract the bodies between whole-line markers.

    With `end_marker` set, all three markers are required and the replace
    body stops at it. Without one, the replace body runs until the next
    search marker or the end of input.
    """

    name: str
    search_marker: Pattern[str]
    replace_marker: Pattern[str]
    end_marker: Optional[Pattern[str]] = None
    # markers distinctive enough to flag a malformed attempt at this format
    signature: Tuple[Pattern[str], ...] = ()
    # signature must sit on the first non-blank line rather than anywhere
    signature_leads: bool = False

    def looks_like(self, raw: str) -> bool:
        markers = self.signature or (self.search_marker, self.replace_marker)
        lines = split_lines(raw)
        if self.signature_leads:
            first = next((ln for ln in lines if ln.strip()), None)
            return first is not None and any(m.fullmatch(first) for m in markers)
        return any(_find_line(lines, m, 0) >= 0 for m in markers)

    def parse(self, raw: str) -> Optional[PatchInput]:
        lines = split_lines(raw)
        search_at = _find_line(lines, self.search_marker, 0)
        if search_at < 0:
            return None
        replace_at = _find_line(lines, self.replace_marker, search_at + 1)
        if replace_at < 0:
            return None
        if self.end_marker is not None:
            end_at = _find_line(lines, self.end_marker, replace_at + 1)
            if end_at < 0:
                return None
        else:
            end_at = _find_line(lines, self.search_marker, replace_at + 1)
            if end_at < 0:
                end_at = len(lines)

        search = trim_blank_lines("\n".join(lines[search_at + 1 : replace_at]))
        replace = trim_blank_lines("\n".join(lines[replace_at + 1 : end_at]))
        return PatchInput(search=search, replace=replace)


COLON_PARSER = LineMarkerParser(
    name="old_new_colon",
    search_marker=_marker(r"OLD:", re.IGNORECASE),
    replace_marker=_marker(r"NEW:", re.IGNORECASE),
    # flagged as malformed only when an unindented upper-case OLD: leads the input
    signature=(re.compile(r"OLD:[ \t]*"),),
    signature_leads=True,
)

BRACKET_PARSER = LineMarkerParser(
    name="old_new_bracket",
    search_marker=_marker(r"\[OLD\]", re.IGNORECASE),
    replace_marker=_marker(r"\[NEW\]", re.IGNORECASE),
    signature=(re.compile(r"\[OLD\][ \t]*"),),
    signature_leads=True,
)

CONFLICT_PARSER = LineMarkerParser(
    name="search_replace",
    search_marker=_marker(r"<<<<<<< SEARCH"),
    replace_marker=_marker(r"======="),
    end_marker=_marker(r">>>>>>> REPLACE"),
    signature=(_marker(r"<<<<<<< SEARCH"), _marker(r">>>>>>> REPLACE")),
)

PARSERS: Tuple[LineMarkerParser, ...] = (COLON_PARSER, BRACKET_PARSER, CONFLICT_PARSER)


def parse_patch_input(
    raw: str, parsers: Sequence[LineMarkerParser] = PARSERS
) -> Optional[PatchInput]:
    """Return the pair from the first parser that accepts `raw`, else None."""
    for parser in parsers:
        parsed = parser.parse(raw)
        if parsed is not None:
            return parsed
    return None


def looks_like_marker_patch(
    raw: str, parsers: Sequence[LineMarkerParser] = PARSERS
) -> bool:
    """True when `raw` carries any marker of a known convention."""
    return any(parser.looks_like(raw) for parser in parsers)


def matching_parsers(raw: str, parsers: Sequence[LineMarkerParser] = PARSERS) -> List[str]:
    """Names of the conventions whose markers appear in `raw` (for diagnostics)."""
    return [p.name for p in parsers if p.looks_like(raw)]
