from dataclasses import dataclass
from typing import Tuple

from .options import MatchStrategy


@dataclass(frozen=True)
class Match:
    """One candidate location for the search block: lines [start_line, end_line)."""

    start_line: int
    end_line: int
    base_indent: str
    confidence: float
    similarity: float
    context_before: Tuple[str, ...] = ()
    context_after: Tuple[str, ...] = ()
    context_match_length: int = 0  # matched prefix+suffix lines; context anchored only
    strategy: MatchStrategy = MatchStrategy.FIXED_WINDOW

    @property
    def line_count(self) -> int:
        return self.end_line - self.start_line

    @property
    def key(self) -> Tuple[int, int]:
        return (self.start_line, self.end_line)
