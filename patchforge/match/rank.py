# patchforge/match/rank.py
from __future__ import annotations

from typing import Iterable, List

from ..models.match import Match

# Context-anchored confidences this close to the group leader count as a tie.
CONTEXT_TIE_EPSILON = 0.1


def dedupe_matches(matches: Iterable[Match]) -> List[Match]:
    """Drop repeated (start_line, end_line) ranges; the first occurrence wins."""
    seen: set[tuple[int, int]] = set()
    unique: List[Match] = []
    for m in matches:
        if m.key in seen:
            continue
        seen.add(m.key)
        unique.append(m)
    return unique


def rank_matches(matches: Iterable[Match], block_size: int, tie_epsilon: float = 0.0) -> List[Match]:
    """
    Order matches best first.

    Confidence descending. Matches within `tie_epsilon` of the leader of
    their run are reordered by more matched context, then by a window
    length closer to `block_size`. Anything still tied keeps encounter order.
    """
    ordered = sorted(dedupe_matches(matches), key=lambda m: -m.confidence)
    ranked: List[Match] = []
    i = 0
    while i < len(ordered):
        leader = ordered[i].confidence
        j = i + 1
        while j < len(ordered) and leader - ordered[j].confidence <= tie_epsilon:
            j += 1
        group = ordered[i:j]
        group.sort(key=lambda m: (-m.context_match_length, abs(m.line_count - block_size)))
        ranked.extend(group)
        i = j
    return ranked
