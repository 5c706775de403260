# patchforge/match/similarity.py
from __future__ import annotations

from typing import List, Sequence

from rapidfuzz.distance import Levenshtein

# Normalized lines at or above this ratio count as the same line in fuzzy mode.
FUZZY_LINE_THRESHOLD = 0.9


def levenshtein_distance(a: str, b: str) -> int:
    """Unit-cost edit distance (insert, delete, substitute)."""
    return Levenshtein.distance(a, b)


def similarity_ratio(a: str, b: str) -> float:
    """1 - distance / longest length; two empty strings are identical."""
    max_len = max(len(a), len(b))
    if max_len == 0:
        return 1.0
    return 1.0 - (levenshtein_distance(a, b) / max_len)


def normalize_line(line: str) -> str:
    """Indentation and trailing blanks are ignored; interior whitespace is not."""
    return line.strip()


def normalize_lines(lines: Sequence[str]) -> List[str]:
    return [normalize_line(ln) for ln in lines]


def lines_match(a: str, b: str, fuzzy: bool = True) -> bool:
    """Whether two lines are the same line, exactly or (fuzzy) nearly."""
    norm_a = normalize_line(a)
    norm_b = normalize_line(b)
    if norm_a == norm_b:
        return True
    if fuzzy:
        return similarity_ratio(norm_a, norm_b) >= FUZZY_LINE_THRESHOLD
    return False


def blocks_equal(a_lines: Sequence[str], b_lines: Sequence[str]) -> bool:
    """Exact match of two line blocks after normalization."""
    if len(a_lines) != len(b_lines):
        return False
    return all(normalize_line(x) == normalize_line(y) for x, y in zip(a_lines, b_lines))


def average_similarity(a_lines: Sequence[str], b_lines: Sequence[str]) -> float:
    """Mean per-line ratio over the overlapping prefix of two blocks."""
    overlap = min(len(a_lines), len(b_lines))
    if overlap == 0:
        return 0.0
    total = sum(
        similarity_ratio(normalize_line(a_lines[i]), normalize_line(b_lines[i]))
        for i in range(overlap)
    )
    return total / overlap


def lines_similarity(a_lines: Sequence[str], b_lines: Sequence[str]) -> float:
    """
    Block similarity: average per-line ratio, scaled down when the blocks
    differ in length by `1 - (|dlen| / maxlen) * 0.5`.
    """
    sim = average_similarity(a_lines, b_lines)
    if len(a_lines) != len(b_lines):
        max_len = max(len(a_lines), len(b_lines))
        length_penalty = 1.0 - (abs(len(a_lines) - len(b_lines)) / max_len) * 0.5
        sim *= length_penalty
    return sim
