# patchforge/match/scoring.py
"""
Confidence scoring for candidate windows.

Fixed window:
    exact normalized match        -> confidence 1.0
    fuzzy disabled, not exact     -> confidence 0.0
    otherwise                     -> lines_similarity(window, block)
                                     minus 0.1 per line of length drift

Context anchored:
    confidence = 0.7 * min(1, matched_context / N) + 0.3 * (window / N)
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .similarity import average_similarity, blocks_equal, lines_similarity

LENGTH_STEP_PENALTY = 0.1
# Windows whose length differs from the block must clear a stricter bar.
LENGTH_ADJUSTED_MARGIN = 0.05

CONTEXT_WEIGHT = 7  # tenths
SIZE_WEIGHT = 3     # tenths


@dataclass(frozen=True)
class Score:
    confidence: float
    similarity: float


NO_SCORE = Score(confidence=0.0, similarity=0.0)
PERFECT_SCORE = Score(confidence=1.0, similarity=1.0)


def score_fixed_window(
    window_lines: Sequence[str], block_lines: Sequence[str], fuzzy: bool = True
) -> Score:
    """
    Score a window laid directly over the document against the whole block.

    `similarity` is the plain per-line average; `confidence` carries both
    length penalties.
    """
    if blocks_equal(window_lines, block_lines):
        return PERFECT_SCORE
    if not fuzzy:
        return NO_SCORE
    raw = average_similarity(window_lines, block_lines)
    penalized = lines_similarity(window_lines, block_lines)
    drift = abs(len(window_lines) - len(block_lines))
    confidence = max(0.0, penalized - LENGTH_STEP_PENALTY * drift)
    return Score(confidence=min(1.0, confidence), similarity=min(1.0, raw))


def acceptance_threshold(min_confidence: float, window_size: int, block_size: int) -> float:
    if window_size != block_size:
        return min_confidence + LENGTH_ADJUSTED_MARGIN
    return min_confidence


def score_context_window(context_match_length: int, window_size: int, block_size: int) -> Score:
    """Context agreement dominates; how much of the block the window spans breaks ties."""
    if block_size <= 0:
        return NO_SCORE
    context_ratio = min(1.0, context_match_length / block_size)
    size_ratio = window_size / block_size
    # weights in tenths keep a full-size, fully anchored window at exactly 1.0
    confidence = min(1.0, (CONTEXT_WEIGHT * context_ratio + SIZE_WEIGHT * size_ratio) / 10)
    return Score(confidence=confidence, similarity=confidence)
