# patchforge/match/search.py
"""
Window search over a document.

Two strategies share one entry point, `search_windows`:

- FIXED_WINDOW slides windows of N, N-1 and N+1 lines (N = block length)
  over every offset and scores the whole block against each window.
- CONTEXT_ANCHORED shrinks the window from N down to max(3, N // 2) lines
  and scores each offset by how many leading and trailing block lines agree
  with the document, so only the context around a change has to be right.
"""
from __future__ import annotations

import logging
from typing import List, Sequence

from ..models.match import Match
from ..models.options import MatchStrategy, PatchOptions
from ..utils.indent import detect_indent
from .scoring import acceptance_threshold, score_context_window, score_fixed_window
from .similarity import lines_match

# Once a window size produces a match above this, smaller sizes are skipped.
EARLY_STOP_CONFIDENCE = 0.7
MIN_CONTEXT_MATCH = 2
MIN_CONTEXT_WINDOW = 3


def _build_match(
    doc_lines: Sequence[str],
    start: int,
    size: int,
    confidence: float,
    similarity: float,
    options: PatchOptions,
    context_match_length: int = 0,
) -> Match:
    end = start + size
    ctx = options.context_lines
    return Match(
        start_line=start,
        end_line=end,
        base_indent=detect_indent(doc_lines[start]) if start < len(doc_lines) else "",
        confidence=confidence,
        similarity=similarity,
        context_before=tuple(doc_lines[max(0, start - ctx) : start]),
        context_after=tuple(doc_lines[end : end + ctx]),
        context_match_length=context_match_length,
        strategy=options.strategy or MatchStrategy.FIXED_WINDOW,
    )


# ---------- fixed window ----------

def _fixed_window_sizes(block_size: int, doc_size: int, fuzzy: bool) -> List[int]:
    """Exact length first; the +/-1 drift sizes only make sense when fuzzy."""
    sizes = [block_size]
    if fuzzy:
        sizes += [block_size - 1, block_size + 1]
    return [s for s in sizes if 1 <= s <= doc_size]


def find_fixed_window_matches(
    doc_lines: Sequence[str],
    block_lines: Sequence[str],
    options: PatchOptions,
    log: logging.Logger,
) -> List[Match]:
    block_size = len(block_lines)
    matches: List[Match] = []
    for size in _fixed_window_sizes(block_size, len(doc_lines), options.fuzzy_match):
        threshold = acceptance_threshold(options.min_confidence, size, block_size)
        found = 0
        for start in range(len(doc_lines) - size + 1):
            score = score_fixed_window(doc_lines[start : start + size], block_lines, options.fuzzy_match)
            if score.confidence < threshold:
                continue
            matches.append(
                _build_match(doc_lines, start, size, score.confidence, score.similarity, options)
            )
            found += 1
        log.debug(f"fixed window size={size} threshold={threshold:.2f}: {found} candidate(s)")
    return matches


# ---------- context anchored ----------

def common_prefix_length(
    block_lines: Sequence[str], doc_lines: Sequence[str], start: int, fuzzy: bool
) -> int:
    """Leading block lines that agree with the document from `start`, up to the first miss."""
    count = 0
    limit = min(len(block_lines), len(doc_lines) - start)
    for i in range(limit):
        if not lines_match(block_lines[i], doc_lines[start + i], fuzzy):
            break
        count += 1
    return count


def common_suffix_length(
    block_lines: Sequence[str], doc_lines: Sequence[str], end_index: int, fuzzy: bool
) -> int:
    """Trailing block lines that agree with the document backward from `end_index` (inclusive)."""
    count = 0
    block_end = len(block_lines) - 1
    for i in range(min(block_end, end_index) + 1):
        if not lines_match(block_lines[block_end - i], doc_lines[end_index - i], fuzzy):
            break
        count += 1
    return count


def _context_window_sizes(block_size: int) -> range:
    # Blocks shorter than the minimum window are only tried at full size.
    floor = min(block_size, max(MIN_CONTEXT_WINDOW, block_size // 2))
    return range(block_size, floor - 1, -1)


def find_context_anchored_matches(
    doc_lines: Sequence[str],
    block_lines: Sequence[str],
    options: PatchOptions,
    log: logging.Logger,
) -> List[Match]:
    block_size = len(block_lines)
    fuzzy = options.fuzzy_match
    matches: List[Match] = []
    for size in _context_window_sizes(block_size):
        if size > len(doc_lines):
            continue
        best_at_size = 0.0
        for start in range(len(doc_lines) - size + 1):
            prefix = common_prefix_length(block_lines, doc_lines, start, fuzzy)
            suffix = common_suffix_length(block_lines, doc_lines, start + size - 1, fuzzy)
            context_match_length = prefix + suffix
            if context_match_length < MIN_CONTEXT_MATCH or not (prefix >= 1 or suffix >= 1):
                continue
            score = score_context_window(context_match_length, size, block_size)
            if score.confidence < options.min_confidence:
                continue
            matches.append(
                _build_match(
                    doc_lines, start, size, score.confidence, score.similarity, options,
                    context_match_length=context_match_length,
                )
            )
            best_at_size = max(best_at_size, score.confidence)
        log.debug(f"context window size={size}: best confidence {best_at_size:.3f}")
        if best_at_size > EARLY_STOP_CONFIDENCE:
            break
    return matches


def search_windows(
    doc_lines: Sequence[str],
    block_lines: Sequence[str],
    options: PatchOptions,
    log: logging.Logger,
) -> List[Match]:
    """Unranked candidates for `block_lines` using `options.strategy`."""
    if not block_lines or not doc_lines:
        return []
    if options.strategy is MatchStrategy.CONTEXT_ANCHORED:
        return find_context_anchored_matches(doc_lines, block_lines, options, log)
    return find_fixed_window_matches(doc_lines, block_lines, options, log)
