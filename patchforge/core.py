# patchforge/core.py
"""
Public entry points.

    patch(document, text)          -> PatchResult, ranked candidates
    apply_patch(document, text)    -> rewritten document or None
    preview_patch(document, text)  -> diff-like preview or None
    find_matches(document, search) -> ranked candidates for a bare search block

`text` is either a marker patch (OLD:/NEW:, [OLD]/[NEW] or
<<<<<<< SEARCH/=======/>>>>>>> REPLACE) or a plain code block that serves as
both the search text and its own replacement. Failures come back as values,
never as exceptions.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from ._logging import resolve_logger
from .commit.apply import apply_replacement
from .errors import EmptyBlockError, FormatError, NoMatchError, PatchError
from .extract.markers import looks_like_marker_patch, matching_parsers, parse_patch_input
from .match.rank import CONTEXT_TIE_EPSILON, rank_matches
from .match.search import search_windows
from .models.match import Match
from .models.options import MatchStrategy, PatchOptions
from .models.patch import PatchInput, PatchResult
from .preview import render_preview
from .utils.indent import detect_indent_style
from .utils.text import split_lines, trim_blank_lines

__all__ = ["patch", "apply_patch", "preview_patch", "find_matches", "resolve_patch_input"]


def resolve_patch_input(
    text: str, options: Optional[PatchOptions] = None
) -> Tuple[PatchInput, PatchOptions]:
    """
    Turn raw patch text into a search/replace pair and fully resolved options.

    Marker patches default to the fixed window strategy; plain blocks are
    their own replacement and default to the context anchored strategy.

    Raises:
        EmptyBlockError: the input or its search block is blank.
        FormatError: markers are present but incomplete, or a plain block
            was given with the fixed window strategy forced.
    """
    options = options or PatchOptions()
    if not text or not text.strip():
        raise EmptyBlockError()

    parsed = parse_patch_input(text)
    if parsed is not None:
        if not parsed.search.strip():
            raise EmptyBlockError()
        return parsed, options.resolved(MatchStrategy.FIXED_WINDOW)

    if looks_like_marker_patch(text):
        raise FormatError(debug=f"Incomplete or misordered markers: {', '.join(matching_parsers(text))}")
    if options.strategy is MatchStrategy.FIXED_WINDOW:
        raise FormatError(debug="Fixed window matching needs a search/replace pair")

    block = trim_blank_lines(text)
    return PatchInput(search=block, replace=block), options.resolved(MatchStrategy.CONTEXT_ANCHORED)


def _find(document: str, search: str, options: PatchOptions, log) -> List[Match]:
    block_lines = split_lines(trim_blank_lines(search))
    if not block_lines or not any(ln.strip() for ln in block_lines):
        return []
    doc_lines = split_lines(document)
    log.debug(
        f"searching {len(block_lines)} line(s) in {len(doc_lines)} line document "
        f"(strategy={options.strategy.value}, min_confidence={options.min_confidence:.2f}, "
        f"fuzzy={options.fuzzy_match})"
    )
    candidates = search_windows(doc_lines, block_lines, options, log)
    epsilon = CONTEXT_TIE_EPSILON if options.strategy is MatchStrategy.CONTEXT_ANCHORED else 0.0
    ranked = rank_matches(candidates, len(block_lines), tie_epsilon=epsilon)
    log.debug(f"{len(candidates)} candidate(s), {len(ranked)} after dedupe")
    return ranked


def find_matches(
    document: str,
    search: str,
    options: Optional[PatchOptions] = None,
    *,
    logger=None,
    log: bool = False,
) -> List[Match]:
    """Ranked matches of a bare search block; empty when nothing qualifies."""
    lg = resolve_logger(logger=logger, enabled=log, name=__name__)
    resolved = (options or PatchOptions()).resolved(MatchStrategy.FIXED_WINDOW)
    return _find(document, search, resolved, lg)


def _no_match_debug(document: str, search: str) -> str:
    block_lines = split_lines(search)
    return (
        f"Searched for {len(block_lines)} lines. "
        f'First: "{block_lines[0].strip()[:40]}", '
        f'Last: "{block_lines[-1].strip()[:40]}". '
        f"Document indent: {detect_indent_style(document).describe()}"
    )


def _failure(exc: PatchError) -> PatchResult:
    return PatchResult(success=False, error=str(exc), error_kind=exc.kind, debug=exc.debug)


def _run(document: str, text: str, options: Optional[PatchOptions], log) -> Tuple[PatchResult, Optional[PatchInput]]:
    try:
        patch_input, resolved = resolve_patch_input(text, options)
    except PatchError as exc:
        log.debug(f"patch rejected ({exc.kind}): {exc}")
        return _failure(exc), None

    matches = _find(document, patch_input.search, resolved, log)
    if not matches:
        exc = NoMatchError(debug=_no_match_debug(document, patch_input.search))
        log.debug(f"patch rejected ({exc.kind}): {exc.debug}")
        return _failure(exc), patch_input
    return PatchResult(success=True, matches=tuple(matches)), patch_input


def patch(
    document: str,
    text: str,
    options: Optional[PatchOptions] = None,
    *,
    logger=None,
    log: bool = False,
) -> PatchResult:
    """
    Find every place in `document` where the patch could apply.

    Returns a PatchResult whose matches are ranked best first. On failure
    `success` is False and `error`/`error_kind` name the reason:
    "empty_block", "format" or "no_match".
    """
    lg = resolve_logger(logger=logger, enabled=log, name=__name__)
    result, _ = _run(document, text, options, lg)
    return result


def _select(
    document: str, text: str, match_index: int, options: Optional[PatchOptions], log
) -> Optional[Tuple[Match, PatchInput]]:
    result, patch_input = _run(document, text, options, log)
    if not result.success or patch_input is None:
        return None
    try:
        return result.match_at(match_index), patch_input
    except PatchError as exc:
        log.debug(f"patch rejected ({exc.kind}): {exc}")
        return None


def apply_patch(
    document: str,
    text: str,
    match_index: int = 0,
    options: Optional[PatchOptions] = None,
    *,
    logger=None,
    log: bool = False,
) -> Optional[str]:
    """Rewrite `document` at the chosen match; None if patching fails."""
    lg = resolve_logger(logger=logger, enabled=log, name=__name__)
    selected = _select(document, text, match_index, options, lg)
    if selected is None:
        return None
    match, patch_input = selected
    lg.debug(f"applying at lines [{match.start_line}, {match.end_line})")
    return apply_replacement(document, match, patch_input.replace)


def preview_patch(
    document: str,
    text: str,
    match_index: int = 0,
    options: Optional[PatchOptions] = None,
    *,
    logger=None,
    log: bool = False,
) -> Optional[str]:
    """Diff-like preview of the chosen match; None if patching fails."""
    lg = resolve_logger(logger=logger, enabled=log, name=__name__)
    selected = _select(document, text, match_index, options, lg)
    if selected is None:
        return None
    match, patch_input = selected
    return render_preview(document, match, patch_input.replace)
