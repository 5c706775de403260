from .core import apply_patch, find_matches, patch, preview_patch, resolve_patch_input
from .commit import apply_replacement
from .extract import parse_patch_input
from .match import levenshtein_distance, similarity_ratio
from .models import Match, MatchStrategy, PatchInput, PatchOptions, PatchResult
from .preview import render_preview
from .utils import detect_indent, detect_indent_style
from .errors import (
    EmptyBlockError,
    FormatError,
    IndexOutOfRangeError,
    NoMatchError,
    PatchError,
)

__all__ = [
    "patch",
    "apply_patch",
    "preview_patch",
    "find_matches",
    "resolve_patch_input",
    "apply_replacement",
    "render_preview",
    "parse_patch_input",
    "levenshtein_distance",
    "similarity_ratio",
    "detect_indent",
    "detect_indent_style",
    "Match",
    "MatchStrategy",
    "PatchInput",
    "PatchOptions",
    "PatchResult",
    "PatchError",
    "FormatError",
    "EmptyBlockError",
    "NoMatchError",
    "IndexOutOfRangeError",
]
