from .markers import (
    PARSERS,
    LineMarkerParser,
    looks_like_marker_patch,
    matching_parsers,
    parse_patch_input,
)

__all__ = [
    "PARSERS",
    "LineMarkerParser",
    "parse_patch_input",
    "looks_like_marker_patch",
    "matching_parsers",
]
