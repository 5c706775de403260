# patchforge/utils/__init__.py
from .indent import detect_indent, detect_indent_style, reindent_lines
from .text import normalize_line_endings, split_lines, trim_blank_lines

__all__ = [
    "detect_indent",
    "detect_indent_style",
    "reindent_lines",
    "normalize_line_endings",
    "split_lines",
    "trim_blank_lines",
]
