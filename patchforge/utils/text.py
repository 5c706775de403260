# patchforge/utils/text.py
from typing import List


def normalize_line_endings(text: str) -> str:
    """Fold CRLF and bare CR into LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def split_lines(text: str) -> List[str]:
    """
    Split on LF after normalizing line endings.

    Unlike str.splitlines(), a trailing newline yields a final empty line so
    that "\\n".join(split_lines(t)) reproduces the normalized text exactly.
    """
    return normalize_line_endings(text).split("\n")


def trim_blank_lines(text: str) -> str:
    """
    Drop leading and trailing blank lines from a block.

    Interior blank lines and the indentation of the first kept line survive.
    """
    lines = split_lines(text)
    start, end = 0, len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return "\n".join(lines[start:end])
