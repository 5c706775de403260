from .patch import (
    EmptyBlockError,
    FormatError,
    IndexOutOfRangeError,
    NoMatchError,
    PatchError,
)

__all__ = [
    "PatchError",
    "FormatError",
    "EmptyBlockError",
    "NoMatchError",
    "IndexOutOfRangeError",
]
