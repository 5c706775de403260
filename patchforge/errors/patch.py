# patchforge/errors/patch.py
from __future__ import annotations


class PatchError(Exception):
    """
    Base class for every failure the engine reports.

    `kind` is a stable identifier hosts can branch on; `message` is the
    default human-readable text for the category.
    """

    kind = "patch_error"
    message = "Patch failed"

    def __init__(self, message: str | None = None, *, debug: str | None = None):
        super().__init__(message or self.message)
        self.debug = debug


class FormatError(PatchError):
    kind = "format"
    message = (
        "Invalid patch format. Expected OLD:/NEW:, [OLD]/[NEW], "
        "or <<<<<<< SEARCH ... ======= ... >>>>>>> REPLACE"
    )


class EmptyBlockError(PatchError):
    kind = "empty_block"
    message = "Empty code block provided"


class NoMatchError(PatchError):
    kind = "no_match"
    message = (
        "No matches found. Try including more unique context lines "
        "or lowering minConfidence."
    )


class IndexOutOfRangeError(PatchError):
    kind = "index_out_of_range"
    message = "Match index out of range"
