from .indent import IndentStyle
from .match import Match
from .options import DEFAULT_MIN_CONFIDENCE, MatchStrategy, PatchOptions
from .patch import PatchInput, PatchResult

__all__ = [
    "IndentStyle",
    "Match",
    "MatchStrategy",
    "PatchOptions",
    "DEFAULT_MIN_CONFIDENCE",
    "PatchInput",
    "PatchResult",
]
