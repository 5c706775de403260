from dataclasses import dataclass
from typing import Optional, Tuple

from ..errors.patch import IndexOutOfRangeError
from .match import Match


@dataclass(frozen=True)
class PatchInput:
    """A search/replace pair extracted from raw patch text."""

    search: str
    replace: str


@dataclass(frozen=True)
class PatchResult:
    """Outcome of `patch()`. `matches` is ordered best first."""

    success: bool
    matches: Tuple[Match, ...] = ()
    error: Optional[str] = None
    error_kind: Optional[str] = None
    debug: Optional[str] = None

    @property
    def best(self) -> Optional[Match]:
        return self.matches[0] if self.matches else None

    def match_at(self, index: int) -> Match:
        """Return the match at `index`; raises IndexOutOfRangeError otherwise."""
        if not 0 <= index < len(self.matches):
            raise IndexOutOfRangeError(
                f"Match index {index} out of range ({len(self.matches)} match(es))"
            )
        return self.matches[index]
